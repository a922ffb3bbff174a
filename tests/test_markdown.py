from __future__ import annotations

import re

from repoblog.markdown import (
    CODE_BLOCK_CLASS,
    DEFAULT_PASSES,
    INLINE_CODE_CLASS,
    LINK_CLASS,
    MarkupPass,
    MarkupRenderer,
    convert_bullet_lists,
    convert_code_blocks,
    convert_emphasis,
    convert_headings,
    convert_inline_code,
    convert_ordered_lists,
    render_markdown,
    wrap_paragraphs,
)


def test_pass_order() -> None:
    assert [markup_pass.name for markup_pass in DEFAULT_PASSES] == [
        "headings",
        "paragraphs",
        "emphasis",
        "code_blocks",
        "inline_code",
        "bullet_lists",
        "ordered_lists",
    ]


def test_headings_match_longest_prefix_first() -> None:
    assert convert_headings("### a\n## b\n# c") == "<h3>a</h3>\n<h2>b</h2>\n<h1>c</h1>"


def test_headings_require_a_space() -> None:
    assert convert_headings("#hashtag") == "#hashtag"


def test_paragraphs_wrap_each_line() -> None:
    assert wrap_paragraphs("one\ntwo") == "<p>one</p>\n<p>two</p>"


def test_paragraphs_skip_block_tagged_lines() -> None:
    html = "<ul>\n<li>x</li>\n</ul>"
    assert wrap_paragraphs(html) == html


def test_paragraphs_absorb_preceding_blank_lines() -> None:
    assert wrap_paragraphs("<h1>Title</h1>\n\nHello") == "<h1>Title</h1>\n<p>\nHello</p>"


def test_emphasis_and_links() -> None:
    assert convert_emphasis("**a** *b*") == "<strong>a</strong> <em>b</em>"
    assert convert_emphasis("[site](https://x.io)") == f'<a href="https://x.io" class="{LINK_CLASS}">site</a>'


def test_code_blocks_are_non_greedy() -> None:
    html = convert_code_blocks("```\na\n```\ntext\n```\nb\n```")
    assert html.count("<pre") == 2
    assert f'<pre class="{CODE_BLOCK_CLASS}"><code>\na\n</code></pre>' in html


def test_inline_code() -> None:
    assert convert_inline_code("use `x`") == f'use <code class="{INLINE_CODE_CLASS}">x</code>'


def test_bullet_list_runs_become_one_list() -> None:
    assert convert_bullet_lists("* one\n* two\n\nafter") == "<ul>\n<li>one</li>\n<li>two</li>\n</ul>\n\nafter"


def test_separated_bullet_runs_become_separate_lists() -> None:
    assert convert_bullet_lists("* a\n\n* b").count("<ul>") == 2


def test_ordered_lists() -> None:
    assert convert_ordered_lists("1. a\n2. b") == "<ol>\n<li>a</li>\n<li>b</li>\n</ol>"


def test_ordered_pass_leaves_bullet_markup_alone() -> None:
    html = "<ul>\n<li>one</li>\n</ul>"
    assert convert_ordered_lists(html) == html


def test_render_bold_and_italic() -> None:
    html = render_markdown("**bold** and *italic*")
    assert "<strong>bold</strong>" in html
    assert "<em>italic</em>" in html
    assert html == "<p><strong>bold</strong> and <em>italic</em></p>"


def test_render_fenced_code_block() -> None:
    html = render_markdown("```\ncode\n```")
    assert html.count("<pre") == 1
    match = re.search(r"<code>(.*?)</code>", html, re.DOTALL)
    assert match is not None
    assert "code" in match.group(1)


def test_render_wraps_list_markers_before_list_conversion() -> None:
    assert render_markdown("* one\n* two") == "<p>* one</p>\n<p>* two</p>"


def test_render_heading_and_paragraph() -> None:
    assert render_markdown("# Title\n\nHello") == "<h1>Title</h1>\n<p>\nHello</p>"


def test_render_passes_raw_block_html_through() -> None:
    assert render_markdown('<img src="a.png">') == '<img src="a.png">'


def test_render_normalizes_line_endings() -> None:
    assert render_markdown("a\r\nb") == "<p>a</p>\n<p>b</p>"


def test_render_is_deterministic() -> None:
    text = "# T\n\nSome *text* with `code`.\n\n1. one\n2. two\n\n```\nx\n```\n"
    assert render_markdown(text) == render_markdown(text)


def test_renderer_accepts_custom_passes() -> None:
    renderer = MarkupRenderer([MarkupPass("headings", convert_headings)])
    assert renderer.render("# x\ny") == "<h1>x</h1>\ny"
    assert [markup_pass.name for markup_pass in renderer.passes] == ["headings"]
