"""Markdown to HTML as an ordered series of text substitution passes.

Each pass rewrites the whole document and hands the result to the next one,
so later passes see (and must tolerate) markup produced by earlier passes.
The order below is significant: paragraphs are wrapped before fences and
list markers are converted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Sequence

LINK_CLASS = "text-pink-400 hover:text-pink-300"
CODE_BLOCK_CLASS = "bg-gray-800 p-4 rounded-md overflow-x-auto"
INLINE_CODE_CLASS = "bg-gray-800 px-1 rounded"

HEADING_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^### (.*$)", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*$)", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*$)", re.MULTILINE), r"<h1>\1</h1>"),
)
PARAGRAPH_RE = re.compile(r"^\s*(\n)?(.+)", re.MULTILINE)
BLOCK_TAG_RE = re.compile(r"<(/)?(h|ul|ol|li|blockquote|pre|img)")
STRONG_RE = re.compile(r"\*\*(.*?)\*\*")
EM_RE = re.compile(r"\*(.*?)\*")
LINK_RE = re.compile(r"\[(.*?)\]\((.*?)\)")
CODE_BLOCK_RE = re.compile(r"```([\s\S]*?)```")
INLINE_CODE_RE = re.compile(r"`([^`]+)`")
BULLET_ITEM_RE = re.compile(r"^[ \t]*\* (.*)$")
BULLET_RUN_RE = re.compile(r"(?:^[ \t]*\* .*$\n?)+", re.MULTILINE)
ORDERED_ITEM_RE = re.compile(r"^[ \t]*\d+\. (.*)$")
ORDERED_RUN_RE = re.compile(r"(?:^[ \t]*\d+\. .*$\n?)+", re.MULTILINE)


@dataclass(frozen=True, slots=True)
class MarkupPass:
    """One named step of the rendering pipeline."""

    name: str
    apply: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.apply(text)


def convert_headings(text: str) -> str:
    # Longest prefix first so '###' is never read as '#' followed by '##'.
    for pattern, replacement in HEADING_RULES:
        text = pattern.sub(replacement, text)
    return text


def wrap_paragraphs(text: str) -> str:
    """Wrap every line in ``<p>`` unless it already carries a block-level tag.

    Leading blank lines are absorbed into the following line's match, exactly
    as the pattern dictates.
    """

    def replace(match: re.Match[str]) -> str:
        chunk = match.group(0)
        if BLOCK_TAG_RE.search(chunk):
            return chunk
        return f"<p>{chunk}</p>"

    return PARAGRAPH_RE.sub(replace, text)


def convert_emphasis(text: str) -> str:
    text = STRONG_RE.sub(r"<strong>\1</strong>", text)
    text = EM_RE.sub(r"<em>\1</em>", text)
    return LINK_RE.sub(rf'<a href="\2" class="{LINK_CLASS}">\1</a>', text)


def convert_code_blocks(text: str) -> str:
    return CODE_BLOCK_RE.sub(rf'<pre class="{CODE_BLOCK_CLASS}"><code>\1</code></pre>', text)


def convert_inline_code(text: str) -> str:
    return INLINE_CODE_RE.sub(rf'<code class="{INLINE_CODE_CLASS}">\1</code>', text)


def _list_converter(
    run_re: re.Pattern[str], item_re: re.Pattern[str], tag: str
) -> Callable[[str], str]:
    def replace(match: re.Match[str]) -> str:
        block = match.group(0)
        items = [item_re.match(line) for line in block.split("\n") if line]
        body = "".join(f"<li>{item.group(1)}</li>\n" for item in items if item)
        trailing = "\n" if block.endswith("\n") else ""
        return f"<{tag}>\n{body}</{tag}>{trailing}"

    def convert(text: str) -> str:
        return run_re.sub(replace, text)

    return convert


convert_bullet_lists = _list_converter(BULLET_RUN_RE, BULLET_ITEM_RE, "ul")
convert_ordered_lists = _list_converter(ORDERED_RUN_RE, ORDERED_ITEM_RE, "ol")


DEFAULT_PASSES: tuple[MarkupPass, ...] = (
    MarkupPass("headings", convert_headings),
    MarkupPass("paragraphs", wrap_paragraphs),
    MarkupPass("emphasis", convert_emphasis),
    MarkupPass("code_blocks", convert_code_blocks),
    MarkupPass("inline_code", convert_inline_code),
    MarkupPass("bullet_lists", convert_bullet_lists),
    MarkupPass("ordered_lists", convert_ordered_lists),
)


class MarkupRenderer:
    """Run markdown text through an ordered sequence of passes."""

    def __init__(self, passes: Sequence[MarkupPass] = DEFAULT_PASSES) -> None:
        self._passes = tuple(passes)

    @property
    def passes(self) -> tuple[MarkupPass, ...]:
        return self._passes

    def render(self, text: str) -> str:
        html = text.replace("\r\n", "\n")
        for markup_pass in self._passes:
            html = markup_pass(html)
        return html


@lru_cache(maxsize=1)
def _renderer() -> MarkupRenderer:
    return MarkupRenderer()


def render_markdown(text: str) -> str:
    """Render markdown to HTML using the default pass sequence."""
    return _renderer().render(text)
