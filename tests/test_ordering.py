from __future__ import annotations

from datetime import date

from repoblog.ordering import (
    compare_by_recency,
    find_date_token,
    parse_date_token,
    select_default_document,
    sort_by_recency,
)


def test_dated_paths_sort_newest_first() -> None:
    assert sort_by_recency(["2024-01-01/a.md", "2023-05-01/b.md"]) == [
        "2024-01-01/a.md",
        "2023-05-01/b.md",
    ]
    assert sort_by_recency(["2023-05-01/b.md", "2024-01-01/a.md"]) == [
        "2024-01-01/a.md",
        "2023-05-01/b.md",
    ]


def test_undated_paths_sort_lexically() -> None:
    assert sort_by_recency(["z.md", "a.md"]) == ["a.md", "z.md"]


def test_lexical_fallback_uses_codepoints() -> None:
    assert sort_by_recency(["b.md", "B.md", "a.md"]) == ["B.md", "a.md", "b.md"]


def test_year_month_tokens_compare_with_full_dates() -> None:
    paths = ["posts/2024-04-30-spring.md", "posts/2024/05/may.md"]
    assert sort_by_recency(paths) == ["posts/2024/05/may.md", "posts/2024-04-30-spring.md"]


def test_invalid_dates_fall_back_to_lexical_order() -> None:
    assert sort_by_recency(["2024-13-01/a.md", "2024-01-01/b.md"]) == [
        "2024-01-01/b.md",
        "2024-13-01/a.md",
    ]


def test_equal_dates_keep_input_order() -> None:
    paths = ["2024-01-01/b.md", "2024-01-01/a.md"]
    assert compare_by_recency(*paths) == 0
    assert sort_by_recency(paths) == paths


def test_sort_does_not_mutate_input() -> None:
    paths = ["z.md", "a.md"]
    sort_by_recency(paths)
    assert paths == ["z.md", "a.md"]


def test_find_date_token_returns_leftmost_match() -> None:
    assert find_date_token("2023-07/notes/2024-01-02.md") == "2023-07"
    assert find_date_token("blog/2024/03/05/post.md") == "2024/03/05"
    assert find_date_token("blog/post.md") is None


def test_parse_date_token() -> None:
    assert parse_date_token("2024/02/29") == date(2024, 2, 29)
    assert parse_date_token("2024-05") == date(2024, 5, 1)
    assert parse_date_token("2023-02-29") is None


def test_select_default_document() -> None:
    assert select_default_document(["blog/2022-01-01-a.md", "blog/2024-01-01-b.md"]) == "blog/2024-01-01-b.md"
    assert select_default_document([]) is None
