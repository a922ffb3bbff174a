"""Date tokens in paths and the recency ordering of documents."""

from __future__ import annotations

import re
from datetime import date
from functools import cmp_to_key
from typing import Sequence

DATE_TOKEN_RE = re.compile(r"(\d{4}[-/]\d{2}[-/]\d{2})|(\d{4}[-/]\d{2})")


def find_date_token(path: str) -> str | None:
    """Return the leftmost date-shaped substring of ``path``, as written."""
    match = DATE_TOKEN_RE.search(path)
    return match.group(0) if match else None


def normalize_date_token(token: str) -> str:
    return token.replace("/", "-")


def parse_date_token(token: str) -> date | None:
    """Parse ``YYYY-MM-DD`` or ``YYYY-MM`` (first of month); ``None`` if invalid."""
    parts = normalize_date_token(token).split("-")
    try:
        numbers = [int(part) for part in parts]
        if len(numbers) == 3:
            return date(numbers[0], numbers[1], numbers[2])
        if len(numbers) == 2:
            return date(numbers[0], numbers[1], 1)
    except ValueError:
        return None
    return None


def _lexical(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_by_recency(a: str, b: str) -> int:
    """Pairwise comparator: newer dated paths first, otherwise plain string order."""
    token_a = find_date_token(a)
    token_b = find_date_token(b)
    if token_a is not None and token_b is not None:
        date_a = parse_date_token(token_a)
        date_b = parse_date_token(token_b)
        if date_a is not None and date_b is not None:
            return (date_b - date_a).days
    return _lexical(a, b)


def sort_by_recency(paths: Sequence[str]) -> list[str]:
    """Stable sort of ``paths`` using :func:`compare_by_recency`."""
    return sorted(paths, key=cmp_to_key(compare_by_recency))


def select_default_document(paths: Sequence[str]) -> str | None:
    ordered = sort_by_recency(paths)
    return ordered[0] if ordered else None
