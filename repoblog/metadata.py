"""Derive a document's title, description and date from its text and path."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime
from typing import Callable

from .content import ExtractedMetadata, strip_markdown_extension
from .ordering import find_date_token, normalize_date_token

TITLE_RE = re.compile(r"^#\s+(.*)$", re.MULTILINE)
TITLE_LINE_RE = re.compile(r"^#\s+.*$\n*", re.MULTILINE)
BOLD_RE = re.compile(r"\*\*(.*?)\*\*")
ITALIC_RE = re.compile(r"\*(.*?)\*")

Clock = Callable[[], date]


def utc_today() -> date:
    return datetime.now(UTC).date()


def extract_metadata(content: str, path: str, *, today: Clock = utc_today) -> ExtractedMetadata:
    """Build the title, description and date shown for ``path``."""
    return ExtractedMetadata(
        title=extract_title(content, path),
        description=extract_description(content),
        date=extract_date(path, today=today),
    )


def extract_title(content: str, path: str) -> str:
    match = TITLE_RE.search(content)
    if match:
        return match.group(1).strip()
    filename = path.rsplit("/", 1)[-1]
    return strip_markdown_extension(filename)


def extract_description(content: str) -> str:
    """First paragraph under the title, else the first paragraph anywhere."""
    section = _section_after_title(content)
    if section:
        description = _first_paragraph(section)
        if description:
            return description
    return _first_paragraph(content)


def extract_date(path: str, *, today: Clock = utc_today) -> str:
    token = find_date_token(path)
    if token is not None:
        return normalize_date_token(token)
    return today().isoformat()


def strip_title_heading(content: str) -> str:
    """Drop the first level-1 heading and the blank lines right after it."""
    return TITLE_LINE_RE.sub("", content, count=1)


def strip_emphasis(text: str) -> str:
    return ITALIC_RE.sub(r"\1", BOLD_RE.sub(r"\1", text)).strip()


def _is_heading(line: str) -> bool:
    return line.startswith("#")


def _section_after_title(content: str) -> str | None:
    match = TITLE_RE.search(content)
    if match is None:
        return None
    section: list[str] = []
    # The remainder starts on the title line itself; skip that fragment.
    for line in content[match.end() :].split("\n")[1:]:
        if _is_heading(line.strip()):
            break
        section.append(line)
    return "\n".join(section)


def _first_paragraph(text: str) -> str:
    paragraph: list[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        boundary = not stripped or _is_heading(stripped)
        if paragraph and boundary:
            break
        if not boundary:
            paragraph.append(stripped)
    return strip_emphasis(" ".join(paragraph))
