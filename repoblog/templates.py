"""Jinja2 environment used to render site pages."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

from .ordering import DATE_TOKEN_RE, parse_date_token

logger = logging.getLogger(__name__)

PACKAGE_TEMPLATES = "templates"


def format_date(value: str) -> str:
    """Render ``YYYY-MM-DD`` / ``YYYY-MM`` as ``March 1, 2024``; other text is returned as-is."""
    text = str(value).strip()
    if not DATE_TOKEN_RE.fullmatch(text):
        return text
    parsed = parse_date_token(text)
    if parsed is None:
        return text
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Create the template environment; ``templates_dir`` overrides packaged templates."""
    loaders: list[FileSystemLoader | PackageLoader] = []
    if templates_dir is not None:
        if templates_dir.is_dir():
            loaders.append(FileSystemLoader(str(templates_dir)))
        else:
            logger.warning(
                "Template directory %s not found; using packaged templates.",
                templates_dir,
            )
    loaders.append(PackageLoader("repoblog", PACKAGE_TEMPLATES))

    environment = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    environment.filters["format_date"] = format_date
    return environment
