"""Configuration models and loader for repoblog."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

CONFIG_FILENAME = "repoblog.yml"


class ProviderConfig(BaseModel):
    """Where and how repository snapshots are fetched."""

    base_url: str = Field(
        default="https://context.forgithub.com",
        description="Root URL of the content provider API.",
    )
    extension: str = Field(
        default="md",
        description="File extension filter passed to the provider as the 'ext' query parameter.",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds.")
    user_agent: str | None = Field(
        default=None,
        description="Optional User-Agent header; defaults to 'repoblog/<version>'.",
    )

    @field_validator("base_url")
    def _strip_trailing_slash(cls, value: str) -> str:
        cleaned = value.strip().rstrip("/")
        if not cleaned:
            raise ValueError("provider base_url cannot be empty")
        return cleaned

    @field_validator("extension")
    def _strip_dot(cls, value: str) -> str:
        return value.strip().lstrip(".") or "md"


class ServerConfig(BaseModel):
    """Bind address for the HTTP service."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000, ge=0, le=65535)


class Config(BaseModel):
    site_name: str = Field(default="GitHub Blog Generator")
    default_branch: str = Field(default="main")
    markdown_extensions: list[str] = Field(
        default_factory=lambda: [".md", ".mdx"],
        description="Suffixes that mark a file as a markdown document.",
    )
    description_limit: int = Field(
        default=160,
        ge=1,
        description="Maximum characters of the description used in meta tags.",
    )
    cache_control: str = Field(default="s-maxage=3600, stale-while-revalidate")
    templates_dir: Path | None = Field(
        default=None,
        description="Optional directory whose templates override the packaged ones.",
    )
    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @field_validator("markdown_extensions")
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for entry in value:
            text = entry.strip().lower()
            if not text:
                continue
            if not text.startswith("."):
                text = f".{text}"
            if text not in normalized:
                normalized.append(text)
        if not normalized:
            raise ValueError("markdown_extensions must name at least one suffix")
        return normalized

    @field_validator("default_branch")
    def _require_branch(cls, value: str) -> str:
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("default_branch cannot be empty")
        return cleaned

    @field_validator("templates_dir", mode="before")
    def _ensure_optional_path(cls, value: Any) -> Path | None:
        if value is None or value == "":
            return None
        return Path(value)


def load_config(path: str | Path) -> Config:
    """Load configuration from a YAML file or a directory containing ``repoblog.yml``.

    A directory without a config file yields the defaults. Relative paths in the
    file are resolved against the directory holding it.
    """
    candidate = Path(path)
    data: dict[str, Any] = {}
    if candidate.is_dir():
        config_file = candidate / CONFIG_FILENAME
        if config_file.exists():
            with config_file.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        base_dir = candidate.resolve()
    else:
        if not candidate.exists():
            raise FileNotFoundError(candidate)
        with candidate.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        base_dir = candidate.parent.resolve()

    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {candidate} must be a mapping.")

    cfg = Config(**data)
    if cfg.templates_dir is not None and not cfg.templates_dir.is_absolute():
        cfg.templates_dir = (base_dir / cfg.templates_dir).resolve()
    return cfg
