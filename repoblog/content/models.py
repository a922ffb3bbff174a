"""Typed representations of repository snapshots and their documents."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TreeItem(BaseModel):
    """Entry of the provider's file tree listing."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(default="")
    path: str = Field(description="Repository-relative path.")
    type: Literal["blob", "tree"] = Field(default="blob")
    size: Optional[int] = Field(default=None, ge=0)
    content: Optional[str] = Field(default=None)

    @field_validator("path")
    def _strip_leading_slash(cls, value: str) -> str:
        return value.lstrip("/")


class FileBlob(BaseModel):
    """Raw file payload returned by the provider."""

    model_config = ConfigDict(extra="ignore")

    content: str = Field(default="")
    size: int = Field(default=0, ge=0)


class RepoContents(BaseModel):
    """Snapshot of an (owner, repo, branch) as returned by the content provider."""

    model_config = ConfigDict(extra="ignore")

    owner: str
    repo: str
    branch: str
    path: str = Field(default="")
    tree: list[TreeItem] = Field(default_factory=list)
    files: dict[str, FileBlob] = Field(default_factory=dict)


class Document(BaseModel):
    """A single markdown source file."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Repository-relative path without a leading slash.")
    content: str = Field(default="", description="Raw markdown text.")
    size: int = Field(default=0, ge=0)

    @field_validator("path")
    def _strip_leading_slash(cls, value: str) -> str:
        cleaned = value.lstrip("/")
        if not cleaned:
            raise ValueError("document path cannot be empty")
        return cleaned

    @property
    def filename(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    @property
    def is_root(self) -> bool:
        return "/" not in self.path


class ExtractedMetadata(BaseModel):
    """Title, description and date derived from a document."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    date: str
