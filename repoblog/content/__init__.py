"""Repository snapshots, documents and derived metadata."""

from .documents import (
    DEFAULT_MARKDOWN_EXTENSIONS,
    DocumentNotFound,
    DocumentSet,
    strip_markdown_extension,
)
from .models import Document, ExtractedMetadata, FileBlob, RepoContents, TreeItem

__all__ = [
    "DEFAULT_MARKDOWN_EXTENSIONS",
    "Document",
    "DocumentNotFound",
    "DocumentSet",
    "ExtractedMetadata",
    "FileBlob",
    "RepoContents",
    "TreeItem",
    "strip_markdown_extension",
]
