"""Document sets built from provider snapshots."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping, Sequence

from .models import Document, RepoContents

logger = logging.getLogger(__name__)

DEFAULT_MARKDOWN_EXTENSIONS: tuple[str, ...] = (".md", ".mdx")


class DocumentNotFound(LookupError):
    """Raised when a requested path matches no markdown document."""

    def __init__(self, requested: str) -> None:
        super().__init__(f"No markdown document matches '{requested}'.")
        self.requested = requested


def strip_markdown_extension(
    name: str, extensions: Sequence[str] = DEFAULT_MARKDOWN_EXTENSIONS
) -> str:
    """Remove a trailing markdown suffix from ``name`` if present."""
    for suffix in sorted(extensions, key=len, reverse=True):
        if name.lower().endswith(suffix):
            return name[: -len(suffix)]
    return name


class DocumentSet:
    """All documents of one repository snapshot, in provider order."""

    def __init__(
        self,
        documents: Iterable[Document],
        *,
        extensions: Sequence[str] = DEFAULT_MARKDOWN_EXTENSIONS,
    ) -> None:
        self._documents: dict[str, Document] = {}
        for document in documents:
            self._documents[document.path] = document
        self._extensions = tuple(ext.lower() for ext in extensions)

    @classmethod
    def from_contents(
        cls,
        contents: RepoContents,
        *,
        extensions: Sequence[str] = DEFAULT_MARKDOWN_EXTENSIONS,
    ) -> "DocumentSet":
        documents = [
            Document(path=path, content=blob.content, size=blob.size)
            for path, blob in contents.files.items()
            if path.strip("/")
        ]
        return cls(documents, extensions=extensions)

    @classmethod
    def from_mapping(
        cls,
        files: Mapping[str, str],
        *,
        extensions: Sequence[str] = DEFAULT_MARKDOWN_EXTENSIONS,
    ) -> "DocumentSet":
        """Build a set from ``{path: content}``; handy for local trees and tests."""
        documents = [
            Document(path=path, content=text, size=len(text.encode("utf-8")))
            for path, text in files.items()
        ]
        return cls(documents, extensions=extensions)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents.values())

    def __contains__(self, path: object) -> bool:
        return path in self._documents

    @property
    def extensions(self) -> tuple[str, ...]:
        return self._extensions

    def get(self, path: str) -> Document:
        return self._documents[path]

    def is_markdown(self, path: str) -> bool:
        return path.lower().endswith(self._extensions)

    @property
    def markdown_paths(self) -> list[str]:
        return [path for path in self._documents if self.is_markdown(path)]

    @property
    def content_paths(self) -> list[str]:
        """Markdown paths below the repository root; root files are project docs, not posts."""
        return [path for path in self.markdown_paths if "/" in path]

    def lookup(self, requested: str) -> Document:
        """Resolve a request path to a markdown document.

        Exact matches win, then the path with a markdown suffix appended, then
        the first document (in provider order) whose path starts with the
        request.
        """
        target = requested.strip("/")
        if not target:
            raise DocumentNotFound(requested)

        candidates = self.markdown_paths
        if target in candidates:
            return self._documents[target]

        if not self.is_markdown(target):
            for suffix in self._extensions:
                if f"{target}{suffix}" in candidates:
                    return self._documents[f"{target}{suffix}"]

        for path in candidates:
            if path.startswith(target):
                logger.debug("Resolved '%s' by prefix to %s", requested, path)
                return self._documents[path]

        raise DocumentNotFound(requested)
