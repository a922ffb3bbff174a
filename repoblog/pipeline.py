"""Compose path analysis, metadata, rendering and navigation into a page."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .content import Document, DocumentNotFound, DocumentSet
from .markdown import MarkupRenderer
from .metadata import Clock, extract_metadata, strip_title_heading, utc_today
from .navigation import NavigationNode, build_navigation_tree
from .ordering import select_default_document
from .paths import compute_base_path

logger = logging.getLogger(__name__)

GITHUB_BASE_URL = "https://github.com"


class NoContentFound(LookupError):
    """Raised when a repository has no markdown files below its root."""

    def __init__(self, owner: str, repo: str) -> None:
        super().__init__(f"No markdown files found in subdirectories of {owner}/{repo}.")
        self.owner = owner
        self.repo = repo


@dataclass(frozen=True, slots=True)
class RenderedPage:
    """Everything the page shell needs to present one document."""

    owner: str
    repo: str
    branch: str
    path: str
    title: str
    description: str
    date: str
    content_html: str
    navigation: NavigationNode
    base_path: str

    @property
    def source_path(self) -> str:
        return self.path

    @property
    def canonical_url(self) -> str:
        return document_url(self.owner, self.repo, self.branch, self.path)

    @property
    def github_blob_url(self) -> str:
        return f"{GITHUB_BASE_URL}/{self.owner}/{self.repo}/blob/{self.branch}/{self.path}"

    @property
    def github_repo_url(self) -> str:
        return f"{GITHUB_BASE_URL}/{self.owner}/{self.repo}"

    @property
    def site_url(self) -> str:
        return f"/{self.owner}/{self.repo}/tree/{self.branch}"


def document_url(owner: str, repo: str, branch: str, path: str) -> str:
    return f"/{owner}/{repo}/tree/{branch}/{path}"


class ContentPipeline:
    """Turn a document set into a rendered page for one request."""

    def __init__(self, renderer: MarkupRenderer | None = None, *, today: Clock = utc_today) -> None:
        self._renderer = renderer or MarkupRenderer()
        self._today = today

    def select_document(self, documents: DocumentSet, requested_path: str | None) -> Document:
        """Pick the requested document, falling back to the most recent one."""
        if requested_path:
            try:
                return documents.lookup(requested_path)
            except DocumentNotFound:
                logger.info("No document matches '%s'; showing the latest post.", requested_path)

        default_path = select_default_document(documents.content_paths)
        if default_path is None:
            raise DocumentNotFound(requested_path or "")
        return documents.get(default_path)

    def build(
        self,
        documents: DocumentSet,
        *,
        owner: str,
        repo: str,
        branch: str,
        requested_path: str | None = None,
    ) -> RenderedPage:
        content_paths = documents.content_paths
        if not content_paths:
            raise NoContentFound(owner, repo)

        base_path = compute_base_path(content_paths)
        document = self.select_document(documents, requested_path)
        logger.debug("Rendering %s/%s@%s:%s (base path '%s')", owner, repo, branch, document.path, base_path)

        metadata = extract_metadata(document.content, document.path, today=self._today)
        body = strip_title_heading(document.content)
        content_html = self._renderer.render(body)
        navigation = build_navigation_tree(content_paths, base_path, document.path)

        return RenderedPage(
            owner=owner,
            repo=repo,
            branch=branch,
            path=document.path,
            title=metadata.title,
            description=metadata.description,
            date=metadata.date,
            content_html=content_html,
            navigation=navigation,
            base_path=base_path,
        )
