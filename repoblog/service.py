"""Request handling: route, fetch, render and map failures to responses."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from .config import Config
from .content import DocumentSet, RepoContents
from .pages import PageRenderer
from .pipeline import ContentPipeline, NoContentFound, RenderedPage
from .provider import ContentProviderClient, UpstreamFetchError
from .routing import AssetRoute, HomeRoute, RepoRoute, parse_request_path

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


class ContentSource(Protocol):
    def fetch(self, owner: str, repo: str, branch: str) -> RepoContents:
        ...


@dataclass(slots=True)
class PageResponse:
    """Status, headers and body produced for one request."""

    status: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        return self.headers.get("Content-Type", HTML_CONTENT_TYPE)

    def encoded(self) -> bytes:
        return self.body.encode("utf-8")


class BlogService:
    """Serve blog pages for ``/<owner>/<repo>/...`` request paths."""

    def __init__(
        self,
        config: Config | None = None,
        *,
        source: ContentSource | None = None,
        pipeline: ContentPipeline | None = None,
        pages: PageRenderer | None = None,
    ) -> None:
        self._config = config or Config()
        # Only a provider client created here is closed by close().
        self._owns_source = source is None
        self._source = source or ContentProviderClient(self._config.provider)
        self._pipeline = pipeline or ContentPipeline()
        self._pages = pages or PageRenderer(self._config)

    @property
    def config(self) -> Config:
        return self._config

    def close(self) -> None:
        if self._owns_source:
            close = getattr(self._source, "close", None)
            if close is not None:
                close()

    def _cached(self, status: int, body: str) -> PageResponse:
        return PageResponse(
            status,
            body,
            {"Content-Type": HTML_CONTENT_TYPE, "Cache-Control": self._config.cache_control},
        )

    def _uncached(self, status: int, body: str) -> PageResponse:
        return PageResponse(status, body, {"Content-Type": HTML_CONTENT_TYPE})

    def load_documents(self, owner: str, repo: str, branch: str) -> DocumentSet:
        contents = self._source.fetch(owner, repo, branch)
        return DocumentSet.from_contents(contents, extensions=self._config.markdown_extensions)

    def build_page(
        self, owner: str, repo: str, branch: str, requested_path: str | None = None
    ) -> RenderedPage:
        """Fetch a repository and run the content pipeline; errors propagate."""
        documents = self.load_documents(owner, repo, branch)
        return self._pipeline.build(
            documents,
            owner=owner,
            repo=repo,
            branch=branch,
            requested_path=requested_path,
        )

    def render_page(self, page: RenderedPage) -> str:
        return self._pages.render_article(page)

    def handle(self, raw_path: str) -> PageResponse:
        route = parse_request_path(raw_path, default_branch=self._config.default_branch)

        if isinstance(route, HomeRoute):
            return self._cached(200, self._pages.render_home())

        if isinstance(route, AssetRoute):
            return self._uncached(404, "Not implemented")

        return self._handle_repo(route)

    def _handle_repo(self, route: RepoRoute) -> PageResponse:
        try:
            page = self.build_page(route.owner, route.repo, route.branch, route.requested_path)
            body = self.render_page(page)
        except UpstreamFetchError as exc:
            return self._error(exc.status_code, f"Failed to fetch repository data: {exc.message}")
        except NoContentFound as exc:
            logger.info("%s/%s has no markdown content below the root.", exc.owner, exc.repo)
            return self._cached(200, self._pages.render_no_content(exc.owner, exc.repo))
        except Exception as exc:
            logger.exception("Failed to render %s/%s@%s", route.owner, route.repo, route.branch)
            return self._error(500, f"Error processing request: {exc}")

        return self._cached(200, body)

    def _error(self, status: int, message: str) -> PageResponse:
        return self._uncached(status, self._pages.render_error(status, message))
