"""Render full HTML pages (home, article, empty site, errors)."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from jinja2 import Environment
from markupsafe import Markup

from .config import Config
from .navigation import NavigationLeaf
from .pipeline import RenderedPage, document_url
from .templates import build_environment


@dataclass(frozen=True, slots=True)
class ErrorPage:
    """Structured content of a rendered error response."""

    code: int
    title: str
    message: str

    @classmethod
    def for_status(cls, code: int, message: str) -> "ErrorPage":
        try:
            title = HTTPStatus(code).phrase
        except ValueError:
            title = "Error"
        return cls(code=code, title=title, message=message)


class PageRenderer:
    """Wrap rendered documents into the site layout."""

    def __init__(self, config: Config | None = None, environment: Environment | None = None) -> None:
        self._config = config or Config()
        self._environment = environment or build_environment(self._config.templates_dir)

    @property
    def environment(self) -> Environment:
        return self._environment

    def _render(self, template_name: str, **context: Any) -> str:
        template = self._environment.get_template(template_name)
        return template.render(site_name=self._config.site_name, **context)

    def render_home(self) -> str:
        return self._render("home.html", default_branch=self._config.default_branch)

    def render_navigation(self, page: RenderedPage) -> str:
        def url_for(leaf: NavigationLeaf) -> str:
            return document_url(page.owner, page.repo, page.branch, leaf.path)

        return self._render("partials/navigation.html", tree=page.navigation, url_for=url_for)

    def render_article(self, page: RenderedPage) -> str:
        limit = self._config.description_limit
        return self._render(
            "article.html",
            page=page,
            meta_description=page.description[:limit],
            navigation_html=Markup(self.render_navigation(page)),
            content_html=Markup(page.content_html),
        )

    def render_no_content(self, owner: str, repo: str) -> str:
        return self._render("empty.html", owner=owner, repo=repo)

    def render_error(self, code: int, message: str) -> str:
        return self._render("error.html", error=ErrorPage.for_status(code, message))
