"""Map request paths onto repository coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

DEFAULT_BRANCH = "main"


@dataclass(frozen=True, slots=True)
class HomeRoute:
    """Landing page; no repository selected."""


@dataclass(frozen=True, slots=True)
class AssetRoute:
    """Static asset request below ``/<owner>/<repo>/assets``."""

    owner: str
    repo: str
    path: str


@dataclass(frozen=True, slots=True)
class RepoRoute:
    """A document view inside a repository."""

    owner: str
    repo: str
    branch: str
    segments: tuple[str, ...] = ()

    @property
    def requested_path(self) -> str | None:
        return "/".join(self.segments) if self.segments else None


Route = HomeRoute | AssetRoute | RepoRoute


def split_path(raw_path: str) -> list[str]:
    path = urlsplit(raw_path).path
    return [unquote(part) for part in path.split("/") if part]


def parse_request_path(raw_path: str, *, default_branch: str = DEFAULT_BRANCH) -> Route:
    """Parse ``/<owner>/<repo>[/tree]/<branch>/<path...>`` style URLs."""
    parts = split_path(raw_path)
    if len(parts) < 2:
        return HomeRoute()

    owner, repo, rest = parts[0], parts[1], parts[2:]
    if not rest:
        return RepoRoute(owner, repo, default_branch)

    if rest[0] == "assets":
        return AssetRoute(owner, repo, "/".join(rest[1:]))

    if rest[0] == "tree":
        if len(rest) == 1:
            return RepoRoute(owner, repo, default_branch)
        return RepoRoute(owner, repo, rest[1], tuple(rest[2:]))

    return RepoRoute(owner, repo, rest[0], tuple(rest[1:]))
