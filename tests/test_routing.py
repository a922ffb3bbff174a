from __future__ import annotations

import pytest

from repoblog.routing import AssetRoute, HomeRoute, RepoRoute, parse_request_path


@pytest.mark.parametrize("raw", ["/", "", "/octo", "/octo/"])
def test_short_paths_route_home(raw: str) -> None:
    assert parse_request_path(raw) == HomeRoute()


def test_owner_and_repo_use_default_branch() -> None:
    route = parse_request_path("/octo/blog", default_branch="trunk")
    assert route == RepoRoute("octo", "blog", "trunk")
    assert route.requested_path is None


def test_tree_without_branch_uses_default_branch() -> None:
    assert parse_request_path("/octo/blog/tree/") == RepoRoute("octo", "blog", "main")


def test_tree_form() -> None:
    route = parse_request_path("/octo/blog/tree/dev/posts/2024/hello")
    assert route == RepoRoute("octo", "blog", "dev", ("posts", "2024", "hello"))
    assert route.requested_path == "posts/2024/hello"


def test_short_form_treats_third_segment_as_branch() -> None:
    route = parse_request_path("/octo/blog/dev/posts/hello.md")
    assert isinstance(route, RepoRoute)
    assert route.branch == "dev"
    assert route.requested_path == "posts/hello.md"


def test_assets() -> None:
    assert parse_request_path("/octo/blog/assets/img/a.png") == AssetRoute("octo", "blog", "img/a.png")


def test_query_string_and_escapes() -> None:
    route = parse_request_path("/octo/blog/tree/main/my%20post?x=1")
    assert isinstance(route, RepoRoute)
    assert route.requested_path == "my post"
