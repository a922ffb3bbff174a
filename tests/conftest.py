from __future__ import annotations

from datetime import date

import pytest

from repoblog.content import FileBlob, RepoContents

SAMPLE_FILES = {
    "README.md": "# Project\n\nRepository readme.",
    "blog/2023-01-15-first.md": "# First Post\n\nThe very first post.\n",
    "blog/2024-02-01-latest.md": (
        "# Latest Post\n\n"
        "A **fresh** look at *things*.\n\n"
        "## Details\n\n"
        "Read the [docs](https://example.com).\n"
    ),
    "blog/drafts/idea.md": "Just an idea without a title.",
    "blog/assets/diagram.png": "",
}


def make_contents(files: dict[str, str], *, owner: str = "octo", repo: str = "blog", branch: str = "main") -> RepoContents:
    return RepoContents(
        owner=owner,
        repo=repo,
        branch=branch,
        files={path: FileBlob(content=text, size=len(text)) for path, text in files.items()},
    )


class StubSource:
    """Content source that returns canned snapshots and records calls."""

    def __init__(self, contents: RepoContents | None = None, error: Exception | None = None) -> None:
        self.contents = contents
        self.error = error
        self.calls: list[tuple[str, str, str]] = []
        self.closed = False

    def fetch(self, owner: str, repo: str, branch: str) -> RepoContents:
        self.calls.append((owner, repo, branch))
        if self.error is not None:
            raise self.error
        assert self.contents is not None
        return self.contents

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def sample_contents() -> RepoContents:
    return make_contents(SAMPLE_FILES)


@pytest.fixture
def fixed_today() -> date:
    return date(2020, 6, 15)
