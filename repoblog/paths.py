"""Locate the directory that scopes a repository's blog content."""

from __future__ import annotations

from typing import Sequence


def compute_base_path(paths: Sequence[str]) -> str:
    """Return the longest directory prefix shared by every path.

    Only directory segments count (the filename is dropped first), and the scan
    stops at the first depth where the paths disagree.
    """
    if not paths:
        return ""

    directories = [path.split("/")[:-1] for path in paths]
    min_depth = min(len(parts) for parts in directories)

    common: list[str] = []
    for index in range(min_depth):
        segment = directories[0][index]
        if all(parts[index] == segment for parts in directories):
            common.append(segment)
        else:
            break
    return "/".join(common)


def relative_to_base(path: str, base_path: str) -> str | None:
    """Strip ``base_path`` from ``path``; ``None`` when the path lies outside it."""
    if not base_path:
        return path
    prefix = f"{base_path}/"
    if not path.startswith(prefix):
        return None
    return path[len(prefix) :]
