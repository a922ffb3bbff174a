"""Directory tree used for the site navigation sidebar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from .content import DEFAULT_MARKDOWN_EXTENSIONS, strip_markdown_extension
from .paths import relative_to_base


@dataclass(slots=True)
class NavigationLeaf:
    """A document entry in the navigation tree."""

    name: str
    path: str
    active: bool = False

    @property
    def display_name(self) -> str:
        return strip_markdown_extension(self.name, DEFAULT_MARKDOWN_EXTENSIONS)


@dataclass(slots=True)
class NavigationNode:
    """A directory in the navigation tree.

    Child directories and files keep their first-insertion order; directories
    are always visited before files.
    """

    name: str = ""
    directories: dict[str, "NavigationNode"] = field(default_factory=dict)
    files: list[NavigationLeaf] = field(default_factory=list)

    def child(self, name: str) -> "NavigationNode":
        """Return the child directory ``name``, creating it on first use."""
        node = self.directories.get(name)
        if node is None:
            node = NavigationNode(name=name)
            self.directories[name] = node
        return node

    def insert(self, segments: Sequence[str], path: str, *, active: bool = False) -> NavigationLeaf:
        """Place a file leaf below the directories named by ``segments[:-1]``."""
        if not segments:
            raise ValueError("cannot insert a document without path segments")
        node = self
        for segment in segments[:-1]:
            node = node.child(segment)
        leaf = NavigationLeaf(name=segments[-1], path=path, active=active)
        node.files.append(leaf)
        return leaf

    def walk(self, depth: int = 0) -> Iterator[tuple[int, "NavigationNode | NavigationLeaf"]]:
        """Yield ``(depth, entry)`` for every descendant in render order."""
        for directory in self.directories.values():
            yield depth, directory
            yield from directory.walk(depth + 1)
        for leaf in self.files:
            yield depth, leaf

    def leaves(self) -> Iterator[NavigationLeaf]:
        for _, entry in self.walk():
            if isinstance(entry, NavigationLeaf):
                yield entry

    @property
    def active_leaf(self) -> NavigationLeaf | None:
        return next((leaf for leaf in self.leaves() if leaf.active), None)

    @property
    def depth(self) -> int:
        """Levels of directories below this node."""
        if not self.directories:
            return 0
        return 1 + max(directory.depth for directory in self.directories.values())

    @property
    def is_empty(self) -> bool:
        return not self.directories and not self.files


def build_navigation_tree(
    paths: Iterable[str],
    base_path: str,
    current_path: str | None = None,
) -> NavigationNode:
    """Group ``paths`` under ``base_path`` into a directory tree.

    Paths outside ``base_path`` are skipped. The leaf whose full path equals
    ``current_path`` is marked active.
    """
    root = NavigationNode()
    for path in paths:
        relative = relative_to_base(path, base_path)
        if not relative:
            continue
        root.insert(relative.split("/"), path, active=path == current_path)
    return root
