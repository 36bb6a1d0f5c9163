"""Rebuild a collapsed directory hierarchy from flat file paths."""

import posixpath
from collections.abc import Iterator
from dataclasses import dataclass, field

from ..graph import Graph, Node

# Everything below this segment is merged into a single bucket
NODE_MODULES = "node_modules"


@dataclass
class DirAndNodesTree:
    """A directory group: files it owns directly plus nested groups."""

    current_dir: str
    nodes: list[Node] = field(default_factory=list)
    children: list["DirAndNodesTree"] = field(default_factory=list)


@dataclass
class _DirEntry:
    """Flat index entry for one directory."""

    current_dir: str
    parent: str | None  # None for single-segment directories
    nodes: list[Node] = field(default_factory=list)


def directory_of(path: str) -> str | None:
    """Return the directory a file path belongs to.

    Args:
        path: Slash-separated file path.

    Returns:
        "node_modules" for any third-party file, None for a top-level file,
        otherwise the normalized parent directory.
    """
    parts = path.split("/")
    if NODE_MODULES in parts:
        # Package names already identify third-party files
        return NODE_MODULES
    if len(parts) == 1:
        return None
    return posixpath.normpath(posixpath.join(*parts[:-1]))


def _parent_dir(directory: str) -> str | None:
    """Return "a/b" for "a/b/c" and None for "a"."""
    head, sep, _ = directory.rpartition("/")
    return head if sep else None


def build_dir_tree(graph: Graph) -> list[DirAndNodesTree]:
    """Group graph nodes into a directory tree.

    Every directory referenced by a node is indexed together with all of its
    ancestors. Levels that own no files and have at most one child directory
    are collapsed into that child, so pass-through chains like "a/b" in
    "a/b/c/x" never become their own groups. Top-level files have no
    directory and are not placed in the tree.

    Args:
        graph: Graph whose nodes are grouped.

    Returns:
        Root groups in first-encountered order.
    """
    entries: dict[str, _DirEntry] = {}
    children: dict[str, list[str]] = {}  # parent key -> child keys, first-seen order
    roots: list[str] = []

    for node in graph.nodes:
        directory = directory_of(node.path)
        if directory is None:
            continue

        # Walk up until an indexed ancestor, then index the missing chain top-down
        missing: list[str] = []
        key: str | None = directory
        while key is not None and key not in entries:
            missing.append(key)
            key = _parent_dir(key)
        for key in reversed(missing):
            parent = _parent_dir(key)
            entries[key] = _DirEntry(key, parent)
            if parent is None:
                roots.append(key)
            else:
                children.setdefault(parent, []).append(key)

        entries[directory].nodes.append(node)

    # Pre-order, then collapse in reverse so children finish before parents
    order: list[str] = []
    stack = list(reversed(roots))
    while stack:
        key = stack.pop()
        order.append(key)
        stack.extend(reversed(children.get(key, [])))

    collapsed: dict[str, list[DirAndNodesTree]] = {}
    for key in reversed(order):
        entry = entries[key]
        child_keys = children.get(key, [])
        trees = [tree for child in child_keys for tree in collapsed.pop(child)]
        if not entry.nodes and len(child_keys) <= 1:
            collapsed[key] = trees
        else:
            collapsed[key] = [DirAndNodesTree(key, list(entry.nodes), trees)]

    return [tree for key in roots for tree in collapsed[key]]


def walk_tree(trees: list[DirAndNodesTree]) -> Iterator[tuple[int, DirAndNodesTree]]:
    """Yield (depth, tree) pairs in depth-first pre-order."""
    stack = [(0, tree) for tree in reversed(trees)]
    while stack:
        depth, tree = stack.pop()
        yield depth, tree
        stack.extend((depth + 1, child) for child in reversed(tree.children))
