"""Navigation engine: pure functions from (root, path) to a new path.

Every function here is total on a path that resolves: at a boundary (no
child, root, end of line) the input path comes back unchanged instead of an
error. Only :func:`node_at` and :func:`go_to_path` validate caller-supplied
paths and raise :class:`~movetree.errors.PathNotFound`.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from movetree.errors import PathNotFound
from movetree.tree.node import ROOT_PATH, Node, Path

# ── Lookup ───────────────────────────────────────────────────────────────────


def node_at(root: Node, path: Sequence[int]) -> Node:
    """Descend ``path[i]`` children at each depth.

    Raises:
        PathNotFound: an index is negative or out of range.
    """
    node = root
    for depth, index in enumerate(path):
        if index < 0 or index >= len(node.children):
            raise PathNotFound(path, depth)
        node = node.children[index]
    return node


def iter_line(root: Node, path: Sequence[int]) -> Iterator[Node]:
    """Yield the nodes along *path*, root first."""
    node = root
    yield node
    for depth, index in enumerate(path):
        if index < 0 or index >= len(node.children):
            raise PathNotFound(path, depth)
        node = node.children[index]
        yield node


def mainline(root: Node) -> Iterator[Node]:
    """Yield the main-line nodes after *root* (first children only)."""
    node = root
    while node.children:
        node = node.children[0]
        yield node


def mainline_path(root: Node) -> Path:
    return end_path(root, ROOT_PATH)


# ── Basic movement ───────────────────────────────────────────────────────────


def start_path() -> Path:
    return ROOT_PATH


def next_path(root: Node, path: Sequence[int]) -> Path:
    """Step into the main-line child, or stay put at a leaf."""
    current = tuple(path)
    if node_at(root, current).children:
        return (*current, 0)
    return current


def previous_path(path: Sequence[int]) -> Path:
    """Step back to the parent, or stay at the root."""
    return tuple(path[:-1])


def end_path(root: Node, path: Sequence[int]) -> Path:
    """Follow first children from *path* until a leaf.

    This is the end of the line selected by the path's own branch choices,
    not necessarily the longest variation.
    """
    steps = list(path)
    node = node_at(root, steps)
    while node.children:
        steps.append(0)
        node = node.children[0]
    return tuple(steps)


def go_to_path(root: Node, path: Sequence[int]) -> Path:
    """Validate a caller-supplied path and return it as a tuple."""
    node_at(root, path)
    return tuple(path)


# ── Variation-aware movement ─────────────────────────────────────────────────


def branch_start_path(path: Sequence[int]) -> Path:
    """First node of the innermost variation containing *path*.

    On the main line (all indices zero) this is the root.
    """
    for depth in range(len(path) - 1, -1, -1):
        if path[depth] != 0:
            return tuple(path[: depth + 1])
    return ROOT_PATH


def next_branching_path(root: Node, path: Sequence[int]) -> Path:
    """Advance along first children until a node that offers variations."""
    steps = list(path)
    node = node_at(root, steps)
    while node.children:
        steps.append(0)
        node = node.children[0]
        if node.has_variations:
            break
    return tuple(steps)


def previous_branching_path(root: Node, path: Sequence[int]) -> Path:
    """Walk back towards the root until a node that offers variations."""
    nodes = list(iter_line(root, path))
    steps = list(path)
    while steps:
        steps.pop()
        if nodes[len(steps)].has_variations:
            break
    return tuple(steps)


def sibling_path(root: Node, path: Sequence[int], step: int) -> Path:
    """Switch to a neighbouring variation at the cursor's own branch point.

    The index is clamped to the available siblings, so the result always
    resolves. The root has no siblings and is returned unchanged.
    """
    current = tuple(path)
    if not current:
        return current
    parent = node_at(root, current[:-1])
    index = min(max(current[-1] + step, 0), len(parent.children) - 1)
    return (*current[:-1], index)
