"""Immutable move-tree nodes addressed by integer paths."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from movetree.engine.interfaces import MoveRecord

Path = tuple[int, ...]
"""Child indices from the root; ``()`` addresses the root itself."""

ROOT_PATH: Path = ()


@dataclass(slots=True, frozen=True)
class Node:
    """One position of the game.

    ``children[0]`` continues the main line; later children are alternative
    variations in the order they were first played or parsed. Nodes are never
    mutated: edits build new nodes along the edited spine and share every
    untouched subtree.
    """

    position: str
    move: MoveRecord | None = None
    children: tuple[Node, ...] = ()
    comment: str = ""
    starting_comment: str = ""
    nags: tuple[int, ...] = ()

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_root(self) -> bool:
        return self.move is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def has_variations(self) -> bool:
        return len(self.children) > 1

    @property
    def san(self) -> str | None:
        return self.move.san if self.move is not None else None

    @property
    def white_to_move(self) -> bool:
        """Side to move in this node's position, read from the FEN."""
        fields = self.position.split()
        return len(fields) < 2 or fields[1] == "w"

    @property
    def fullmove_number(self) -> int:
        fields = self.position.split()
        try:
            return int(fields[5])
        except (IndexError, ValueError):
            return 1

    def child_index(self, uci: str) -> int | None:
        """Index of the child reached by the UCI move *uci*, if any."""
        for idx, child in enumerate(self.children):
            if child.move is not None and child.move.uci == uci:
                return idx
        return None

    def count(self) -> int:
        """Number of nodes in this subtree, including this node."""
        total = 0
        pending: list[Node] = [self]
        while pending:
            node = pending.pop()
            total += 1
            pending.extend(node.children)
        return total

    # ── Copy-on-write helpers ────────────────────────────────────────────

    def with_children(self, children: Sequence[Node]) -> Node:
        return replace(self, children=tuple(children))

    def with_child(self, index: int, child: Node) -> Node:
        """Return a copy whose child at *index* is replaced by *child*."""
        children = list(self.children)
        children[index] = child
        return replace(self, children=tuple(children))

    def with_appended_child(self, child: Node) -> Node:
        return replace(self, children=(*self.children, child))
