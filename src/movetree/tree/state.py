"""TreeState — an immutable snapshot of a loaded game and its cursor."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from movetree.notation.models import Header, Orientation
from movetree.tree.navigation import iter_line, node_at
from movetree.tree.node import ROOT_PATH, Node, Path

if TYPE_CHECKING:
    from movetree.engine.interfaces import IPositionEngine
    from movetree.settings import ParserSettings


@dataclass(slots=True, frozen=True)
class RenderView:
    """What the board renderer needs for the node under the cursor."""

    position: str
    orientation: Orientation


@dataclass(slots=True, frozen=True)
class TreeState:
    """Root node, current path and header of one game.

    ``current_path`` always resolves inside ``root``; every constructor and
    reducer transition keeps it that way.
    """

    root: Node
    current_path: Path = ROOT_PATH
    header: Header = field(default_factory=Header)
    dirty: bool = False

    def __post_init__(self) -> None:
        node_at(self.root, self.current_path)

    @classmethod
    def new(cls, root: Node, header: Header | None = None) -> TreeState:
        """Fresh state with the cursor on the starting position."""
        return cls(root=root, header=header or Header())

    # ── Derived views ────────────────────────────────────────────────────

    @property
    def current_node(self) -> Node:
        return node_at(self.root, self.current_path)

    @property
    def position(self) -> str:
        return self.current_node.position

    @property
    def orientation(self) -> Orientation:
        return self.header.orientation

    @property
    def current_line(self) -> list[Node]:
        """Nodes from the root to the cursor."""
        return list(iter_line(self.root, self.current_path))

    def render_view(self) -> RenderView:
        return RenderView(position=self.position, orientation=self.orientation)

    def with_path(self, path: Path) -> TreeState:
        if path == self.current_path:
            return self
        return replace(self, current_path=path)


def load_game(
    pgn_text: str,
    *,
    engine: IPositionEngine | None = None,
    settings: ParserSettings | None = None,
) -> TreeState:
    """Parse the first game of *pgn_text* into a fresh :class:`TreeState`.

    Raises:
        ParseError: the text is not well-formed notation.
    """
    from movetree.notation.pgn import parse_pgn

    root, header = parse_pgn(pgn_text, engine=engine, settings=settings)
    return TreeState.new(root, header)
