"""Position engine protocol consumed by the parser and the reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


@dataclass(slots=True, frozen=True)
class MoveRecord:
    """The move that leads from a node's parent position to the node."""

    san: str
    uci: str


@dataclass(slots=True, frozen=True)
class AppliedMove:
    """Result of applying a move: the new position and the normalised move."""

    position: str
    move: MoveRecord


class IPositionEngine(Protocol):
    """Chess rules collaborator.

    Positions are exchanged as FEN strings only, so the move tree never holds
    engine-specific objects.
    """

    def initial_position(self, fen: str | None = None) -> str:
        """Return the normalised starting FEN (standard start when *fen* is None).

        Raises:
            InvalidPosition: *fen* is not a valid position.
        """
        ...

    def apply_move(self, position: str, move_text: str) -> AppliedMove:
        """Play *move_text* (SAN) from *position*.

        Raises:
            IllegalMove: the move cannot be parsed or is not legal.
        """
        ...
