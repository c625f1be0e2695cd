"""Position engine package: protocol plus the python-chess implementation."""

from movetree.engine.chess_engine import ChessEngine
from movetree.engine.interfaces import (
    STARTING_FEN,
    AppliedMove,
    IPositionEngine,
    MoveRecord,
)

DefaultEngine: type[IPositionEngine] = ChessEngine

__all__ = [
    "STARTING_FEN",
    "AppliedMove",
    "ChessEngine",
    "DefaultEngine",
    "IPositionEngine",
    "MoveRecord",
]
