"""Position engine backed by python-chess."""

from __future__ import annotations

from functools import lru_cache

import chess

from movetree.engine.interfaces import AppliedMove, MoveRecord
from movetree.errors import IllegalMove, InvalidPosition


@lru_cache(maxsize=4096)
def _board_from_fen(fen: str) -> chess.Board:
    return chess.Board(fen)


class ChessEngine:
    """Applies SAN moves to FEN positions using :mod:`chess`.

    Boards are cached per FEN and copied before use, so repeated lookups of
    the same position (transpositions, re-parsing) stay cheap.
    """

    __slots__ = ()

    def initial_position(self, fen: str | None = None) -> str:
        if fen is None:
            return chess.STARTING_FEN
        try:
            board = _board_from_fen(fen.strip())
        except ValueError as exc:
            raise InvalidPosition(f"Invalid FEN {fen!r}: {exc}") from exc
        return board.fen()

    def apply_move(self, position: str, move_text: str) -> AppliedMove:
        try:
            board = _board_from_fen(position).copy(stack=False)
        except ValueError as exc:
            raise InvalidPosition(f"Invalid FEN {position!r}: {exc}") from exc

        try:
            move = board.parse_san(move_text)
        except ValueError as exc:
            raise IllegalMove(move_text, str(exc) or "not legal here") from exc
        if move == chess.Move.null():
            raise IllegalMove(move_text, "null moves are not supported")

        san = board.san(move)
        board.push(move)
        return AppliedMove(
            position=board.fen(),
            move=MoveRecord(san=san, uci=move.uci()),
        )
