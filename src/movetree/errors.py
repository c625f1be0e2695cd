"""Exception hierarchy shared by the notation, engine and tree layers."""

from __future__ import annotations

from collections.abc import Sequence


class MoveTreeError(Exception):
    """Base class for every error raised by :mod:`movetree`."""


class ParseError(MoveTreeError):
    """Malformed game notation.

    Args:
        offset: Character offset into the parsed text where the problem starts.
        reason: Human-readable description of the problem.
    """

    def __init__(self, offset: int, reason: str) -> None:
        super().__init__(f"{reason} at offset {offset}")
        self.offset = offset
        self.reason = reason


class PathNotFound(MoveTreeError, LookupError):
    """A path does not resolve to a node of the tree."""

    def __init__(self, path: Sequence[int], depth: int) -> None:
        super().__init__(
            f"Path {list(path)} does not resolve (failed at depth {depth})"
        )
        self.path = tuple(path)
        self.depth = depth


class InvalidEdit(MoveTreeError):
    """A structural or header edit command was rejected."""


class IllegalMove(MoveTreeError, ValueError):
    """The position engine could not apply a move from a position."""

    def __init__(self, move_text: str, reason: str) -> None:
        super().__init__(f"Illegal move {move_text!r}: {reason}")
        self.move_text = move_text
        self.reason = reason


class InvalidPosition(MoveTreeError, ValueError):
    """A position string (FEN) could not be loaded."""
