"""Commands accepted by the tree reducer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from movetree.notation.models import Header, Orientation
from movetree.tree.node import Path


class CommandType(StrEnum):
    """Stable command names, shared with key maps and external dispatchers."""

    # Navigation
    GO_TO_NEXT = "GO_TO_NEXT"
    GO_TO_PREVIOUS = "GO_TO_PREVIOUS"
    GO_TO_START = "GO_TO_START"
    GO_TO_END = "GO_TO_END"
    GO_TO_PATH = "GO_TO_PATH"
    GO_TO_BRANCH_START = "GO_TO_BRANCH_START"
    GO_TO_BRANCH_END = "GO_TO_BRANCH_END"
    NEXT_BRANCHING = "NEXT_BRANCHING"
    PREVIOUS_BRANCHING = "PREVIOUS_BRANCHING"
    NEXT_BRANCH = "NEXT_BRANCH"
    PREVIOUS_BRANCH = "PREVIOUS_BRANCH"

    # Tree edits
    MAKE_MOVE = "MAKE_MOVE"
    DELETE_MOVE = "DELETE_MOVE"
    PROMOTE_VARIATION = "PROMOTE_VARIATION"
    SET_COMMENT = "SET_COMMENT"
    SET_ANNOTATION = "SET_ANNOTATION"

    # Header edits
    SET_HEADERS = "SET_HEADERS"
    SET_ORIENTATION = "SET_ORIENTATION"


class Command:
    """Base class for reducer commands."""

    type: ClassVar[CommandType]

    __slots__ = ()


# ── Navigation ───────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class GoToNext(Command):
    type: ClassVar[CommandType] = CommandType.GO_TO_NEXT


@dataclass(slots=True, frozen=True)
class GoToPrevious(Command):
    type: ClassVar[CommandType] = CommandType.GO_TO_PREVIOUS


@dataclass(slots=True, frozen=True)
class GoToStart(Command):
    type: ClassVar[CommandType] = CommandType.GO_TO_START


@dataclass(slots=True, frozen=True)
class GoToEnd(Command):
    type: ClassVar[CommandType] = CommandType.GO_TO_END


@dataclass(slots=True, frozen=True)
class GoToPath(Command):
    """Jump to an explicit path; fails with ``PathNotFound`` if it is invalid."""

    path: Sequence[int]
    type: ClassVar[CommandType] = CommandType.GO_TO_PATH


@dataclass(slots=True, frozen=True)
class GoToBranchStart(Command):
    type: ClassVar[CommandType] = CommandType.GO_TO_BRANCH_START


@dataclass(slots=True, frozen=True)
class GoToBranchEnd(Command):
    type: ClassVar[CommandType] = CommandType.GO_TO_BRANCH_END


@dataclass(slots=True, frozen=True)
class NextBranching(Command):
    type: ClassVar[CommandType] = CommandType.NEXT_BRANCHING


@dataclass(slots=True, frozen=True)
class PreviousBranching(Command):
    type: ClassVar[CommandType] = CommandType.PREVIOUS_BRANCHING


@dataclass(slots=True, frozen=True)
class NextBranch(Command):
    type: ClassVar[CommandType] = CommandType.NEXT_BRANCH


@dataclass(slots=True, frozen=True)
class PreviousBranch(Command):
    type: ClassVar[CommandType] = CommandType.PREVIOUS_BRANCH


# ── Tree edits ───────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class MakeMove(Command):
    """Play *move_text* (SAN) from the cursor, reusing an existing child."""

    move_text: str
    type: ClassVar[CommandType] = CommandType.MAKE_MOVE


@dataclass(slots=True, frozen=True)
class DeleteMove(Command):
    """Remove the subtree at *path* (the cursor when None)."""

    path: Path | None = None
    type: ClassVar[CommandType] = CommandType.DELETE_MOVE


@dataclass(slots=True, frozen=True)
class PromoteVariation(Command):
    """Make the innermost variation containing *path* the main continuation."""

    path: Path | None = None
    type: ClassVar[CommandType] = CommandType.PROMOTE_VARIATION


@dataclass(slots=True, frozen=True)
class SetComment(Command):
    text: str
    path: Path | None = None
    type: ClassVar[CommandType] = CommandType.SET_COMMENT


@dataclass(slots=True, frozen=True)
class SetAnnotation(Command):
    nags: tuple[int, ...] = ()
    path: Path | None = None
    type: ClassVar[CommandType] = CommandType.SET_ANNOTATION


# ── Header edits ─────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class SetHeaders(Command):
    header: Header
    type: ClassVar[CommandType] = CommandType.SET_HEADERS


@dataclass(slots=True, frozen=True)
class SetOrientation(Command):
    orientation: Orientation | str
    type: ClassVar[CommandType] = CommandType.SET_ORIENTATION


_SIMPLE_COMMANDS: dict[CommandType, type[Command]] = {
    CommandType.GO_TO_NEXT: GoToNext,
    CommandType.GO_TO_PREVIOUS: GoToPrevious,
    CommandType.GO_TO_START: GoToStart,
    CommandType.GO_TO_END: GoToEnd,
    CommandType.GO_TO_BRANCH_START: GoToBranchStart,
    CommandType.GO_TO_BRANCH_END: GoToBranchEnd,
    CommandType.NEXT_BRANCHING: NextBranching,
    CommandType.PREVIOUS_BRANCHING: PreviousBranching,
    CommandType.NEXT_BRANCH: NextBranch,
    CommandType.PREVIOUS_BRANCH: PreviousBranch,
}


def command_for(command_type: CommandType | str) -> Command:
    """Instantiate a parameterless command from its type name.

    Raises:
        ValueError: the type is unknown or needs arguments.
    """
    try:
        return _SIMPLE_COMMANDS[CommandType(command_type)]()
    except KeyError:
        raise ValueError(f"Command {command_type!r} needs arguments") from None
