"""Notation-layer data models: tokens, orientation and the game header."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import StrEnum


class TokenKind(StrEnum):
    """Lexical categories of PGN text."""

    TAG = "tag"
    MOVE_NUMBER = "move_number"
    MOVE = "move"
    NAG = "nag"
    COMMENT = "comment"
    OPEN = "open"
    CLOSE = "close"
    RESULT = "result"


@dataclass(slots=True, frozen=True)
class Token:
    """One lexical unit with its character offset into the source text.

    For ``TAG`` tokens ``text`` is the tag name and ``value`` the unescaped
    tag value; for ``COMMENT`` tokens ``text`` is the comment body.
    """

    kind: TokenKind
    text: str
    offset: int
    value: str = ""


class Orientation(StrEnum):
    """Which side is shown at the bottom of the board."""

    WHITE = "white"
    BLACK = "black"


RESULT_TOKENS = frozenset({"1-0", "0-1", "1/2-1/2", "*"})

# Seven Tag Roster, in export order, with the PGN placeholder values.
_ROSTER: tuple[tuple[str, str, str], ...] = (
    ("Event", "event", "?"),
    ("Site", "site", "?"),
    ("Date", "date", "????.??.??"),
    ("Round", "round", "?"),
    ("White", "white", "?"),
    ("Black", "black", "?"),
    ("Result", "result", "*"),
)

# Optional tags with a dedicated field.
_OPTIONAL: tuple[tuple[str, str], ...] = (
    ("WhiteElo", "white_elo"),
    ("BlackElo", "black_elo"),
    ("ECO", "eco"),
    ("TimeControl", "time_control"),
    ("FEN", "fen"),
)


@dataclass(slots=True, frozen=True)
class Header:
    """Game metadata independent of the move tree."""

    event: str = "?"
    site: str = "?"
    date: str = "????.??.??"
    round: str = "?"
    white: str = "?"
    black: str = "?"
    result: str = "*"
    white_elo: str | None = None
    black_elo: str | None = None
    eco: str | None = None
    time_control: str | None = None
    fen: str | None = None
    orientation: Orientation = Orientation.WHITE
    extra: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def from_tags(cls, tags: Mapping[str, str] | Iterable[tuple[str, str]]) -> Header:
        """Build a header from tag pairs; a repeated tag keeps its last value."""
        pairs = tags.items() if isinstance(tags, Mapping) else tags
        merged: dict[str, str] = {}
        for name, value in pairs:
            merged.pop(name, None)
            merged[name] = value

        kwargs: dict[str, object] = {}
        for tag, attr, _default in _ROSTER:
            if tag in merged:
                kwargs[attr] = merged.pop(tag)
        for tag, attr in _OPTIONAL:
            if tag in merged:
                kwargs[attr] = merged.pop(tag)
        if "Orientation" in merged:
            raw = merged.pop("Orientation").strip().lower()
            kwargs["orientation"] = (
                Orientation.BLACK if raw == Orientation.BLACK else Orientation.WHITE
            )
        # SetUp is implied by the presence of FEN and regenerated on export.
        merged.pop("SetUp", None)
        kwargs["extra"] = tuple(merged.items())
        return cls(**kwargs)  # type: ignore[arg-type]

    def tags(self) -> list[tuple[str, str]]:
        """Return the header as ordered PGN tag pairs."""
        pairs = [(tag, getattr(self, attr)) for tag, attr, _default in _ROSTER]
        if self.fen is not None:
            pairs.append(("SetUp", "1"))
        for tag, attr in _OPTIONAL:
            value = getattr(self, attr)
            if value is not None:
                pairs.append((tag, value))
        if self.orientation != Orientation.WHITE:
            pairs.append(("Orientation", self.orientation.value))
        pairs.extend(self.extra)
        return pairs

    def get(self, tag: str, default: str | None = None) -> str | None:
        """Look up a tag value by its PGN name."""
        for name, value in self.tags():
            if name == tag:
                return value
        return default

    def with_tag(self, tag: str, value: str) -> Header:
        """Return a copy with *tag* set to *value*."""
        return Header.from_tags([*self.tags(), (tag, value)])

    def with_orientation(self, orientation: Orientation) -> Header:
        return replace(self, orientation=orientation)
