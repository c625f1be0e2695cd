"""Numeric Annotation Glyphs and their traditional symbols."""

from __future__ import annotations

import re

NAG_NULL = 0
NAG_GOOD_MOVE = 1
NAG_MISTAKE = 2
NAG_BRILLIANT_MOVE = 3
NAG_BLUNDER = 4
NAG_SPECULATIVE_MOVE = 5
NAG_DUBIOUS_MOVE = 6

MAX_NAG = 255

_SYMBOL_TO_NAG: dict[str, int] = {
    "!": NAG_GOOD_MOVE,
    "?": NAG_MISTAKE,
    "!!": NAG_BRILLIANT_MOVE,
    "??": NAG_BLUNDER,
    "!?": NAG_SPECULATIVE_MOVE,
    "?!": NAG_DUBIOUS_MOVE,
    "=": 10,
    "∞": 13,
    "+=": 14,
    "=+": 15,
    "+/-": 16,
    "-/+": 17,
    "+-": 18,
    "-+": 19,
}

_NAG_TO_SYMBOL: dict[int, str] = {nag: sym for sym, nag in _SYMBOL_TO_NAG.items()}

_DOLLAR_NAG_RE = re.compile(r"^\$(\d{1,3})$")


def is_nag_token(text: str) -> bool:
    """True for ``$n`` glyphs and the traditional move/position symbols."""
    return text in _SYMBOL_TO_NAG or _DOLLAR_NAG_RE.match(text) is not None


def nag_from_token(text: str) -> int:
    """Convert a ``$n`` token or a symbol such as ``!?`` to its NAG number.

    Raises:
        ValueError: *text* is not a recognised glyph.
    """
    symbol_nag = _SYMBOL_TO_NAG.get(text)
    if symbol_nag is not None:
        return symbol_nag
    match = _DOLLAR_NAG_RE.match(text)
    if match is None:
        raise ValueError(f"Not a NAG: {text!r}")
    nag = int(match.group(1))
    if nag > MAX_NAG:
        raise ValueError(f"NAG out of range: {text!r}")
    return nag


def nag_symbol(nag: int) -> str:
    """Display symbol for *nag* (falls back to ``$n``)."""
    return _NAG_TO_SYMBOL.get(nag, f"${nag}")
