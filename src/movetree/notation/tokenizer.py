"""PGN lexer producing offset-tagged tokens."""

from __future__ import annotations

import re
from collections.abc import Iterator

from movetree.errors import ParseError
from movetree.notation.models import RESULT_TOKENS, Token, TokenKind
from movetree.notation.nags import is_nag_token

_TAG_RE = re.compile(r'\[\s*([A-Za-z0-9_+#=:-]+)\s+"((?:[^"\\]|\\.)*)"\s*\]')
_MOVE_NUMBER_RE = re.compile(r"^(\d+)(\.+)(.*)$")
_SAN_RE = re.compile(
    r"^(?:"
    r"[NBRQK][a-h]?[1-8]?x?[a-h][1-8]"
    r"|[a-h](?:[1-8]|x[a-h][1-8])(?:=?[NBRQ])?"
    r"|[O0]-[O0](?:-[O0])?"
    r"|--"
    r")[+#]?$"
)
_SUFFIX_RE = re.compile(r"[!?]+$")
_SYMBOL_STOP = frozenset("{}();[]")
_BOM = "\ufeff"


def _unescape(value: str) -> str:
    return value.replace('\\"', '"').replace("\\\\", "\\")


def _line_end(text: str, idx: int) -> int:
    end = text.find("\n", idx)
    return len(text) if end < 0 else end


def _classify_symbol(symbol: str, offset: int) -> Iterator[Token]:
    """Split one whitespace-delimited symbol into tokens."""
    if symbol in RESULT_TOKENS:
        yield Token(TokenKind.RESULT, symbol, offset)
        return

    if symbol.isdigit():
        yield Token(TokenKind.MOVE_NUMBER, symbol, offset)
        return

    match = _MOVE_NUMBER_RE.match(symbol)
    if match is not None:
        number = match.group(1) + match.group(2)
        yield Token(TokenKind.MOVE_NUMBER, number, offset)
        rest = match.group(3)
        if rest:
            yield from _classify_symbol(rest, offset + len(number))
        return

    if symbol.startswith("."):
        # "1. ... e5" and "...e5" style continuations.
        stripped = symbol.lstrip(".")
        if stripped:
            yield from _classify_symbol(stripped, offset + len(symbol) - len(stripped))
        return

    if is_nag_token(symbol):
        yield Token(TokenKind.NAG, symbol, offset)
        return

    move_text = symbol
    suffix = ""
    suffix_match = _SUFFIX_RE.search(symbol)
    if suffix_match is not None and is_nag_token(suffix_match.group(0)):
        suffix = suffix_match.group(0)
        move_text = symbol[: suffix_match.start()]

    if not _SAN_RE.match(move_text):
        raise ParseError(offset, f"Unknown token {symbol!r}")

    yield Token(TokenKind.MOVE, move_text, offset)
    if suffix:
        yield Token(TokenKind.NAG, suffix, offset + len(move_text))


def tokenize(text: str, start: int = 0) -> Iterator[Token]:
    """Yield the tokens of *text* beginning at character offset *start*.

    Raises:
        ParseError: for malformed tags, unterminated comments and tokens
            that are neither moves, glyphs, numbers nor results.
    """
    idx = start
    total = len(text)
    if idx == 0 and text.startswith(_BOM):
        idx = 1

    while idx < total:
        ch = text[idx]

        if ch.isspace():
            idx += 1
            continue

        if ch == "%" and (idx == 0 or text[idx - 1] in "\n" + _BOM):
            idx = _line_end(text, idx)
            continue

        if ch == "[":
            match = _TAG_RE.match(text, idx)
            if match is None:
                raise ParseError(idx, "Malformed tag")
            name, raw_value = match.groups()
            yield Token(TokenKind.TAG, name, idx, _unescape(raw_value))
            idx = match.end()
            continue

        if ch == "{":
            end = text.find("}", idx + 1)
            if end < 0:
                raise ParseError(idx, "Unterminated comment")
            yield Token(TokenKind.COMMENT, text[idx + 1 : end], idx)
            idx = end + 1
            continue

        if ch == ";":
            end = _line_end(text, idx)
            yield Token(TokenKind.COMMENT, text[idx + 1 : end], idx)
            idx = end
            continue

        if ch == "(":
            yield Token(TokenKind.OPEN, ch, idx)
            idx += 1
            continue

        if ch == ")":
            yield Token(TokenKind.CLOSE, ch, idx)
            idx += 1
            continue

        if ch in "]}":
            raise ParseError(idx, f"Unexpected {ch!r}")

        end = idx
        while end < total and not text[end].isspace() and text[end] not in _SYMBOL_STOP:
            end += 1
        yield from _classify_symbol(text[idx:end], idx)
        idx = end
