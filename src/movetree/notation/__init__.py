"""Notation package: PGN tokenizing, parsing and serialization."""

from movetree.notation.models import (
    RESULT_TOKENS,
    Header,
    Orientation,
    Token,
    TokenKind,
)
from movetree.notation.export import build_pgn, movetext_from_tree
from movetree.notation.nags import nag_from_token, nag_symbol
from movetree.notation.pgn import parse_pgn, parse_pgn_games
from movetree.notation.tokenizer import tokenize

__all__ = [
    "RESULT_TOKENS",
    "Header",
    "Orientation",
    "Token",
    "TokenKind",
    "build_pgn",
    "movetext_from_tree",
    "nag_from_token",
    "nag_symbol",
    "parse_pgn",
    "parse_pgn_games",
    "tokenize",
]
