"""Tests for the PGN tokenizer."""

import pytest

from movetree.errors import ParseError
from movetree.notation.models import Token, TokenKind
from movetree.notation.tokenizer import tokenize


def _kinds(text: str) -> list[tuple[TokenKind, str]]:
    return [(token.kind, token.text) for token in tokenize(text)]


class TestTokenKinds:
    def test_moves_numbers_and_result(self) -> None:
        assert _kinds("1. e4 e5 2. Nf3 1-0") == [
            (TokenKind.MOVE_NUMBER, "1."),
            (TokenKind.MOVE, "e4"),
            (TokenKind.MOVE, "e5"),
            (TokenKind.MOVE_NUMBER, "2."),
            (TokenKind.MOVE, "Nf3"),
            (TokenKind.RESULT, "1-0"),
        ]

    def test_glued_move_numbers_are_split(self) -> None:
        tokens = list(tokenize("1.e4 1...e5"))
        assert [(t.kind, t.text, t.offset) for t in tokens] == [
            (TokenKind.MOVE_NUMBER, "1.", 0),
            (TokenKind.MOVE, "e4", 2),
            (TokenKind.MOVE_NUMBER, "1...", 5),
            (TokenKind.MOVE, "e5", 9),
        ]

    def test_variations_and_comments(self) -> None:
        assert _kinds("e4 {best} (d4 ; rest of line\n) *") == [
            (TokenKind.MOVE, "e4"),
            (TokenKind.COMMENT, "best"),
            (TokenKind.OPEN, "("),
            (TokenKind.MOVE, "d4"),
            (TokenKind.COMMENT, " rest of line"),
            (TokenKind.CLOSE, ")"),
            (TokenKind.RESULT, "*"),
        ]

    def test_suffix_annotation_becomes_nag_token(self) -> None:
        tokens = list(tokenize("Nf3!? $14"))
        assert tokens == [
            Token(TokenKind.MOVE, "Nf3", 0),
            Token(TokenKind.NAG, "!?", 3),
            Token(TokenKind.NAG, "$14", 6),
        ]

    def test_castling_and_promotion(self) -> None:
        assert _kinds("O-O-O 0-0 exd8=Q+ b1=N#") == [
            (TokenKind.MOVE, "O-O-O"),
            (TokenKind.MOVE, "0-0"),
            (TokenKind.MOVE, "exd8=Q+"),
            (TokenKind.MOVE, "b1=N#"),
        ]

    def test_draw_result(self) -> None:
        assert _kinds("1/2-1/2") == [(TokenKind.RESULT, "1/2-1/2")]

    def test_tags_are_unescaped(self) -> None:
        tokens = list(tokenize('[White "Doe, \\"JD\\""]\n[Black "Roe"]'))
        assert tokens[0] == Token(TokenKind.TAG, "White", 0, 'Doe, "JD"')
        assert tokens[1].text == "Black"
        assert tokens[1].value == "Roe"

    def test_escape_lines_are_skipped(self) -> None:
        assert _kinds("% engine output\ne4") == [(TokenKind.MOVE, "e4")]

    def test_leading_byte_order_mark_is_skipped(self) -> None:
        tokens = list(tokenize('\ufeff[White "A"]\n\n1. e4 *'))
        assert tokens[0] == Token(TokenKind.TAG, "White", 1, "A")
        assert [token.kind for token in tokens[1:]] == [
            TokenKind.MOVE_NUMBER,
            TokenKind.MOVE,
            TokenKind.RESULT,
        ]

    def test_comment_offsets_survive_newlines(self) -> None:
        tokens = list(tokenize("e4 {multi\nline} Nf3"))
        assert tokens[1].offset == 3
        assert tokens[2] == Token(TokenKind.MOVE, "Nf3", 16)


class TestTokenErrors:
    def test_unknown_token_reports_offset(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            list(tokenize("1. e4 {note\nspans lines} foo"))
        assert excinfo.value.offset == 25
        assert "foo" in excinfo.value.reason

    def test_unterminated_comment(self) -> None:
        with pytest.raises(ParseError, match="Unterminated comment") as excinfo:
            list(tokenize("1. e4 {never closed"))
        assert excinfo.value.offset == 6

    def test_malformed_tag(self) -> None:
        with pytest.raises(ParseError, match="Malformed tag") as excinfo:
            list(tokenize('[Event Missing quotes]'))
        assert excinfo.value.offset == 0

    def test_stray_closing_brace(self) -> None:
        with pytest.raises(ParseError, match="Unexpected"):
            list(tokenize("e4 }"))

    def test_tokenizing_is_lazy(self) -> None:
        tokens = tokenize("e4 ???")
        assert next(tokens) == Token(TokenKind.MOVE, "e4", 0)
        with pytest.raises(ParseError):
            next(tokens)
