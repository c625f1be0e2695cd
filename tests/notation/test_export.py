"""Tests for PGN serialization."""

import pytest

from movetree.notation import (
    Header,
    Orientation,
    build_pgn,
    movetext_from_tree,
    parse_pgn,
)
from movetree.settings import ExportSettings
from movetree.tree.commands import SetComment
from movetree.tree.reducer import reduce
from movetree.tree.state import TreeState

ANNOTATED_MOVETEXT = (
    "{Opening notes} 1. e4 e5 (1... c5 {Sicilian} 2. Nf3 (2. c3 d5) 2... d6) "
    "2. Nf3 $1 Nc6 (2... d6 3. d4) 3. Bb5 a6 1-0"
)


def _flat(text: str) -> str:
    return " ".join(text.split())


class TestMovetext:
    def test_annotated_game(self, annotated_state) -> None:
        text = movetext_from_tree(annotated_state.root, "1-0")
        assert _flat(text) == ANNOTATED_MOVETEXT

    def test_root_only_tree(self) -> None:
        root, _header = parse_pgn("")
        assert movetext_from_tree(root) == "*"

    def test_black_move_after_comment_is_numbered(self) -> None:
        root, _header = parse_pgn("1. e4 {best by test} e5 2. Nf3 *")
        assert movetext_from_tree(root) == "1. e4 {best by test} 1... e5 2. Nf3 *"

    def test_starting_comment_precedes_variation_move(self) -> None:
        root, _header = parse_pgn("1. e4 e5 ({Also} 1... c5) *")
        assert movetext_from_tree(root) == "1. e4 e5 ({Also} 1... c5) *"

    @pytest.mark.parametrize(
        "movetext",
        [
            "1. e4 (1. d4 d5) (1. c4) *",
            "1. e4 e5 (1... c5 2. Nf3 (2. c3)) *",
        ],
    )
    def test_parentheses_hug_their_moves(self, movetext: str) -> None:
        root, _header = parse_pgn(movetext)
        assert movetext_from_tree(root) == movetext

    def test_symbol_annotations_are_written_as_dollars(self) -> None:
        root, _header = parse_pgn("1. e4!! e5?? *")
        assert movetext_from_tree(root) == "1. e4 $3 e5 $4 *"

    def test_closing_brace_is_not_emitted_inside_comment(self) -> None:
        root, _header = parse_pgn("1. e4 *")
        state = reduce(TreeState.new(root), SetComment("a } b", path=(0,)))
        assert movetext_from_tree(state.root) == "1. e4 {a ] b} *"

    def test_lines_are_wrapped(self, annotated_state) -> None:
        text = movetext_from_tree(
            annotated_state.root, "1-0", ExportSettings(line_width=20)
        )
        lines = text.splitlines()
        assert len(lines) > 1
        assert all(len(line) <= 20 for line in lines)
        assert _flat(text) == ANNOTATED_MOVETEXT


class TestExportSettings:
    def test_without_variations(self, annotated_state) -> None:
        settings = ExportSettings(include_variations=False)
        text = movetext_from_tree(annotated_state.root, "1-0", settings)
        assert _flat(text) == "{Opening notes} 1. e4 e5 2. Nf3 $1 Nc6 3. Bb5 a6 1-0"

    def test_without_comments_or_nags(self, annotated_state) -> None:
        settings = ExportSettings(
            include_comments=False, include_variations=False, include_nags=False
        )
        text = movetext_from_tree(annotated_state.root, "1-0", settings)
        assert _flat(text) == "1. e4 e5 2. Nf3 Nc6 3. Bb5 a6 1-0"


class TestBuildPgn:
    def test_tag_section_then_movetext(self, annotated_state) -> None:
        text = build_pgn(annotated_state.root, annotated_state.header)
        lines = text.splitlines()
        assert lines[:7] == [
            '[Event "Club Championship"]',
            '[Site "Local"]',
            '[Date "2026.02.26"]',
            '[Round "3"]',
            '[White "Alice"]',
            '[Black "Bob"]',
            '[Result "1-0"]',
        ]
        assert lines[7] == ""
        assert text.endswith("1-0\n")

    def test_round_trip_preserves_tree_and_header(self, annotated_state) -> None:
        text = build_pgn(annotated_state.root, annotated_state.header)
        root, header = parse_pgn(text)
        assert root == annotated_state.root
        assert header == annotated_state.header

    def test_tag_values_are_escaped(self) -> None:
        root, _ = parse_pgn("1. d4 *")
        header = Header(white='Doe, "JD"', orientation=Orientation.BLACK)
        text = build_pgn(root, header)
        assert '[White "Doe, \\"JD\\""]' in text
        assert '[Orientation "black"]' in text
        again_root, again_header = parse_pgn(text)
        assert again_header == header
        assert again_root == root

    def test_setup_position_round_trip(self) -> None:
        fen = "4k3/8/8/8/8/8/4P3/4K3 w - - 0 1"
        root, header = parse_pgn(f'[FEN "{fen}"]\n\n1. e4 Kd7 *')
        text = build_pgn(root, header)
        assert '[SetUp "1"]' in text
        assert f'[FEN "{fen}"]' in text
        assert parse_pgn(text) == (root, header)
