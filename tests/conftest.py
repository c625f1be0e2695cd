"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from movetree.engine import ChessEngine
from movetree.tree.state import TreeState, load_game

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

ANNOTATED_PGN = """\
[Event "Club Championship"]
[Site "Local"]
[Date "2026.02.26"]
[Round "3"]
[White "Alice"]
[Black "Bob"]
[Result "1-0"]

{Opening notes} 1. e4 e5 (1... c5 {Sicilian} 2. Nf3 (2. c3 d5) d6) 2. Nf3 $1
Nc6 (2... d6 3. d4) 3. Bb5 a6 1-0
"""


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def engine() -> ChessEngine:
    return ChessEngine()


@pytest.fixture
def annotated_pgn() -> str:
    return ANNOTATED_PGN


@pytest.fixture
def annotated_state() -> TreeState:
    """The annotated sample game with the cursor on the starting position."""
    return load_game(ANNOTATED_PGN)
