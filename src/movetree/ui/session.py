"""Qt bridge between a loaded game tree and its UI collaborators."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from movetree.engine import DefaultEngine, IPositionEngine
from movetree.errors import ParseError
from movetree.notation.export import build_pgn
from movetree.settings import ExportSettings, ParserSettings
from movetree.tree.commands import Command, GoToNext, GoToPrevious, command_for
from movetree.tree.node import Node
from movetree.tree.reducer import reduce
from movetree.tree.state import RenderView, TreeState, load_game
from movetree.ui.keymap import KeyMap

_LOGGER = logging.getLogger(__name__)


class TreeSession(QObject):
    """Holds the current :class:`TreeState` of one game view.

    Commands from hotkeys, wheel events and clicks all go through
    :meth:`dispatch`, one at a time on the owning thread. The renderer
    listens to ``position_changed``; anything that shows the move list
    listens to ``state_changed``.
    """

    state_changed = pyqtSignal(object)
    position_changed = pyqtSignal(str, str)
    load_failed = pyqtSignal(str)

    def __init__(
        self,
        state: TreeState | None = None,
        *,
        engine: IPositionEngine | None = None,
        parser_settings: ParserSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine or DefaultEngine()
        self._parser_settings = parser_settings or ParserSettings()
        if state is None:
            state = TreeState.new(Node(position=self._engine.initial_position()))
        self._state = state

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> TreeState:
        return self._state

    def render_view(self) -> RenderView:
        return self._state.render_view()

    # ── Loading / export ─────────────────────────────────────────────────

    def load_pgn(self, pgn_text: str) -> bool:
        """Replace the current game; on failure keep the old one.

        Returns True when the text was parsed and loaded.
        """
        try:
            state = load_game(
                pgn_text, engine=self._engine, settings=self._parser_settings
            )
        except ParseError as exc:
            _LOGGER.warning("Failed to load PGN: %s", exc)
            self.load_failed.emit(str(exc))
            return False
        self._set_state(state, force=True)
        return True

    def to_pgn(self, settings: ExportSettings | None = None) -> str:
        return build_pgn(self._state.root, self._state.header, settings)

    # ── Command sources ──────────────────────────────────────────────────

    @pyqtSlot(object)
    def dispatch(self, command: Command) -> None:
        """Run *command* through the reducer and publish the result.

        ``PathNotFound`` and ``InvalidEdit`` propagate to the caller; the
        current state is left untouched in that case.
        """
        self._set_state(reduce(self._state, command, engine=self._engine))

    @pyqtSlot(int)
    def handle_wheel(self, delta_y: int) -> None:
        """Scrolling down steps forward, scrolling up steps back."""
        if delta_y > 0:
            self.dispatch(GoToNext())
        elif delta_y < 0:
            self.dispatch(GoToPrevious())

    def handle_key(self, key: int, key_map: KeyMap) -> bool:
        """Dispatch the command bound to *key* in *key_map*.

        Returns True when the key was bound.
        """
        command_type = key_map.command_for(key)
        if command_type is None:
            return False
        self.dispatch(command_for(command_type))
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_state(self, state: TreeState, *, force: bool = False) -> None:
        previous = self._state
        if state is previous and not force:
            return
        self._state = state
        self.state_changed.emit(state)

        view = state.render_view()
        if force or view != previous.render_view():
            self.position_changed.emit(view.position, view.orientation.value)
