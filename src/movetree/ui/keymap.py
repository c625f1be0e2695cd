"""Key bindings for tree navigation."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt

from movetree.tree.commands import CommandType


def _key_code(key: int | Qt.Key) -> int:
    return key.value if isinstance(key, Qt.Key) else int(key)


@dataclass(slots=True, frozen=True)
class KeyMap:
    """Maps Qt key codes to navigation commands.

    The active map is handed to :meth:`TreeSession.handle_key` on every call;
    nothing reads a process-wide binding table. Bindings are stored as
    ``(key code, command)`` pairs so a map can be hashed and shared.
    """

    bindings: tuple[tuple[int, CommandType], ...] = ()

    @classmethod
    def default(cls) -> KeyMap:
        return cls(
            (
                (Qt.Key.Key_Left.value, CommandType.GO_TO_PREVIOUS),
                (Qt.Key.Key_Right.value, CommandType.GO_TO_NEXT),
                (Qt.Key.Key_Up.value, CommandType.GO_TO_START),
                (Qt.Key.Key_Home.value, CommandType.GO_TO_START),
                (Qt.Key.Key_Down.value, CommandType.GO_TO_END),
                (Qt.Key.Key_End.value, CommandType.GO_TO_END),
            )
        )

    def command_for(self, key: int | Qt.Key) -> CommandType | None:
        return dict(self.bindings).get(_key_code(key))

    def with_binding(self, key: int | Qt.Key, command: CommandType) -> KeyMap:
        code = _key_code(key)
        kept = tuple(pair for pair in self.bindings if pair[0] != code)
        return KeyMap((*kept, (code, command)))
