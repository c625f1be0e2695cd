"""Qt integration: the session object and key bindings."""

from movetree.ui.keymap import KeyMap
from movetree.ui.session import TreeSession

__all__ = ["KeyMap", "TreeSession"]
