"""PGN serialization of a move tree."""

from __future__ import annotations

from movetree.notation.models import Header
from movetree.settings import ExportSettings
from movetree.tree.node import Node


def _comment_token(text: str) -> str:
    # PGN comments cannot contain a closing brace.
    return "{" + text.replace("}", "]") + "}"


def _escape_tag_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


class _MovetextWriter:
    __slots__ = ("_settings", "tokens")

    def __init__(self, settings: ExportSettings) -> None:
        self._settings = settings
        self.tokens: list[str] = []

    def write_game(self, root: Node, result: str) -> None:
        force_number = True
        if root.comment and self._settings.include_comments:
            self.tokens.append(_comment_token(root.comment))
        self._write_line(root, force_number)
        self.tokens.append(result)

    def _write_line(self, node: Node, force_number: bool) -> None:
        """Write the continuation after *node*, variations included."""
        while node.children:
            main = node.children[0]
            force_number = self._write_move(node, main, force_number)

            if self._settings.include_variations:
                for variation in node.children[1:]:
                    first = len(self.tokens)
                    after = self._write_move(node, variation, True)
                    self._write_line(variation, after)
                    # Parentheses are glued to their neighbours so wrapping
                    # never separates them.
                    self.tokens[first] = "(" + self.tokens[first]
                    self.tokens[-1] += ")"
                    force_number = True

            node = main

    def _write_move(self, parent: Node, child: Node, force_number: bool) -> bool:
        """Write one move; return whether the next move needs its number."""
        assert child.move is not None
        settings = self._settings

        if child.starting_comment and settings.include_comments:
            self.tokens.append(_comment_token(child.starting_comment))
            force_number = True

        if parent.white_to_move:
            self.tokens.append(f"{parent.fullmove_number}.")
        elif force_number:
            self.tokens.append(f"{parent.fullmove_number}...")

        self.tokens.append(child.move.san)
        if settings.include_nags:
            self.tokens.extend(f"${nag}" for nag in child.nags)

        if child.comment and settings.include_comments:
            self.tokens.append(_comment_token(child.comment))
            return True
        return False


def _wrap(tokens: list[str], width: int) -> list[str]:
    lines: list[str] = []
    line = ""
    for token in tokens:
        if not line:
            line = token
        elif len(line) + 1 + len(token) <= width:
            line = f"{line} {token}"
        else:
            lines.append(line)
            line = token
    if line:
        lines.append(line)
    return lines


def movetext_from_tree(
    root: Node,
    result: str = "*",
    settings: ExportSettings | None = None,
) -> str:
    """Serialize the moves, variations, comments and NAGs below *root*."""
    settings = settings or ExportSettings()
    writer = _MovetextWriter(settings)
    writer.write_game(root, result)
    return "\n".join(_wrap(writer.tokens, settings.line_width))


def build_pgn(
    root: Node,
    header: Header,
    settings: ExportSettings | None = None,
) -> str:
    """Build a single-game PGN document from a tree and its header."""
    lines = [f'[{tag} "{_escape_tag_value(value)}"]' for tag, value in header.tags()]
    lines.append("")
    lines.append(movetext_from_tree(root, header.result, settings))
    lines.append("")
    return "\n".join(lines)
