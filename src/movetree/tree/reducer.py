"""Command reducer — the single state-transition entry point for a game.

``reduce(state, command)`` never mutates *state*; it returns the same object
when nothing changes and a new :class:`TreeState` otherwise. Edits rebuild
only the nodes on the edited spine; all other subtrees are shared with the
previous snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace

from movetree.engine import DefaultEngine, IPositionEngine
from movetree.errors import IllegalMove, InvalidEdit
from movetree.notation.models import Orientation
from movetree.notation.nags import MAX_NAG
from movetree.tree import navigation as nav
from movetree.tree.commands import (
    Command,
    CommandType,
    DeleteMove,
    GoToPath,
    MakeMove,
    PromoteVariation,
    SetAnnotation,
    SetComment,
    SetHeaders,
    SetOrientation,
)
from movetree.tree.node import Node, Path
from movetree.tree.state import TreeState

_LOGGER = logging.getLogger(__name__)

_NAVIGATION: dict[CommandType, Callable[[Node, Path], Path]] = {
    CommandType.GO_TO_NEXT: nav.next_path,
    CommandType.GO_TO_PREVIOUS: lambda _root, path: nav.previous_path(path),
    CommandType.GO_TO_START: lambda _root, _path: nav.start_path(),
    CommandType.GO_TO_END: nav.end_path,
    CommandType.GO_TO_BRANCH_START: lambda _root, path: nav.branch_start_path(path),
    CommandType.GO_TO_BRANCH_END: nav.end_path,
    CommandType.NEXT_BRANCHING: nav.next_branching_path,
    CommandType.PREVIOUS_BRANCHING: nav.previous_branching_path,
    CommandType.NEXT_BRANCH: lambda root, path: nav.sibling_path(root, path, 1),
    CommandType.PREVIOUS_BRANCH: lambda root, path: nav.sibling_path(root, path, -1),
}


def reduce(
    state: TreeState,
    command: Command,
    *,
    engine: IPositionEngine | None = None,
) -> TreeState:
    """Apply *command* to *state* and return the resulting snapshot.

    Navigation commands are total, except :class:`GoToPath` with a path that
    does not resolve (``PathNotFound``).

    Raises:
        PathNotFound: ``GoToPath`` with an invalid path.
        InvalidEdit: a structural or header edit cannot be applied.
    """
    command_type = getattr(command, "type", None)

    move_fn = _NAVIGATION.get(command_type) if command_type is not None else None
    if move_fn is not None:
        return state.with_path(move_fn(state.root, state.current_path))

    if isinstance(command, GoToPath):
        return state.with_path(nav.go_to_path(state.root, command.path))

    try:
        if isinstance(command, MakeMove):
            return _make_move(state, command.move_text, engine or DefaultEngine())
        if isinstance(command, DeleteMove):
            return _delete_move(state, _target(state, command.path))
        if isinstance(command, PromoteVariation):
            return _promote_variation(state, _target(state, command.path))
        if isinstance(command, SetComment):
            return _set_comment(state, _target(state, command.path), command.text)
        if isinstance(command, SetAnnotation):
            return _set_annotation(state, _target(state, command.path), command.nags)
        if isinstance(command, SetHeaders):
            return replace(state, header=command.header, dirty=True)
        if isinstance(command, SetOrientation):
            return _set_orientation(state, command.orientation)
    except InvalidEdit as exc:
        _LOGGER.debug("Rejected %s: %s", command_type, exc)
        raise

    raise InvalidEdit(f"Unsupported command: {command!r}")


# ── Helpers ──────────────────────────────────────────────────────────────────


def _target(state: TreeState, path: Sequence[int] | None) -> Path:
    if path is None:
        return state.current_path
    try:
        return nav.go_to_path(state.root, path)
    except LookupError as exc:
        raise InvalidEdit(str(exc)) from exc


def _replace_at(root: Node, path: Path, update: Callable[[Node], Node]) -> Node:
    """Rebuild the spine from *root* to *path* with ``update`` applied at the end."""
    spine = list(nav.iter_line(root, path))
    node = update(spine[-1])
    for depth in range(len(path) - 1, -1, -1):
        node = spine[depth].with_child(path[depth], node)
    return node


# ── Structural edits ─────────────────────────────────────────────────────────


def _make_move(state: TreeState, move_text: str, engine: IPositionEngine) -> TreeState:
    current = state.current_node
    try:
        applied = engine.apply_move(current.position, move_text)
    except IllegalMove as exc:
        raise InvalidEdit(str(exc)) from exc

    existing = current.child_index(applied.move.uci)
    if existing is not None:
        return state.with_path((*state.current_path, existing))

    child = Node(position=applied.position, move=applied.move)
    root = _replace_at(
        state.root,
        state.current_path,
        lambda node: node.with_appended_child(child),
    )
    new_path = (*state.current_path, len(current.children))
    return replace(state, root=root, current_path=new_path, dirty=True)


def _fold_starting_comment(parent: Node) -> Node:
    """Move a main-line starting comment into *parent*'s own comment.

    Only variations print a comment ahead of their first move, so the main
    continuation keeps its note as the comment after *parent*.
    """
    if not parent.children or not parent.children[0].starting_comment:
        return parent
    main = parent.children[0]
    comment = " ".join(filter(None, (parent.comment, main.starting_comment)))
    parent = parent.with_child(0, replace(main, starting_comment=""))
    return replace(parent, comment=comment)


def _delete_move(state: TreeState, path: Path) -> TreeState:
    if not path:
        raise InvalidEdit("The starting position cannot be deleted")

    parent_path, index = path[:-1], path[-1]

    def drop_child(parent: Node) -> Node:
        children = parent.children[:index] + parent.children[index + 1 :]
        return _fold_starting_comment(parent.with_children(children))

    root = _replace_at(state.root, parent_path, drop_child)

    cursor = state.current_path
    depth = len(parent_path)
    if cursor[:depth] == parent_path and len(cursor) > depth:
        if cursor[depth] == index:
            cursor = parent_path
        elif cursor[depth] > index:
            cursor = (*parent_path, cursor[depth] - 1, *cursor[depth + 1 :])
    return replace(state, root=root, current_path=cursor, dirty=True)


def _promote_variation(state: TreeState, path: Path) -> TreeState:
    branch = nav.branch_start_path(path)
    if not branch:
        raise InvalidEdit("Move is already on the main line")

    parent_path, index = branch[:-1], branch[-1]

    def move_to_front(parent: Node) -> Node:
        children = list(parent.children)
        children.insert(0, children.pop(index))
        return _fold_starting_comment(parent.with_children(children))

    root = _replace_at(state.root, parent_path, move_to_front)

    cursor = state.current_path
    depth = len(parent_path)
    if cursor[:depth] == parent_path and len(cursor) > depth:
        old = cursor[depth]
        if old == index:
            new = 0
        elif old < index:
            new = old + 1
        else:
            new = old
        cursor = (*parent_path, new, *cursor[depth + 1 :])
    return replace(state, root=root, current_path=cursor, dirty=True)


def _set_comment(state: TreeState, path: Path, text: str) -> TreeState:
    comment = " ".join(text.split())
    root = _replace_at(state.root, path, lambda node: replace(node, comment=comment))
    return replace(state, root=root, dirty=True)


def _set_annotation(state: TreeState, path: Path, nags: Sequence[int]) -> TreeState:
    if not path and nags:
        raise InvalidEdit("The starting position cannot be annotated")
    for nag in nags:
        if not 0 <= nag <= MAX_NAG:
            raise InvalidEdit(f"NAG out of range: {nag}")
    unique = tuple(dict.fromkeys(nags))
    root = _replace_at(state.root, path, lambda node: replace(node, nags=unique))
    return replace(state, root=root, dirty=True)


# ── Header edits ─────────────────────────────────────────────────────────────


def _set_orientation(state: TreeState, orientation: Orientation | str) -> TreeState:
    try:
        value = Orientation(str(orientation).lower())
    except ValueError:
        raise InvalidEdit(f"Unknown orientation: {orientation!r}") from None
    if value == state.header.orientation:
        return state
    return replace(state, header=state.header.with_orientation(value), dirty=True)
