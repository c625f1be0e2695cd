"""PGN parser building a move tree with variations."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field, replace

from movetree.engine import DefaultEngine, IPositionEngine, MoveRecord
from movetree.errors import IllegalMove, InvalidPosition, ParseError
from movetree.notation.models import Header, Token, TokenKind
from movetree.notation.nags import nag_from_token
from movetree.notation.tokenizer import tokenize
from movetree.settings import ParserSettings
from movetree.tree.node import Node

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class _Draft:
    """Mutable node used while the tree is being built."""

    position: str
    move: MoveRecord | None = None
    parent: _Draft | None = None
    children: list[_Draft] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    starting_comments: list[str] = field(default_factory=list)
    nags: list[int] = field(default_factory=list)


@dataclass(slots=True)
class _OpenVariation:
    resume: _Draft
    offset: int


def _unterminated(open_variations: list[_OpenVariation]) -> ParseError:
    return ParseError(open_variations[-1].offset, "Unterminated variation")


def _freeze(root: _Draft) -> Node:
    """Convert drafts to immutable nodes without recursion."""
    built: dict[int, Node] = {}
    pending: list[tuple[_Draft, bool]] = [(root, False)]
    while pending:
        draft, expanded = pending.pop()
        if not expanded:
            pending.append((draft, True))
            pending.extend((child, False) for child in draft.children)
            continue
        built[id(draft)] = Node(
            position=draft.position,
            move=draft.move,
            children=tuple(built.pop(id(child)) for child in draft.children),
            comment=" ".join(draft.comments),
            starting_comment=" ".join(draft.starting_comments),
            nags=tuple(dict.fromkeys(draft.nags)),
        )
    return built[id(root)]


class _TokenStream:
    """Token iterator with one token of push-back."""

    __slots__ = ("_tokens", "_pushed")

    def __init__(self, tokens: Iterator[Token]) -> None:
        self._tokens = tokens
        self._pushed: Token | None = None

    def __iter__(self) -> _TokenStream:
        return self

    def __next__(self) -> Token:
        if self._pushed is not None:
            token, self._pushed = self._pushed, None
            return token
        return next(self._tokens)

    def push_back(self, token: Token) -> None:
        self._pushed = token

    def at_end(self) -> bool:
        for token in self:
            self.push_back(token)
            return False
        return True


class _GameParser:
    """Parses one game from a token stream using an explicit cursor stack."""

    __slots__ = ("_engine", "_max_depth", "_stream")

    def __init__(
        self,
        stream: _TokenStream,
        engine: IPositionEngine,
        settings: ParserSettings,
    ) -> None:
        self._stream = stream
        self._engine = engine
        self._max_depth = settings.max_variation_depth

    def parse(self) -> tuple[Node, Header]:
        tags: list[tuple[str, str]] = []
        fen_offset = 0
        first: Token | None = None
        for token in self._stream:
            if token.kind != TokenKind.TAG:
                first = token
                break
            if token.text == "FEN":
                fen_offset = token.offset
            tags.append((token.text, token.value))

        header = Header.from_tags(tags)
        try:
            start = self._engine.initial_position(header.fen)
        except InvalidPosition as exc:
            raise ParseError(fen_offset, str(exc)) from exc

        root = _Draft(position=start)
        if first is not None:
            self._stream.push_back(first)
        result = self._parse_movetext(root)

        has_result_tag = any(name == "Result" for name, _value in tags)
        if result is not None and (result != "*" or not has_result_tag):
            header = replace(header, result=result)

        tree = _freeze(root)
        _LOGGER.debug(
            "Parsed game %s - %s: %d nodes, result %s",
            header.white,
            header.black,
            tree.count(),
            header.result,
        )
        return tree, header

    def _parse_movetext(self, root: _Draft) -> str | None:
        current = root
        open_variations: list[_OpenVariation] = []
        # True right after "(" until the variation's first move is played.
        fresh_line = False
        pending_comments: list[str] = []

        for token in self._stream:
            kind = token.kind

            if kind == TokenKind.MOVE:
                try:
                    applied = self._engine.apply_move(current.position, token.text)
                except IllegalMove as exc:
                    raise ParseError(
                        token.offset, f"Illegal move {token.text!r}: {exc.reason}"
                    ) from exc
                child = _Draft(
                    position=applied.position, move=applied.move, parent=current
                )
                if pending_comments:
                    child.starting_comments = pending_comments
                    pending_comments = []
                current.children.append(child)
                current = child
                fresh_line = False

            elif kind == TokenKind.OPEN:
                if current.parent is None or fresh_line:
                    raise ParseError(
                        token.offset, "Variation has no move to branch from"
                    )
                if len(open_variations) >= self._max_depth:
                    raise ParseError(
                        token.offset,
                        f"Variations nested deeper than {self._max_depth} levels",
                    )
                open_variations.append(_OpenVariation(current, token.offset))
                current = current.parent
                fresh_line = True

            elif kind == TokenKind.CLOSE:
                if not open_variations:
                    raise ParseError(token.offset, "Unmatched ')'")
                if fresh_line:
                    raise ParseError(token.offset, "Empty variation")
                current = open_variations.pop().resume

            elif kind == TokenKind.COMMENT:
                text = " ".join(token.text.split())
                if not text:
                    continue
                if fresh_line:
                    pending_comments.append(text)
                else:
                    current.comments.append(text)

            elif kind == TokenKind.NAG:
                if current.parent is None or fresh_line:
                    raise ParseError(
                        token.offset, f"Annotation {token.text!r} without a move"
                    )
                try:
                    current.nags.append(nag_from_token(token.text))
                except ValueError as exc:
                    raise ParseError(token.offset, str(exc)) from exc

            elif kind == TokenKind.RESULT:
                if open_variations:
                    raise _unterminated(open_variations)
                return token.text

            elif kind == TokenKind.TAG:
                # A tag section without a preceding result starts the next game.
                if open_variations:
                    raise _unterminated(open_variations)
                self._stream.push_back(token)
                return None

        if open_variations:
            raise _unterminated(open_variations)
        return None


def parse_pgn(
    pgn_text: str,
    *,
    engine: IPositionEngine | None = None,
    settings: ParserSettings | None = None,
) -> tuple[Node, Header]:
    """Parse the first game of *pgn_text* into a move tree and its header.

    Text after the game's result marker is not examined. An empty move list
    yields a root-only tree.

    Raises:
        ParseError: the notation is malformed, a move is illegal, or
            variations nest deeper than ``settings.max_variation_depth``.
    """
    stream = _TokenStream(tokenize(pgn_text))
    parser = _GameParser(
        stream, engine or DefaultEngine(), settings or ParserSettings()
    )
    try:
        return parser.parse()
    except ParseError as exc:
        _LOGGER.debug("Rejected PGN: %s", exc)
        raise


def parse_pgn_games(
    pgn_text: str,
    *,
    engine: IPositionEngine | None = None,
    settings: ParserSettings | None = None,
) -> Iterator[tuple[Node, Header]]:
    """Yield every game of a multi-game PGN document in order.

    Parsing is lazy: a malformed game raises :class:`ParseError` when it is
    reached, after the preceding games have been yielded.
    """
    stream = _TokenStream(tokenize(pgn_text))
    parser = _GameParser(
        stream, engine or DefaultEngine(), settings or ParserSettings()
    )
    while not stream.at_end():
        try:
            game = parser.parse()
        except ParseError as exc:
            _LOGGER.debug("Rejected PGN: %s", exc)
            raise
        yield game
