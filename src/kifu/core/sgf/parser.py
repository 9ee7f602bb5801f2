"""SGF tree builder: turns the token stream into a :class:`GameRecord`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum, auto

from kifu.core.sgf.lexer import Lexer
from kifu.core.sgf.models import (
    GameRecord,
    Node,
    ParseError,
    Property,
    Token,
    TokenType,
)

_LOGGER = logging.getLogger(__name__)


class _Mode(Enum):
    IDLE = auto()
    HEADER = auto()
    IN_TREE = auto()


class SgfParser:
    """Consumes tokens and builds the header map and the node tree.

    The first ``;`` of a document opens the header; properties read before
    the second ``;`` go to :class:`GameInfo`. The second ``;`` creates an
    empty root node standing in for the header and opens the first game
    node as the root's successor. Every later ``;`` appends a node to the
    current sequence, except the ``;`` right after a ``(``: that one opens
    the variation node the parenthesis allocated. Inside the tree ``(``
    saves the current node and starts a variation, ``)`` restores the saved
    node.

    Parsing stops at the first ``ERROR`` token; the partially built record
    is returned with the error attached.
    """

    __slots__ = ("_record", "_mode", "_current", "_stack", "_pending", "_opening")

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._record = GameRecord()
        self._mode = _Mode.IDLE
        self._current: Node | None = None
        self._stack: list[Node] = []
        self._pending = Property("")
        # True between a variation "(" and the ";" that opens its first node.
        self._opening = False

    def parse(self, text: str) -> GameRecord:
        """Tokenize and parse *text*."""
        return self.parse_tokens(Lexer(text).tokens())

    def parse_tokens(self, tokens: Iterable[Token]) -> GameRecord:
        """Build a record from *tokens*, stopping at ``EOF`` or ``ERROR``."""
        self._reset()
        record = self._record
        for token in tokens:
            if token.type == TokenType.ERROR:
                record.add_error(ParseError(token.text, token.offset, token.context))
                _LOGGER.debug("SGF parsing stopped: %s", token.text)
                break
            if token.type == TokenType.EOF:
                break
            self._consume(token)
        _LOGGER.debug(
            "Parsed SGF record: %d header properties, %d main-line nodes",
            len(record.game_info),
            record.node_count(),
        )
        return record

    def _consume(self, token: Token) -> None:
        if token.type == TokenType.LEFT_PAREN:
            self._on_left_paren()
        elif token.type == TokenType.RIGHT_PAREN:
            self._on_right_paren()
        elif token.type == TokenType.SEMICOLON:
            self._on_semicolon()
        elif token.type == TokenType.PROPERTY_NAME:
            self._pending = Property(token.text)
        elif token.type == TokenType.PROPERTY_VALUE:
            self._on_property_value(token.text)

    def _on_left_paren(self) -> None:
        # The "(" opening the document arrives before the tree exists.
        if self._mode != _Mode.IN_TREE or self._current is None:
            return
        self._stack.append(self._current)
        self._current = self._current.new_variation()
        self._opening = True

    def _on_right_paren(self) -> None:
        if self._mode != _Mode.IN_TREE:
            return
        self._opening = False
        if self._stack:
            self._current = self._stack.pop()

    def _on_semicolon(self) -> None:
        if self._mode == _Mode.IDLE:
            self._mode = _Mode.HEADER
        elif self._mode == _Mode.HEADER:
            self._mode = _Mode.IN_TREE
            self._record.root = Node()
            self._current = self._record.root.new_node()
        elif self._opening:
            self._opening = False
        elif self._current is not None:
            self._current = self._current.new_node()

    def _on_property_value(self, value: str) -> None:
        prop = Property(self._pending.name, value)
        if self._mode == _Mode.IN_TREE and self._current is not None:
            self._current.add_property(prop)
        else:
            self._record.game_info.add_property(prop)


def parse_tokens(tokens: Iterable[Token]) -> GameRecord:
    """Build a :class:`GameRecord` from an already produced token stream."""
    return SgfParser().parse_tokens(tokens)


def parse_sgf(text: str, *, strict: bool = False) -> GameRecord:
    """Parse an SGF document.

    Malformed input does not raise: the record carries the first error and
    whatever was built before it. With ``strict=True`` that error is raised
    as :class:`~kifu.core.sgf.models.SgfSyntaxError` instead.
    """
    record = SgfParser().parse(text)
    if strict:
        record.raise_for_errors()
    return record
