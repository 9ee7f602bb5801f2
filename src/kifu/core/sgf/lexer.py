"""SGF tokenizer.

The lexer is a small state machine. Every state is a generator method that
yields the tokens it produces and returns the next state (``None`` once a
terminal ``EOF`` or ``ERROR`` token has been handed out). Tokens are produced
lazily, one at a time, as the consumer pulls them.
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from typing import Any

from kifu.core.sgf.models import Token, TokenType

_CONTEXT_WIDTH = 6
_WHITESPACE = frozenset(" \t\r\n")

_StateFn = Callable[[], Generator[Token, None, Any]]


def strip_newlines(text: str) -> str:
    """Remove every line feed and carriage return from *text*."""
    return text.replace("\n", "").replace("\r", "")


def _is_alpha(ch: str) -> bool:
    return ch.isalpha()


def _is_value_char(ch: str) -> bool:
    return bool(ch) and ch.isprintable() and ch != "]"


class Lexer:
    """Character-level scanner turning SGF text into :class:`Token` objects.

    Usage::

        for token in Lexer(text).tokens():
            ...

    The token sequence always ends with exactly one ``EOF`` or ``ERROR``
    token and cannot be restarted.
    """

    __slots__ = ("_input", "_pos", "_byte_pos", "_start", "_start_byte", "_state")

    def __init__(self, text: str) -> None:
        self._input = strip_newlines(text)
        self._pos = 0
        self._byte_pos = 0
        self._start = 0
        self._start_byte = 0
        self._state: _StateFn | None = self._lex_begin

    @property
    def text(self) -> str:
        """The newline-stripped input being scanned."""
        return self._input

    def tokens(self) -> Iterator[Token]:
        """Yield tokens until the terminal ``EOF``/``ERROR`` token."""
        state = self._state
        self._state = None
        while state is not None:
            state = yield from state()

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    # -- Cursor helpers -----------------------------------------------------

    def _peek(self) -> str:
        """Return the next character without consuming it ("" at the end)."""
        if self._pos >= len(self._input):
            return ""
        return self._input[self._pos]

    def _next(self) -> str:
        ch = self._peek()
        if ch:
            self._pos += 1
            self._byte_pos += len(ch.encode("utf-8"))
        return ch

    def _ignore(self) -> None:
        """Drop the pending input before the cursor."""
        self._start = self._pos
        self._start_byte = self._byte_pos

    def _emit(self, token_type: TokenType) -> Token:
        text = self._input[self._start : self._pos]
        if token_type == TokenType.PROPERTY_NAME:
            text = text.upper()
        token = Token(token_type, self._start_byte, text)
        self._ignore()
        return token

    def _context(self) -> str:
        before = self._input[max(0, self._pos - _CONTEXT_WIDTH) : self._pos]
        after = self._input[self._pos : self._pos + _CONTEXT_WIDTH]
        return f"{before}|{after}"

    def _error(self, message: str) -> Token:
        context = self._context()
        text = f"{message}, position {self._byte_pos}, {context!r}"
        return Token(TokenType.ERROR, self._byte_pos, text, context)

    # -- States -------------------------------------------------------------

    def _lex_begin(self) -> Generator[Token, None, _StateFn | None]:
        """Skip everything up to the first ``(``."""
        while True:
            ch = self._peek()
            if ch == "(":
                self._ignore()
                return self._lex_left_paren
            if not ch:
                break
            self._next()
        # Text without any "(" is an empty document, not an error.
        self._ignore()
        yield self._emit(TokenType.EOF)
        return None

    def _lex_left_paren(self) -> Generator[Token, None, _StateFn | None]:
        self._next()
        yield self._emit(TokenType.LEFT_PAREN)
        if self._peek() != ";":
            yield self._error("semicolon expected here")
            return None
        return self._lex_semicolon

    def _lex_right_paren(self) -> Generator[Token, None, _StateFn | None]:
        self._next()
        yield self._emit(TokenType.RIGHT_PAREN)
        ch = self._peek()
        if ch == "(":
            return self._lex_left_paren
        if _is_alpha(ch):
            return self._lex_property_name
        if ch == ")":
            return self._lex_right_paren
        if ch == ";":
            return self._lex_semicolon
        yield self._emit(TokenType.EOF)
        return None

    def _lex_semicolon(self) -> Generator[Token, None, _StateFn | None]:
        self._next()
        yield self._emit(TokenType.SEMICOLON)
        if self._peek() == ";":
            self._next()
            self._ignore()
        if not _is_alpha(self._peek()):
            yield self._error("property expected here")
            return None
        return self._lex_property_name

    def _lex_property_name(self) -> Generator[Token, None, _StateFn | None]:
        while _is_alpha(self._peek()):
            self._next()
        yield self._emit(TokenType.PROPERTY_NAME)
        if self._peek() != "[":
            yield self._error("left bracket '[' expected here")
            return None
        return self._lex_property_value

    def _lex_property_value(self) -> Generator[Token, None, _StateFn | None]:
        self._next()
        self._ignore()
        while _is_value_char(self._peek()):
            self._next()
        yield self._emit(TokenType.PROPERTY_VALUE)

        if self._peek() != "]":
            yield self._error("right bracket ']' expected here")
            return None
        self._next()
        while self._peek() in _WHITESPACE:
            self._next()
        self._ignore()

        ch = self._peek()
        if ch == "[":
            return self._lex_property_value
        if ch == ";":
            return self._lex_semicolon
        if ch == "(":
            return self._lex_left_paren
        if ch == ")":
            return self._lex_right_paren
        if _is_alpha(ch):
            return self._lex_property_name

        found = repr(ch) if ch else "end of input"
        yield self._error(
            f"property, node, or parenthesis expected here (found {found})"
        )
        return None


def tokenize(text: str) -> list[Token]:
    """Scan *text* eagerly and return every token, terminal one included."""
    return list(Lexer(text).tokens())
