"""Data model produced by the SGF tokenizer and tree builder."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto

MOVE_PROPERTIES = frozenset({"B", "W"})


class TokenType(Enum):
    """Kinds of tokens produced by :class:`kifu.core.sgf.lexer.Lexer`."""

    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    SEMICOLON = auto()
    PROPERTY_NAME = auto()
    PROPERTY_VALUE = auto()
    EOF = auto()
    ERROR = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (TokenType.EOF, TokenType.ERROR)


@dataclass(slots=True, frozen=True)
class Token:
    """A single scanned token.

    ``offset`` is a UTF-8 byte offset into the newline-stripped document.
    For ``ERROR`` tokens ``text`` holds the formatted message and ``context``
    the ``before|after`` snippet around the offset.
    """

    type: TokenType
    offset: int
    text: str = ""
    context: str = ""

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return "EOF"
        if self.type == TokenType.ERROR:
            return self.text
        if len(self.text) > 10:
            return f"{self.text[:10]!r}..."
        return repr(self.text)


@dataclass(slots=True, frozen=True)
class ParseError:
    """A lexical error reported while reading a document."""

    message: str
    offset: int
    context: str = ""

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True, frozen=True)
class Property:
    """A ``NAME[value]`` pair; ``value`` is kept verbatim."""

    name: str
    value: str = ""

    @property
    def is_move(self) -> bool:
        return self.name in MOVE_PROPERTIES

    def __str__(self) -> str:
        return f"{self.name}[{self.value}]"


@dataclass(eq=False, repr=False, slots=True)
class Node:
    """One record in a game sequence.

    A node owns its ``next`` node and every variation subtree; the structure
    is a single-owner tree. Traversal helpers and equality are iterative so
    that very long main lines never hit the recursion limit.
    """

    move: Property | None = None
    properties: list[Property] = field(default_factory=list)
    next: Node | None = None
    variations: list[Node] = field(default_factory=list)

    def add_property(self, prop: Property) -> None:
        """Attach *prop*; ``B``/``W`` replace the move, others are appended."""
        if prop.is_move:
            self.move = prop
        else:
            self.properties.append(prop)

    def new_node(self) -> Node:
        """Create the following node of this sequence and return it."""
        self.next = Node()
        return self.next

    def new_variation(self) -> Node:
        """Start a new alternative continuation after this node."""
        node = Node()
        self.variations.append(node)
        return node

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of property *name* (move included)."""
        key = name.upper()
        if self.move is not None and self.move.name == key:
            return self.move.value
        for prop in self.properties:
            if prop.name == key:
                return prop.value
        return default

    def values(self, name: str) -> list[str]:
        """Return every value recorded under property *name*."""
        key = name.upper()
        if self.move is not None and self.move.name == key:
            return [self.move.value]
        return [prop.value for prop in self.properties if prop.name == key]

    def main_line(self) -> Iterator[Node]:
        """Yield this node and its successors, ignoring variations."""
        node: Node | None = self
        while node is not None:
            yield node
            node = node.next

    def walk(self) -> Iterator[Node]:
        """Pre-order traversal of the whole subtree.

        Each node comes before the subtree of its ``next`` node, which comes
        before the node's variations in their recorded order.
        """
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.variations))
            if node.next is not None:
                stack.append(node.next)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        pending: list[tuple[Node, Node]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left.move != right.move or left.properties != right.properties:
                return False
            if len(left.variations) != len(right.variations):
                return False
            if (left.next is None) != (right.next is None):
                return False
            if left.next is not None and right.next is not None:
                pending.append((left.next, right.next))
            pending.extend(zip(left.variations, right.variations))
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Node(move={self.move!s}, properties={len(self.properties)}, "
            f"variations={len(self.variations)}, "
            f"has_next={self.next is not None})"
        )

    def __str__(self) -> str:
        parts = [str(self.move)] if self.move is not None else []
        parts.extend(str(prop) for prop in self.properties)
        return "".join(parts)


class GameInfo(dict[str, str]):
    """Header properties keyed by canonical uppercase name."""

    def add_property(self, prop: Property) -> None:
        self[prop.name.upper()] = prop.value

    def get_property(self, name: str) -> str | None:
        return self.get(name.upper())


@dataclass(slots=True)
class GameRecord:
    """Parsed document: header map, optional tree root and parse errors."""

    game_info: GameInfo = field(default_factory=GameInfo)
    root: Node | None = None
    errors: list[ParseError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> ParseError | None:
        return self.errors[0] if self.errors else None

    def add_error(self, error: ParseError) -> None:
        self.errors.append(error)

    def main_line(self) -> Iterator[Node]:
        """Yield the nodes reachable from the root through ``next`` links."""
        if self.root is not None:
            yield from self.root.main_line()

    def node_count(self) -> int:
        """Length of the main line; variations are not counted."""
        return sum(1 for _ in self.main_line())

    def nth_node(self, n: int) -> Node:
        """Return the *n*-th main-line node, counting the root as 1."""
        if n < 1:
            raise ValueError("n less than 1")
        count = self.node_count()
        if n > count:
            raise ValueError(f"n greater than node count ({count})")
        for index, node in enumerate(self.main_line(), start=1):
            if index == n:
                return node
        raise AssertionError("unreachable")

    def raise_for_errors(self) -> None:
        """Raise :class:`SgfSyntaxError` if parsing stopped on an error."""
        error = self.first_error
        if error is not None:
            raise SgfSyntaxError(error, self)


class SgfSyntaxError(ValueError):
    """Raised for a malformed document when strict handling is requested."""

    def __init__(self, error: ParseError, record: GameRecord) -> None:
        super().__init__(error.message)
        self.error = error
        self.record = record

    @property
    def offset(self) -> int:
        return self.error.offset
