"""SGF package: tokenizer, tree builder and game record model."""

from kifu.core.sgf.lexer import Lexer, strip_newlines, tokenize
from kifu.core.sgf.models import (
    GameInfo,
    GameRecord,
    Node,
    ParseError,
    Property,
    SgfSyntaxError,
    Token,
    TokenType,
)
from kifu.core.sgf.parser import SgfParser, parse_sgf, parse_tokens
from kifu.core.sgf.properties import PROPERTY_LABELS, property_label

__all__ = [
    "PROPERTY_LABELS",
    "GameInfo",
    "GameRecord",
    "Lexer",
    "Node",
    "ParseError",
    "Property",
    "SgfParser",
    "SgfSyntaxError",
    "Token",
    "TokenType",
    "parse_sgf",
    "parse_tokens",
    "property_label",
    "strip_newlines",
    "tokenize",
]
