"""Core domain layer: SGF parsing with zero external dependencies.

Quick start::

    from kifu.core import parse_sgf

    record = parse_sgf("(;GM[1]SZ[19];B[pd];W[dp])")
    for node in record.main_line():
        print(node)
"""

from kifu.core.sgf import (
    PROPERTY_LABELS,
    GameInfo,
    GameRecord,
    Lexer,
    Node,
    ParseError,
    Property,
    SgfParser,
    SgfSyntaxError,
    Token,
    TokenType,
    parse_sgf,
    parse_tokens,
    property_label,
    tokenize,
)

__all__ = [
    # Tokens
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    # Game record
    "GameInfo",
    "GameRecord",
    "Node",
    "ParseError",
    "Property",
    "SgfSyntaxError",
    # Parsing
    "SgfParser",
    "parse_sgf",
    "parse_tokens",
    # Property catalog
    "PROPERTY_LABELS",
    "property_label",
]
