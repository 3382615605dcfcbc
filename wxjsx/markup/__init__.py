"""
WXML markup front end: lexer, tokens and tree builder.
"""

from .lexer import MarkupLexer, tokenize_markup, BOOLEAN_ATTRIBUTE_VALUE
from .nodes import Node
from .parser import MarkupParser, parse_markup
from .tokens import Position, Token, TokenKind

__all__ = [
    "MarkupLexer",
    "MarkupParser",
    "Node",
    "Position",
    "Token",
    "TokenKind",
    "tokenize_markup",
    "parse_markup",
    "BOOLEAN_ATTRIBUTE_VALUE",
]
