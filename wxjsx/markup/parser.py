"""
Tree builder for WXML markup.

Consumes the flat token list produced by the lexer and builds a single
rooted tree, pairing opening tags with their closing tags and dropping
comments.
"""

from __future__ import annotations

import logging
from typing import List

from ..errors import EndOfInput
from .lexer import MarkupLexer
from .nodes import Node
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class MarkupParser:
    """
    Recursive tree builder over a token list.

    The parser is permissive about nesting: an element whose closing tag
    never arrives simply ends at the end of the token stream, and closing
    tag names are not compared with the element they terminate.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0

    def read(self) -> Token:
        """Returns the current token and moves past it."""
        token = self.peek()
        self.index += 1
        return token

    def peek(self, offset: int = 0) -> Token:
        """
        Returns the token `offset` positions ahead without consuming it.

        Raises:
            EndOfInput: If there is no such token
        """
        index = self.index + offset
        if index >= len(self.tokens):
            last = self.tokens[-1].position if self.tokens else None
            raise EndOfInput(last)
        return self.tokens[index]

    def remaining(self) -> int:
        return max(len(self.tokens) - self.index, 0)

    def read_node(self) -> Node:
        """
        Builds the next node, recursing into opening tags.

        Raises:
            EndOfInput: If the token stream is exhausted
        """
        current = self.read()

        if current.kind is TokenKind.COMMENT:
            return self.read_node()

        if current.kind is not TokenKind.OPEN_TAG:
            return Node(current)

        children: List[Node] = []
        while True:
            if self.remaining() == 0:
                logger.debug("Element <%s> at %s has no closing tag", current.value, current.position)
                break

            upcoming = self.peek()
            if upcoming.kind is TokenKind.CLOSE_TAG:
                self.read()
                if upcoming.value != current.value:
                    logger.debug(
                        "Element <%s> at %s closed by </%s> at %s",
                        current.value, current.position, upcoming.value, upcoming.position,
                    )
                break
            if upcoming.kind is TokenKind.COMMENT:
                self.read()
                continue

            children.append(self.read_node())

        return Node(current, tuple(children))

    def parse(self) -> Node:
        """
        Builds the root node. Tokens after the root are discarded.
        """
        root = self.read_node()

        leftover = [t for t in self.tokens[self.index:] if t.kind is not TokenKind.COMMENT]
        if leftover:
            logger.warning(
                "Only a single root element is supported; discarding %d trailing token(s) from %s",
                len(leftover), leftover[0].position,
            )
        return root


def parse_markup(text: str) -> Node:
    """
    Tokenizes `text` completely, then builds its root node.

    Raises:
        CompileError: On lexical errors or an empty document
    """
    tokens = MarkupLexer(text).tokenize_all()
    return MarkupParser(tokens).parse()


__all__ = ["MarkupParser", "parse_markup"]
