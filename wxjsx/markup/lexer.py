"""
Lexical analyzer for WXML markup.

Splits the source text into tag, attribute, text and comment tokens,
tracking line/column/offset positions for error reporting. Any structural
violation (missing quote, missing '>', truncated input) aborts tokenization
with a CompileError subclass.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..errors import EndOfInput, ExpectedToken, UnexpectedToken
from .tokens import Position, Token, TokenKind

logger = logging.getLogger(__name__)

# Raw value given to attributes written without `=...` (e.g. `disabled`).
BOOLEAN_ATTRIBUTE_VALUE = "{{true}}"

COMMENT_END = "-->"


class MarkupLexer:
    """
    Character-level lexer for WXML markup.

    Produces one token per call to `next_token()`:
    - text runs up to the next '<'
    - comments `<!-- ... -->`
    - closing tags `</name>`
    - opening and self-closing tags with their attribute tokens
    Whitespace between tokens is skipped.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.line = 1
        self.column = 1
        self.length = len(text)

    def tokenize_all(self) -> List[Token]:
        """
        Tokenizes the whole input.

        Returns:
            Tokens in source order (no EOF marker)

        Raises:
            EndOfInput: If the input ends inside a tag, attribute or comment
            ExpectedToken: If a required character is missing
            UnexpectedToken: If a character is invalid at its position
        """
        tokens: List[Token] = []
        while True:
            token = self.next_token()
            if token is None:
                break
            tokens.append(token)

        logger.debug("Tokenized %d characters into %d tokens", self.length, len(tokens))
        return tokens

    def next_token(self) -> Optional[Token]:
        """
        Reads the next token, or returns None when only whitespace is left.
        """
        self._skip_whitespace()

        current = self._peek()
        if current is None:
            return None
        if current != "<":
            return self._read_text()
        if self._peek(1) == "!":
            return self._read_comment()
        return self._read_tag()

    # ------------------------------------------------------------ #
    # Token readers
    # ------------------------------------------------------------ #
    def _read_text(self) -> Token:
        start = self._here()
        text = self._take_while(lambda c: c != "<")
        return Token(TokenKind.TEXT, text, start)

    def _read_comment(self) -> Token:
        start = self._here()
        # <!-- : '<', '!' and the dashes that follow
        self._advance(2)
        self._take_while(lambda c: c == "-")

        end = self.text.find(COMMENT_END, self.position)
        if end < 0:
            self._advance(self.length - self.position)
            raise EndOfInput(self._here())

        content = self.text[self.position:end]
        self._advance(len(content) + len(COMMENT_END))
        return Token(TokenKind.COMMENT, content, start)

    def _read_tag(self) -> Token:
        start = self._here()
        self._expect("<", "'<'")

        if self._peek() == "/":
            self._advance(1)
            name = self._take_while(lambda c: c not in "/>" and not c.isspace())
            self._skip_whitespace()
            self._expect(">", f"'>' to close tag </{name}>")
            return Token(TokenKind.CLOSE_TAG, name, start)

        name = self._take_while(lambda c: c not in "/>" and not c.isspace())
        if not name:
            found = self._peek()
            if found is None:
                raise EndOfInput(self._here())
            raise UnexpectedToken(self._here(), f"{found!r} where a tag name was expected")

        attributes = self._read_attributes()

        if self._peek() == "/":
            self._advance(1)
            self._expect(">", f"'>' to close tag <{name}/>")
            return Token(TokenKind.SELF_CLOSE_TAG, name, start, attributes=attributes)

        self._expect(">", f"'>' to close tag <{name}>")
        return Token(TokenKind.OPEN_TAG, name, start, attributes=attributes)

    def _read_attributes(self) -> Tuple[Token, ...]:
        attributes: List[Token] = []

        while True:
            current = self._peek()
            if current is None:
                raise EndOfInput(self._here())
            if current == ">":
                break
            if current == "/":
                if self._peek(1) == ">":
                    break
                raise ExpectedToken(self._here(), "'>' after '/'")
            if current.isspace():
                self._advance(1)
                continue
            attributes.append(self._read_attribute())

        return tuple(attributes)

    def _read_attribute(self) -> Token:
        start = self._here()
        name = self._take_while(lambda c: c not in "=>/" and not c.isspace())
        if not name:
            raise UnexpectedToken(start, f"{self._peek()!r} where an attribute name was expected")

        if self._peek() != "=":
            return Token(TokenKind.ATTRIBUTE, name, start, raw_value=BOOLEAN_ATTRIBUTE_VALUE)

        self._advance(1)
        quote = self._peek()
        if quote is None:
            raise EndOfInput(self._here())
        if quote not in "\"'":
            raise ExpectedToken(self._here(), f"quote to open the value of attribute '{name}'")
        self._advance(1)

        value = self._take_while(lambda c: c != quote)
        self._expect(quote, f"closing {quote} for attribute '{name}'")
        return Token(TokenKind.ATTRIBUTE, name, start, raw_value=value)

    # ------------------------------------------------------------ #
    # Character helpers
    # ------------------------------------------------------------ #
    def _here(self) -> Position:
        return Position(self.line, self.column, self.position)

    def _peek(self, offset: int = 0) -> Optional[str]:
        index = self.position + offset
        if index >= self.length:
            return None
        return self.text[index]

    def _expect(self, char: str, description: str) -> None:
        """Consumes `char` or fails with EndOfInput / ExpectedToken."""
        current = self._peek()
        if current is None:
            raise EndOfInput(self._here())
        if current != char:
            raise ExpectedToken(self._here(), description)
        self._advance(1)

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.position
        end = start
        while end < self.length and predicate(self.text[end]):
            end += 1
        self._advance(end - start)
        return self.text[start:end]

    def _skip_whitespace(self) -> None:
        self._take_while(str.isspace)

    def _advance(self, count: int) -> None:
        """
        Moves forward by `count` characters, updating line and column.
        """
        for _ in range(count):
            if self.position < self.length:
                if self.text[self.position] == "\n":
                    self.line += 1
                    self.column = 1
                else:
                    self.column += 1
                self.position += 1


def tokenize_markup(text: str) -> List[Token]:
    """
    Convenience wrapper around MarkupLexer.

    Args:
        text: WXML source text

    Returns:
        List of tokens

    Raises:
        CompileError: On the first lexical error
    """
    return MarkupLexer(text).tokenize_all()


__all__ = ["MarkupLexer", "tokenize_markup", "BOOLEAN_ATTRIBUTE_VALUE"]
