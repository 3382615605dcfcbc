"""
Lexical types for WXML markup.

Tokens are produced once by the lexer and never mutated afterwards.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Position:
    """Location of a token's first character in the source text."""
    line: int = 1       # 1-based
    column: int = 1     # 1-based
    offset: int = 0     # index into the source string

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class TokenKind(enum.Enum):
    """Token kinds produced by the markup lexer."""

    OPEN_TAG = "OPEN_TAG"                # <view>
    CLOSE_TAG = "CLOSE_TAG"              # </view>
    SELF_CLOSE_TAG = "SELF_CLOSE_TAG"    # <view/>
    ATTRIBUTE = "ATTRIBUTE"              # name="value"
    TEXT = "TEXT"
    COMMENT = "COMMENT"                  # <!-- ... -->


@dataclass(frozen=True)
class Token:
    """
    Markup token with position information.

    `value` holds the tag name, attribute name, text or comment content
    depending on `kind`. Attribute tokens keep their raw (still
    brace-wrapped) value in `raw_value`. Only OPEN_TAG and SELF_CLOSE_TAG
    tokens carry `attributes`.
    """
    kind: TokenKind
    value: str
    position: Position
    raw_value: Optional[str] = None
    attributes: Optional[Tuple["Token", ...]] = None

    def __repr__(self) -> str:
        if self.kind is TokenKind.ATTRIBUTE:
            return f"Token({self.kind.name}, {self.value!r}={self.raw_value!r}, {self.position})"
        return f"Token({self.kind.name}, {self.value!r}, {self.position})"


__all__ = ["Position", "TokenKind", "Token"]
