"""
Markup tree nodes.

A node wraps exactly one token. Only OPEN_TAG nodes have children;
close tags, self-closing tags and text are leaves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .tokens import Token, TokenKind


@dataclass(frozen=True)
class Node:
    """Node of the markup tree."""
    token: Token
    children: Optional[Tuple["Node", ...]] = None

    @property
    def kind(self) -> TokenKind:
        return self.token.kind

    @property
    def name(self) -> str:
        """Tag name, or the text content for TEXT nodes."""
        return self.token.value


__all__ = ["Node"]
