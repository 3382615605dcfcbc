"""
Directive resolution state machine.

Turns the directive queue of one element into nested ternary and `map`
expressions around the element's code. Sibling `wx:if` / `wx:elseif` /
`wx:else` elements form a chain: the `if` element opens a brace that
only the `else` element closes, so resolution depends on the chain tags
seen earlier in the same generation pass.

Transitions (top of stack -> action):

    if      empty | else       push IF      '{c?x:'
            if | elseif        (no push)    '{c?x:'
    elseif  if | elseif        push ELSEIF  'c?x:'
            otherwise          pass-through
    else    if | elseif        push ELSE    'c?x:null}'
            otherwise          pass-through
    for     any                (no push)    '{c.map((item)=>x)}'  wrapped in '<>...</>'

The elseif precondition is intentionally wider than "top is if": elseif
also follows elseif, so chains with several elseif branches resolve fully.

The stack lives for a whole generation pass and is never rescoped per
sibling group, so an unterminated chain in one subtree affects later ones.
"""

from __future__ import annotations

import enum
import logging
from typing import List, Optional

from .directives import DirectiveKind, DirectiveQueue

logger = logging.getLogger(__name__)

LOOP_ITEM = "item"


class ChainTag(enum.Enum):
    IF = "if"
    ELSEIF = "elseif"
    ELSE = "else"


class ChainState:
    """Stack of chain tags shared by every element of a generation pass."""

    def __init__(self) -> None:
        self.stack: List[ChainTag] = []

    @property
    def top(self) -> Optional[ChainTag]:
        return self.stack[-1] if self.stack else None

    def resolve(self, queue: DirectiveQueue, code: str) -> str:
        """
        Applies an element's directives to its generated code.

        Conditionals are resolved first, in queue order; loops then wrap
        the result, so a `map` always returns the resolved conditional.

        Args:
            queue: Directives collected from the element's attributes
            code: The element's own code (tag, attributes, children)

        Returns:
            Final code of the element
        """
        for kind, expression in queue.conditionals():
            code = self._apply_conditional(kind, expression, code)

        for _, expression in queue.loops():
            code = f"{{{expression}.map(({LOOP_ITEM})=>{code})}}"
            # queue holds at least this loop, so a bare wx:for is wrapped too
            if queue:
                code = f"<>{code}</>"

        return code

    def _apply_conditional(self, kind: DirectiveKind, expression: str, code: str) -> str:
        top = self.top

        if kind is DirectiveKind.CONDITIONAL_IF:
            if top is None or top is ChainTag.ELSE:
                self.stack.append(ChainTag.IF)
            return f"{{{expression}?{code}:"

        if kind is DirectiveKind.CONDITIONAL_ELSEIF:
            if top in (ChainTag.IF, ChainTag.ELSEIF):
                self.stack.append(ChainTag.ELSEIF)
                return f"{expression}?{code}:"
            logger.debug("wx:elseif=%r without a preceding wx:if; left unwrapped", expression)
            return code

        if kind is DirectiveKind.CONDITIONAL_ELSE:
            if top in (ChainTag.IF, ChainTag.ELSEIF):
                self.stack.append(ChainTag.ELSE)
                return f"{expression}?{code}:null}}"
            logger.debug("wx:else without a preceding wx:if; left unwrapped")
            return code

        raise ValueError(f"Not a conditional directive: {kind.name}")


__all__ = ["ChainTag", "ChainState", "LOOP_ITEM"]
