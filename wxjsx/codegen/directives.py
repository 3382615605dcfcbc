"""
Attribute classification and per-element directive queues.

Every attribute of an element is classified once. Key and event
attributes are rewritten and rendered inline; `wx:if` / `wx:elseif` /
`wx:else` / `wx:for` are pulled out into the element's directive queue
and resolved after the element's own code is generated.
"""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Deque, Iterator, List, Tuple

from ..utils import event_prop, strip_expression


class DirectiveKind(Enum):
    """Classification of a markup attribute."""
    KEY = "key"
    CONDITIONAL_IF = "if"
    CONDITIONAL_ELSEIF = "elseif"
    CONDITIONAL_ELSE = "else"
    LOOP_FOR = "for"
    EVENT_BINDING = "event"
    PLAIN = "plain"

    @property
    def is_conditional(self) -> bool:
        return self in _CONDITIONALS

    @property
    def is_queued(self) -> bool:
        """Queued kinds are resolved by the chain state, not rendered inline."""
        return self in _CONDITIONALS or self is DirectiveKind.LOOP_FOR


_CONDITIONALS = frozenset({
    DirectiveKind.CONDITIONAL_IF,
    DirectiveKind.CONDITIONAL_ELSEIF,
    DirectiveKind.CONDITIONAL_ELSE,
})

# Exact, case-sensitive attribute names.
DIRECTIVE_KEYWORDS = {
    "wx:key": DirectiveKind.KEY,
    "wx:if": DirectiveKind.CONDITIONAL_IF,
    "wx:elseif": DirectiveKind.CONDITIONAL_ELSEIF,
    "wx:elif": DirectiveKind.CONDITIONAL_ELSEIF,
    "wx:else": DirectiveKind.CONDITIONAL_ELSE,
    "wx:for": DirectiveKind.LOOP_FOR,
}

EVENT_PREFIX = "bind"


def classify_attribute(name: str) -> Tuple[DirectiveKind, str]:
    """
    Classifies an attribute by name.

    Returns:
        (kind, output name). The output name is what an inline attribute
        is rendered as: 'key' for wx:key, 'on<event>' for bind<event>,
        the name itself otherwise.
    """
    kind = DIRECTIVE_KEYWORDS.get(name)
    if kind is DirectiveKind.KEY:
        return kind, "key"
    if kind is not None:
        return kind, name
    if name.startswith(EVENT_PREFIX):
        return DirectiveKind.EVENT_BINDING, event_prop(name)
    return DirectiveKind.PLAIN, name


class DirectiveQueue:
    """
    Ordered directives of a single element.

    Conditionals are appended in encounter order; loops go to the front.
    """

    def __init__(self) -> None:
        self._items: Deque[Tuple[DirectiveKind, str]] = deque()

    def add(self, kind: DirectiveKind, expression: str) -> None:
        if kind is DirectiveKind.LOOP_FOR:
            self._items.appendleft((kind, expression))
        elif kind.is_conditional:
            self._items.append((kind, expression))
        else:
            raise ValueError(f"{kind.name} is not a queued directive")

    def conditionals(self) -> List[Tuple[DirectiveKind, str]]:
        return [item for item in self._items if item[0].is_conditional]

    def loops(self) -> List[Tuple[DirectiveKind, str]]:
        return [item for item in self._items if item[0] is DirectiveKind.LOOP_FOR]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Tuple[DirectiveKind, str]]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


def render_attributes(attributes, queue: DirectiveQueue) -> str:
    """
    Renders the inline attributes of an element and fills `queue`.

    Args:
        attributes: ATTRIBUTE tokens of the element
        queue: Directive queue receiving wx:if / wx:elseif / wx:else / wx:for

    Returns:
        Attribute text, each entry prefixed with a space: ' name="expr"'
    """
    parts: List[str] = []
    for attr in attributes:
        kind, prop = classify_attribute(attr.value)
        expression = strip_expression(attr.raw_value or "")
        if kind.is_queued:
            queue.add(kind, expression)
        else:
            parts.append(f' {prop}="{expression}"')
    return "".join(parts)


__all__ = [
    "DirectiveKind",
    "DirectiveQueue",
    "DIRECTIVE_KEYWORDS",
    "classify_attribute",
    "render_attributes",
]
