from __future__ import annotations

import re

# bind<event> -> on<event>; events missing here keep their own name.
EVENT_REMAP = {
    "tap": "click",
    "confirm": "keydown",
}

_SPACE_RUN = re.compile(r" {2,}")


def first_upper(s: str) -> str:
    """Capitalizes the first character only: 'my-icon' -> 'My-icon'."""
    if not s:
        return ""
    return s[0].upper() + s[1:]


def camel_case(s: str) -> str:
    """Splits on '-' and capitalizes every segment: 'my-icon' -> 'MyIcon'."""
    return "".join(first_upper(part) for part in s.split("-"))


def event_prop(name: str) -> str:
    """
    Rewrites a `bind*` attribute into an `on*` prop.

    bindtap -> onclick, bindconfirm -> onkeydown, bindlongpress -> onlongpress
    """
    event = name[len("bind"):]
    return "on" + EVENT_REMAP.get(event, event)


def strip_expression(value: str) -> str:
    """Removes interpolation delimiters: '{{a.b}}' -> 'a.b'."""
    return value.replace("{{", "").replace("}}", "")


def normalize_text(text: str) -> str:
    """
    Text content to JSX text.

    '{{x}}' becomes '{x}', line breaks are dropped and runs of
    spaces collapse into one.
    """
    out = text.replace("{{", "{").replace("}}", "}")
    out = out.replace("\r", "").replace("\n", "")
    return _SPACE_RUN.sub(" ", out)


__all__ = [
    "EVENT_REMAP",
    "first_upper",
    "camel_case",
    "event_prop",
    "strip_expression",
    "normalize_text",
]
