"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) inherit from WxjsxUserError.

Programming errors and bugs must not inherit from it:
they will propagate with full tracebacks.
"""

from __future__ import annotations

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .markup.tokens import Position


class WxjsxUserError(Exception):
    """
    Base class for all user-facing errors in wxjsx.

    These errors indicate problems that the user can fix:
    malformed markup, invalid configuration, missing files.
    """
    pass


class CompileError(WxjsxUserError):
    """Compilation of a markup document failed."""

    def __init__(self, message: str, position: Optional["Position"] = None):
        if position is not None:
            super().__init__(f"{message} at {position.line}:{position.column}")
        else:
            super().__init__(message)
        self.message = message
        self.position = position


class EndOfInput(CompileError):
    """The input ran out while a character or token was still required."""

    def __init__(self, position: Optional["Position"] = None):
        super().__init__("Unexpected end of input", position)


class ExpectedToken(CompileError):
    """A structurally required character or token is missing."""

    def __init__(self, position: "Position", description: str):
        super().__init__(f"Expected {description}", position)
        self.description = description


class UnexpectedToken(CompileError):
    """A character or token is present but invalid at this point."""

    def __init__(self, position: "Position", description: str):
        super().__init__(f"Unexpected {description}", position)
        self.description = description


class ConfigError(WxjsxUserError):
    """Invalid build configuration (wxjsx.yaml)."""
    pass


__all__ = [
    "WxjsxUserError",
    "CompileError",
    "EndOfInput",
    "ExpectedToken",
    "UnexpectedToken",
    "ConfigError",
]
