"""
wxjsx: compiles WXML-style markup into JSX-like component expressions.
"""

from .errors import (
    WxjsxUserError,
    CompileError,
    EndOfInput,
    ExpectedToken,
    UnexpectedToken,
    ConfigError,
)
from .transform import transform

__all__ = [
    "transform",
    "WxjsxUserError",
    "CompileError",
    "EndOfInput",
    "ExpectedToken",
    "UnexpectedToken",
    "ConfigError",
]
