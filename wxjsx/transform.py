"""
Single entry point of the compiler: markup text in, JSX text out.
"""

from __future__ import annotations

import logging

from .codegen.generator import Generator
from .markup.lexer import MarkupLexer
from .markup.parser import MarkupParser

logger = logging.getLogger(__name__)


def transform(markup: str) -> str:
    """
    Compiles WXML markup into a JSX-like expression.

    Every call builds its own lexer, parser and generator, so calls are
    independent of each other.

    Args:
        markup: WXML source text

    Returns:
        Generated code

    Raises:
        CompileError: On the first lexical or structural error
    """
    tokens = MarkupLexer(markup).tokenize_all()
    root = MarkupParser(tokens).parse()
    code = Generator(root).generate()
    logger.debug("Compiled %d characters into %d characters", len(markup), len(code))
    return code


__all__ = ["transform"]
