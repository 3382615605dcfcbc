"""
Code generation: attribute classification, directive chains, tree walk.
"""

from .chain import ChainState, ChainTag
from .directives import DirectiveKind, DirectiveQueue, classify_attribute
from .generator import Generator, generate_code

__all__ = [
    "ChainState",
    "ChainTag",
    "DirectiveKind",
    "DirectiveQueue",
    "classify_attribute",
    "Generator",
    "generate_code",
]
