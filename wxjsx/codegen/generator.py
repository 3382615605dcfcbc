"""
Code generator: markup tree to a JSX-like expression.
"""

from __future__ import annotations

import logging

from ..markup.nodes import Node
from ..markup.tokens import TokenKind
from ..utils import camel_case, first_upper, normalize_text
from .chain import ChainState
from .directives import DirectiveQueue, render_attributes

logger = logging.getLogger(__name__)


class Generator:
    """
    Depth-first code generator.

    One instance serves one generation pass: the chain state it owns is
    shared by every element of the tree.
    """

    def __init__(self, root: Node):
        self.root = root
        self.chain = ChainState()

    def generate(self) -> str:
        """Generates code for the whole tree."""
        code = self.generate_node(self.root)
        if self.chain.stack:
            logger.debug("Generation finished with chain state %s", [t.value for t in self.chain.stack])
        return code

    def generate_node(self, node: Node) -> str:
        """
        Generates the code of one node, children first, then applies the
        node's directives through the chain state.
        """
        attributes = node.token.attributes or ()
        queue = DirectiveQueue()

        if node.kind is TokenKind.OPEN_TAG:
            tag = camel_case(node.name)
            attrs = render_attributes(attributes, queue)
            inner = "".join(self.generate_node(child) for child in node.children or ())
            code = f"<{tag}{attrs}>{inner}</{tag}>"
        elif node.kind is TokenKind.SELF_CLOSE_TAG:
            tag = first_upper(node.name)
            attrs = render_attributes(attributes, queue)
            code = f"<{tag}{attrs}/>"
        elif node.kind is TokenKind.TEXT:
            code = normalize_text(node.name)
        else:
            code = ""

        return self.chain.resolve(queue, code)


def generate_code(root: Node) -> str:
    """Runs a fresh Generator over `root`."""
    return Generator(root).generate()


__all__ = ["Generator", "generate_code"]
