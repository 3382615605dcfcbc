"""
JSON-ready views of tokens and trees, used by `wxjsx tokens` / `wxjsx tree`.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from .markup.nodes import Node
from .markup.tokens import Token, TokenKind


def dumps(data: Any) -> str:
    """Compact JSON for CLI output; non-ASCII text (tag names, content) is kept as is."""
    return json.dumps(data, ensure_ascii=False)


def token_to_dict(token: Token) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "kind": token.kind.value,
        "value": token.value,
        "line": token.position.line,
        "column": token.position.column,
        "offset": token.position.offset,
    }
    if token.kind is TokenKind.ATTRIBUTE:
        data["raw_value"] = token.raw_value
    if token.attributes is not None:
        data["attributes"] = [token_to_dict(a) for a in token.attributes]
    return data


def tokens_to_list(tokens: List[Token]) -> List[Dict[str, Any]]:
    return [token_to_dict(t) for t in tokens]


def node_to_dict(node: Node) -> Dict[str, Any]:
    data = token_to_dict(node.token)
    if node.children is not None:
        data["children"] = [node_to_dict(c) for c in node.children]
    return data


__all__ = ["dumps", "token_to_dict", "tokens_to_list", "node_to_dict"]
