"""Structured-text dumps of tokens and tree nodes."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from stonescript.ast import Node
from stonescript.tokens import Token


def token_to_dict(token: Token) -> dict[str, Any]:
    pos = token.position
    return {
        "type": token.type.value,
        "specific": token.specific,
        "value": token.value,
        "position": {
            "row": pos.row,
            "col": pos.column,
            "position": pos.offset,
            "tokenLength": pos.length,
        },
    }


def node_to_dict(node: Node) -> dict[str, Any]:
    return {"type": node.type, "value": [token_to_dict(t) for t in node.value]}


def dump_tokens(tokens: list[Token]) -> str:
    """Render tokens as indented JSON text."""
    return json.dumps([token_to_dict(t) for t in tokens], indent=2)


def dump_tree(nodes: list[Node]) -> str:
    """Render tree nodes as indented JSON text."""
    return json.dumps([node_to_dict(n) for n in nodes], indent=2)


def print_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    for tok in tokens:
        pos = tok.position
        file.write(
            f"{pos.row}:{pos.column} {tok.type.value:<6} {tok.specific:<20} {tok.value!r}\n"
        )
