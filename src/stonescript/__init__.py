"""StoneScript language front end: lexer and statement tree builder."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stonescript.ast import Node
    from stonescript.tokens import Token

__version__ = "0.1.0"


def compile(source: str, left_margin: int = 0) -> tuple[list[Token], list[Node]]:
    """Tokenize *source* and build its statement tree."""
    from stonescript.lexer import tokenize
    from stonescript.parser import build_tree

    tokens = tokenize(source, left_margin)
    return tokens, build_tree(tokens, source, left_margin)
