"""StoneScript tree builder: converts a token sequence into statement nodes."""

from __future__ import annotations

from collections.abc import Sequence

from stonescript.ast import Command, Node
from stonescript.cursor import TokenCursor
from stonescript.errors import ErrorKind
from stonescript.lexer import tokenize
from stonescript.tokens import Kind, Token


class TreeBuilder:
    """Build nodes from a TokenCursor.

    The only statement shape understood is a command: a ``/`` token followed
    by everything up to the next ``;``.
    """

    def __init__(self, cursor: TokenCursor) -> None:
        self._cursor = cursor

    def build(self) -> list[Node]:
        nodes: list[Node] = []
        node = self._read_node()
        while node is not None:
            nodes.append(node)
            node = self._read_node()
        return nodes

    def _read_node(self) -> Node | None:
        if self._cursor.at_end(False):
            return None

        token = self._cursor.peek()
        if token.kind is Kind.DIVIDE:
            return self._read_command()

        self._cursor.fail(
            f"unexpected token {token.value!r} ({token.specific})",
            ErrorKind.UNEXPECTED_TOKEN,
            token,
        )

    def _read_command(self) -> Command:
        self._cursor.skip()  # leading divide
        body = self._cursor.consume_until(lambda tok: tok.kind is Kind.END)
        return Command(tuple(body))


def build_tree(
    tokens: Sequence[Token] | TokenCursor, source: str | None = None, left_margin: int = 0
) -> list[Node]:
    """Convenience function: build nodes from a token sequence (or a prepared cursor).

    *source* and *left_margin* are only used to render error snippets.
    """
    if isinstance(tokens, TokenCursor):
        cursor = tokens
    else:
        cursor = TokenCursor(tokens, source, left_margin)
    return TreeBuilder(cursor).build()


def parse(source: str, left_margin: int = 0) -> list[Node]:
    """Tokenize and build the tree for *source* in one step."""
    return build_tree(tokenize(source, left_margin), source, left_margin)
