"""Stage chaining: run the lexer and tree builder, stopping at the first failure."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from stonescript.ast import Node
from stonescript.cursor import CharCursor, TokenCursor
from stonescript.errors import LexError, ParseError, StoneScriptError
from stonescript.lexer import Lexer
from stonescript.parser import TreeBuilder
from stonescript.tokens import Token


@dataclass(frozen=True, slots=True)
class _Stage:
    callback: Callable[..., Any]
    on_error: Callable[[StoneScriptError], None]


class Pipeline:
    """Ordered chain of stages, each fed the previous stage's result.

    A stage's return value becomes the next stage's arguments: a tuple is
    spread, None means no arguments, anything else is a single argument.
    """

    def __init__(self) -> None:
        self._stages: list[_Stage] = []

    def then(
        self,
        callback: Callable[..., Any],
        on_error: Callable[[StoneScriptError], None],
    ) -> Pipeline:
        self._stages.append(_Stage(callback, on_error))
        return self

    def execute(self, *args: Any) -> bool:
        """Run every stage. Returns False if a stage failed (later stages are skipped)."""
        for stage in self._stages:
            try:
                result = stage.callback(*args)
            except StoneScriptError as exc:
                stage.on_error(exc)
                return False
            if result is None:
                args = ()
            elif isinstance(result, tuple):
                args = result
            else:
                args = (result,)
        return True


@dataclass(slots=True)
class Analysis:
    """Outcome of running the front end over one source text."""

    source: str
    tokens: list[Token] | None = None
    nodes: list[Node] | None = None
    lex_error: LexError | None = None
    parse_error: ParseError | None = None

    @property
    def error(self) -> LexError | ParseError | None:
        return self.lex_error or self.parse_error

    @property
    def ok(self) -> bool:
        return self.error is None


def analyze(source: str, left_margin: int = 0) -> Analysis:
    """Tokenize and build the tree, recording whichever stage fails."""
    result = Analysis(source)

    def lex_stage(text: str) -> TokenCursor:
        result.tokens = Lexer(CharCursor(text, left_margin)).tokenize()
        return TokenCursor(result.tokens, text, left_margin)

    def tree_stage(cursor: TokenCursor) -> list[Node]:
        result.nodes = TreeBuilder(cursor).build()
        return result.nodes

    def lex_failed(exc: LexError) -> None:
        result.lex_error = exc

    def tree_failed(exc: ParseError) -> None:
        result.parse_error = exc

    Pipeline().then(lex_stage, lex_failed).then(tree_stage, tree_failed).execute(source)
    return result
