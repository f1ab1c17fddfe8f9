"""Read cursors over characters (source text) and over tokens (second pass)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Generic, NoReturn, TypeVar

from stonescript.errors import ErrorKind, LexError, ParseError
from stonescript.tokens import Token

T = TypeVar("T")


class Cursor(ABC, Generic[T]):
    """One-directional read cursor over an ordered sequence.

    The position only moves forward and never passes the end of the sequence.
    Subclasses decide how a failure is located and reported.
    """

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def __len__(self) -> int:
        return len(self._items)

    def at_end(self, should_fail: bool = True) -> bool:
        """Return whether every element has been consumed.

        With *should_fail* set, reaching the end is an error instead of a
        legitimate answer.
        """
        done = self._pos >= len(self._items)
        if done and should_fail:
            self.fail("unexpected end of input", ErrorKind.UNEXPECTED_END)
        return done

    def peek(self, should_fail: bool = False, offset: int = 0) -> T | None:
        """Return the element *offset* places ahead without consuming it."""
        if self.at_end(should_fail):
            return None
        idx = self._pos + offset
        if idx >= len(self._items):
            return None
        return self._items[idx]

    def advance(self) -> T:
        self.at_end(True)
        item = self._items[self._pos]
        self._pos += 1
        self._on_advance(item)
        return item

    def skip(self) -> None:
        self.advance()

    def consume_until(
        self, predicate: Callable[[T], bool], include_terminator: bool = True
    ) -> list[T]:
        """Collect elements until *predicate* holds for the next one.

        With *include_terminator*, the terminating element must exist and is
        consumed (but not returned).
        """
        collected: list[T] = []
        while not self.at_end(False) and not predicate(self._items[self._pos]):
            collected.append(self.advance())
        if include_terminator:
            if self.at_end(False):
                self.fail("expected terminator, found end of input", ErrorKind.UNTERMINATED_SPAN)
            self.skip()
        return collected

    @abstractmethod
    def fail(self, message: str, kind: ErrorKind) -> NoReturn:
        """Raise the stage-specific error for *message*, located at the cursor."""

    def _on_advance(self, item: T) -> None:
        pass


class CharCursor(Cursor[str]):
    """Cursor over source text that tracks row and column.

    Rows start at 1. Columns start at *left_margin* and return to it after
    every newline.
    """

    def __init__(self, source: str, left_margin: int = 0) -> None:
        super().__init__(source)
        self.left_margin = left_margin
        self.row = 1
        self.column = left_margin

    @property
    def source(self) -> str:
        return self._items

    def _on_advance(self, item: str) -> None:
        self.column += 1
        if item == "\n":
            self.row += 1
            self.column = self.left_margin

    def fail(self, message: str, kind: ErrorKind) -> NoReturn:
        raise LexError(
            message, kind, self.row, self.column, self._pos, self._items, self.left_margin
        )


class TokenCursor(Cursor[Token]):
    """Cursor over a token sequence; failures are located by token index."""

    def __init__(
        self, tokens: Sequence[Token], source: str | None = None, left_margin: int = 0
    ) -> None:
        super().__init__(tokens)
        self.source = source
        self.left_margin = left_margin

    def fail(self, message: str, kind: ErrorKind, token: Token | None = None) -> NoReturn:
        if token is None and self._items:
            # At the end there is no current token; point at the last one
            token = self._items[min(self._pos, len(self._items) - 1)]
        raise ParseError(message, kind, self._pos, token, self.source, self.left_margin)
