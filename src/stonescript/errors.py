"""Error types with location suffixes and formatted source context."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stonescript.tokens import Token


class ErrorKind(Enum):
    UNEXPECTED_END = auto()  # cursor exhausted where a value was required
    UNTERMINATED_SPAN = auto()  # consume_until hit the end before its terminator
    UNTERMINATED_STRING = auto()
    DOUBLE_DECIMAL_POINT = auto()
    NEGATIVE_UNSIGNED = auto()
    UNKNOWN_INTEGER_TYPE = auto()
    UNKNOWN_NUMBER_TYPE = auto()
    UNEXPECTED_CHARACTER = auto()
    UNEXPECTED_TOKEN = auto()


class StoneScriptError(Exception):
    """Base class for every error raised by the front end."""

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        self.message = message
        self.kind = kind
        suffix = self.location()
        super().__init__(f"{message} {suffix}" if suffix else message)

    def location(self) -> str:
        return ""


def _snippet(
    message: str,
    filename: str,
    source: str,
    row: int,
    column: int,
    width: int,
    left_margin: int = 0,
) -> str:
    lines = source.splitlines(keepends=True)
    line_idx = row - 1

    if 0 <= line_idx < len(lines):
        source_line = lines[line_idx].rstrip("\n").rstrip("\r")
    else:
        source_line = ""

    # Columns start at the left margin
    pad = " " * max(0, column - left_margin)
    carets = "^" * max(1, width)

    line_num = str(row)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{row}:{column}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class LexError(StoneScriptError):
    """Raised on the first scanning error, located by row and column."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        row: int,
        column: int,
        offset: int,
        source: str,
        left_margin: int = 0,
    ) -> None:
        self.row = row
        self.column = column
        self.offset = offset
        self.source = source
        self.left_margin = left_margin
        super().__init__(message, kind)

    def location(self) -> str:
        return f"({self.row}:{self.column})"

    def format(self, filename: str = "input.ss") -> str:
        return _snippet(
            self.message, filename, self.source, self.row, self.column, 1, self.left_margin
        )


class ParseError(StoneScriptError):
    """Raised on the first tree-building error, located by token index."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        index: int,
        token: Token | None = None,
        source: str | None = None,
        left_margin: int = 0,
    ) -> None:
        self.index = index
        self.token = token
        self.source = source
        self.left_margin = left_margin
        super().__init__(message, kind)

    def location(self) -> str:
        return f"({self.index})"

    def format(self, filename: str = "input.ss") -> str:
        # Without the offending token or the source text there is nothing to underline
        if self.token is None or self.source is None:
            return f"error: {self}"
        pos = self.token.position
        return _snippet(
            self.message,
            filename,
            self.source,
            pos.row,
            pos.column,
            pos.length,
            self.left_margin,
        )


class ConfigError(StoneScriptError):
    """Raised when stonescript.toml is missing required fields or has wrong types."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)

    def location(self) -> str:
        return f"({self.path})" if self.path else ""
