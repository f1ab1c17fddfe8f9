"""StoneScript lexer: converts source text into a flat token sequence."""

from __future__ import annotations

import math

from stonescript.cursor import CharCursor
from stonescript.errors import ErrorKind
from stonescript.tokens import (
    ESCAPES,
    FLOAT_SUFFIXES,
    INT_SUFFIXES,
    MAX_SYMBOL_LENGTH,
    SYMBOLS,
    Kind,
    Position,
    Token,
    is_blank,
    is_digit,
    is_word_char,
)


class Lexer:
    """Tokenize the characters of a CharCursor into Token objects.

    Scanning is fail-fast: the first problem raises a LexError and no partial
    token list is returned.
    """

    def __init__(self, cursor: CharCursor) -> None:
        self._cursor = cursor

    def tokenize(self) -> list[Token]:
        """Consume the whole cursor and return the tokens in source order."""
        tokens: list[Token] = []
        token = self.read_next()
        while token is not None:
            tokens.append(token)
            token = self.read_next()
        return tokens

    def read_next(self) -> Token | None:
        """Read one token, or return None once only whitespace remains."""
        self._skip_blanks()
        if self._cursor.at_end(False):
            return None

        ch = self._cursor.peek()

        if ch == '"':
            return self.read_string()

        if is_word_char(ch):
            return self.read_word()

        token = self.read_symbol()
        if token is not None:
            return token

        if is_digit(ch) or ch == "-":
            return self.read_number()

        self._cursor.fail(f"unexpected character {ch!r}", ErrorKind.UNEXPECTED_CHARACTER)

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _mark(self) -> tuple[int, int, int]:
        return self._cursor.row, self._cursor.column, self._cursor.position

    def _emit(self, kind: Kind, value: str | int | float, start: tuple[int, int, int]) -> Token:
        row, column, offset = start
        length = self._cursor.position - offset
        return Token(kind, value, Position(row, column, offset, length))

    def _skip_blanks(self) -> None:
        while True:
            ch = self._cursor.peek()
            if ch is None or not is_blank(ch):
                return
            self._cursor.skip()

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def read_string(self) -> Token:
        """Scan a double-quoted literal, decoding backslash escapes.

        The span length counts source characters, not decoded length + 2:
        an escape contributes two (backslash and letter) even though it
        decodes to one.
        """
        start = self._mark()
        self._cursor.skip()  # opening quote
        escaped = False
        chars: list[str] = []

        while True:
            if self._cursor.at_end(False):
                self._cursor.fail("unterminated string literal", ErrorKind.UNTERMINATED_STRING)
            ch = self._cursor.advance()

            if escaped:
                chars.append(ESCAPES.get(ch, ch))
                escaped = False
                continue

            if ch == "\\":
                escaped = True
                continue

            if ch == '"':
                return self._emit(Kind.LITERAL, "".join(chars), start)

            chars.append(ch)

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------

    def read_word(self) -> Token:
        # Reserved words are not told apart yet; everything is GENERIC
        start = self._mark()
        chars: list[str] = []
        while not self._cursor.at_end(False) and is_word_char(self._cursor.peek()):
            chars.append(self._cursor.advance())
        return self._emit(Kind.GENERIC, "".join(chars), start)

    # ------------------------------------------------------------------
    # Punctuation and operators (longest match)
    # ------------------------------------------------------------------

    def read_symbol(self) -> Token | None:
        """Match the longest symbol at the cursor, or return None without consuming."""
        start = self._mark()
        for length in range(MAX_SYMBOL_LENGTH, 0, -1):
            candidate = self._lookahead(length)
            if candidate is None:
                continue
            kind = SYMBOLS.get(candidate)
            if kind is None:
                continue
            for _ in range(length):
                self._cursor.skip()
            return self._emit(kind, candidate, start)
        return None

    def _lookahead(self, length: int) -> str | None:
        chars = []
        for offset in range(length):
            ch = self._cursor.peek(False, offset)
            if ch is None:
                return None
            chars.append(ch)
        return "".join(chars)

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def read_number(self) -> Token:
        """Scan digits, one optional decimal point, and an optional type suffix.

        An optional leading ``-`` is kept in the literal text.
        """
        start = self._mark()
        chars: list[str] = []
        has_decimal = False

        if self._cursor.peek() == "-":
            chars.append("-")
            self._cursor.skip()

        while True:
            ch = self._cursor.peek()

            if ch is None:
                return self._plain_number("".join(chars), has_decimal, start)

            if ch == ".":
                if has_decimal:
                    self._cursor.fail(
                        "unexpected second decimal point", ErrorKind.DOUBLE_DECIMAL_POINT
                    )
                has_decimal = True
                chars.append(ch)
                self._cursor.skip()
                continue

            if is_digit(ch):
                chars.append(ch)
                self._cursor.skip()
                continue

            return self._number_suffix("".join(chars), has_decimal, ch, start)

    def _plain_number(self, text: str, has_decimal: bool, start: tuple[int, int, int]) -> Token:
        value = _parse_number(text, has_decimal)
        if has_decimal:
            return self._emit(Kind.SIGNED_FLOAT, value, start)
        return self._emit(Kind.SIGNED_INT, value, start)

    def _number_suffix(
        self, text: str, has_decimal: bool, ch: str, start: tuple[int, int, int]
    ) -> Token:
        value = _parse_number(text, has_decimal)
        suffix = ch.lower()

        if suffix == "u":
            if text.startswith("-"):
                self._cursor.fail("unsigned number cannot be negative", ErrorKind.NEGATIVE_UNSIGNED)
            self._cursor.skip()
            if self._cursor.at_end(False):
                self._cursor.fail(
                    "expected an integer type after 'u', found end of input",
                    ErrorKind.UNEXPECTED_END,
                )
            letter = self._cursor.peek()
            subtype = INT_SUFFIXES.get(letter)
            if subtype is None:
                self._cursor.fail(
                    f"unknown integer type {letter!r}", ErrorKind.UNKNOWN_INTEGER_TYPE
                )
            self._cursor.skip()
            return self._emit(Kind.number(False, subtype), _truncate(value), start)

        # Whitespace or a symbol ends the number without being part of it
        if ch.isspace() or ch in SYMBOLS:
            return self._plain_number(text, has_decimal, start)

        self._cursor.skip()
        if suffix in FLOAT_SUFFIXES:
            return self._emit(Kind.number(True, FLOAT_SUFFIXES[suffix]), _to_float(value), start)
        if suffix in INT_SUFFIXES:
            return self._emit(Kind.number(True, INT_SUFFIXES[suffix]), _truncate(value), start)
        self._cursor.fail(f"unknown number type {ch!r}", ErrorKind.UNKNOWN_NUMBER_TYPE)


def _parse_number(text: str, has_decimal: bool) -> int | float:
    """Best-effort numeric value of *text*; malformed numerals read as 0."""
    try:
        return float(text) if has_decimal else int(text)
    except ValueError:
        return 0


def _truncate(value: int | float) -> int | float:
    """Drop the fractional part toward zero; infinities are kept as they are."""
    try:
        return math.trunc(value)
    except OverflowError:
        return value


def _to_float(value: int | float) -> float:
    """Convert to float, saturating integers too large to represent."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def tokenize(source: str | CharCursor, left_margin: int = 0) -> list[Token]:
    """Convenience function: tokenize source text (or a prepared cursor)."""
    cursor = source if isinstance(source, CharCursor) else CharCursor(source, left_margin)
    return Lexer(cursor).tokenize()
