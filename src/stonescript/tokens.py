"""Token types, data structures, lookup tables and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    """Coarse token category."""

    TOKEN = "token"
    WORD = "word"
    NUMBER = "number"
    STRING = "string"


class Kind(Enum):
    """Fine-grained token kind, tagged with the category it belongs to."""

    # Punctuation and operators
    ADD = (TokenType.TOKEN, "add")  # +
    SUBTRACT = (TokenType.TOKEN, "subtract")  # -
    MULTIPLY = (TokenType.TOKEN, "multiply")  # *
    DIVIDE = (TokenType.TOKEN, "divide")  # /
    MODULO = (TokenType.TOKEN, "modulo")  # %
    LESS_THAN = (TokenType.TOKEN, "less_than")  # <
    GREATER_THAN = (TokenType.TOKEN, "greater_than")  # >
    ASSIGNMENT = (TokenType.TOKEN, "assignment")  # =
    NOT = (TokenType.TOKEN, "not")  # !
    OPEN_SCOPE = (TokenType.TOKEN, "open_scope")  # {
    CLOSE_SCOPE = (TokenType.TOKEN, "close_scope")  # }
    OPEN_GROUP = (TokenType.TOKEN, "open_group")  # (
    CLOSE_GROUP = (TokenType.TOKEN, "close_group")  # )
    OPEN_INDEX = (TokenType.TOKEN, "open_index")  # [
    CLOSE_INDEX = (TokenType.TOKEN, "close_index")  # ]
    PROPERTY = (TokenType.TOKEN, "property")  # .
    TERNARY = (TokenType.TOKEN, "ternary")  # ?
    TERNARY_SPLIT = (TokenType.TOKEN, "ternary_split")  # :
    EQUALS = (TokenType.TOKEN, "equals")  # ==
    LESS_THAN_EQUALS = (TokenType.TOKEN, "less_than_equals")  # <=
    GREATER_THAN_EQUALS = (TokenType.TOKEN, "greater_than_equals")  # >=
    NOT_EQUALS = (TokenType.TOKEN, "not_equals")  # !=
    AND = (TokenType.TOKEN, "and")  # &&
    OR = (TokenType.TOKEN, "or")  # ||
    NULLISH_COALESCING = (TokenType.TOKEN, "nullish_coalescing")  # ??
    END = (TokenType.TOKEN, "end")  # ;
    SEPARATOR = (TokenType.TOKEN, "separator")  # ,
    LAMBDA = (TokenType.TOKEN, "lambda")  # ->

    # Words (keywords are not distinguished yet)
    GENERIC = (TokenType.WORD, "generic")

    # Strings
    LITERAL = (TokenType.STRING, "literal")

    # Numbers
    SIGNED_INT = (TokenType.NUMBER, "signed_int")
    SIGNED_SHORT = (TokenType.NUMBER, "signed_short")
    SIGNED_LONG = (TokenType.NUMBER, "signed_long")
    SIGNED_FLOAT = (TokenType.NUMBER, "signed_float")
    SIGNED_DOUBLE = (TokenType.NUMBER, "signed_double")
    UNSIGNED_INT = (TokenType.NUMBER, "unsigned_int")
    UNSIGNED_SHORT = (TokenType.NUMBER, "unsigned_short")
    UNSIGNED_LONG = (TokenType.NUMBER, "unsigned_long")

    @property
    def type(self) -> TokenType:
        return self.value[0]

    @property
    def specific(self) -> str:
        return self.value[1]

    @classmethod
    def number(cls, signed: bool, subtype: str) -> Kind:
        """Look up the number kind for a signedness and subtype name (e.g. ``long``)."""
        prefix = "SIGNED" if signed else "UNSIGNED"
        return cls[f"{prefix}_{subtype.upper()}"]


@dataclass(frozen=True, slots=True)
class Position:
    """Source position: 1-based row, margin-based column, 0-based offset, span length."""

    row: int
    column: int
    offset: int
    length: int

    @property
    def end_offset(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical unit with its decoded value and source position."""

    kind: Kind
    value: str | int | float
    position: Position

    @property
    def type(self) -> TokenType:
        return self.kind.type

    @property
    def specific(self) -> str:
        return self.kind.specific


# ----------------------------------------------------------------------
# Lookup tables (read-only)
# ----------------------------------------------------------------------

SYMBOLS: MappingProxyType[str, Kind] = MappingProxyType(
    {
        "+": Kind.ADD,
        "-": Kind.SUBTRACT,
        "*": Kind.MULTIPLY,
        "/": Kind.DIVIDE,
        "%": Kind.MODULO,
        "<": Kind.LESS_THAN,
        ">": Kind.GREATER_THAN,
        "=": Kind.ASSIGNMENT,
        "!": Kind.NOT,
        "{": Kind.OPEN_SCOPE,
        "}": Kind.CLOSE_SCOPE,
        "(": Kind.OPEN_GROUP,
        ")": Kind.CLOSE_GROUP,
        "[": Kind.OPEN_INDEX,
        "]": Kind.CLOSE_INDEX,
        ".": Kind.PROPERTY,
        "?": Kind.TERNARY,
        ":": Kind.TERNARY_SPLIT,
        "==": Kind.EQUALS,
        "<=": Kind.LESS_THAN_EQUALS,
        ">=": Kind.GREATER_THAN_EQUALS,
        "!=": Kind.NOT_EQUALS,
        "&&": Kind.AND,
        "||": Kind.OR,
        "??": Kind.NULLISH_COALESCING,
        ";": Kind.END,
        ",": Kind.SEPARATOR,
        "->": Kind.LAMBDA,
    }
)

MAX_SYMBOL_LENGTH = max(len(symbol) for symbol in SYMBOLS)

# Reserved words. Declared for future use; the lexer tags every word GENERIC.
KEYWORDS = frozenset(
    {"for", "while", "let", "const", "function", "as", "null", "return", "throw"}
)

INT_SUFFIXES: MappingProxyType[str, str] = MappingProxyType(
    {"i": "int", "s": "short", "l": "long"}
)

FLOAT_SUFFIXES: MappingProxyType[str, str] = MappingProxyType({"d": "double", "f": "float"})

ESCAPES: MappingProxyType[str, str] = MappingProxyType({"t": "\t", "n": "\n"})

_ASCII_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_BLANKS = frozenset(" \t\n")


def is_word_char(ch: str) -> bool:
    """Return True if ch is an ASCII letter."""
    return ch in _ASCII_LETTERS


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in _DIGITS


def is_blank(ch: str) -> bool:
    """Return True if ch is whitespace skipped between tokens (space, tab, newline)."""
    return ch in _BLANKS
