"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from stonescript.ast import Node
from stonescript.lexer import tokenize
from stonescript.parser import build_tree
from stonescript.tokens import Kind, Token


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens."""

    def _lex(source: str, left_margin: int = 0) -> list[Token]:
        return tokenize(source, left_margin)

    return _lex


@pytest.fixture
def build():
    """Return a helper that tokenizes source and builds its tree."""

    def _build(source: str) -> list[Node]:
        return build_tree(tokenize(source), source)

    return _build


def assert_kinds(tokens: list[Token], expected: list[Kind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[object]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_spans_cover(source: str, tokens: list[Token]) -> None:
    """Assert every token's span is consistent with the source characters it covers.

    Spans must be in order, must not overlap, and only whitespace may sit
    between them.
    """
    cursor = 0
    for tok in tokens:
        pos = tok.position
        assert pos.offset >= cursor, f"{tok} overlaps the previous token"
        assert source[cursor : pos.offset].strip(" \t\n") == "", f"gap before {tok}"
        assert pos.length > 0
        cursor = pos.end_offset
    assert source[cursor:].strip(" \t\n") == ""
