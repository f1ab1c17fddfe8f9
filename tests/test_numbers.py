"""Test number literals: decimals, type suffixes, unsigned forms and failures."""

import math

import pytest

from stonescript.cursor import CharCursor
from stonescript.errors import ErrorKind, LexError
from stonescript.lexer import Lexer
from stonescript.pipeline import analyze
from stonescript.tokens import Kind, TokenType

from tests.conftest import assert_kinds, assert_values


def scan_number(source: str):
    """Run the number scanner directly on *source*."""
    return Lexer(CharCursor(source)).read_number()


class TestPlainNumbers:
    def test_integer(self, lex):
        tokens = lex("42")
        assert_kinds(tokens, [Kind.SIGNED_INT])
        assert tokens[0].value == 42
        assert isinstance(tokens[0].value, int)
        assert tokens[0].type == TokenType.NUMBER

    def test_float(self, lex):
        tokens = lex("3.14")
        assert_kinds(tokens, [Kind.SIGNED_FLOAT])
        assert tokens[0].value == pytest.approx(3.14)

    def test_trailing_point(self, lex):
        tokens = lex("1.")
        assert_kinds(tokens, [Kind.SIGNED_FLOAT])
        assert tokens[0].value == 1.0

    def test_leading_zeros(self, lex):
        assert lex("007")[0].value == 7

    def test_terminated_by_symbol(self, lex):
        tokens = lex("1+2;")
        assert_kinds(tokens, [Kind.SIGNED_INT, Kind.ADD, Kind.SIGNED_INT, Kind.END])
        assert_values(tokens, [1, "+", 2, ";"])

    def test_terminated_by_whitespace(self, lex):
        tokens = lex("12 34")
        assert_values(tokens, [12, 34])
        assert tokens[0].position.length == 2

    def test_minus_is_an_operator_in_source(self, lex):
        tokens = lex("-5")
        assert_kinds(tokens, [Kind.SUBTRACT, Kind.SIGNED_INT])


class TestNegativeLiteral:
    def test_negative_int(self):
        token = scan_number("-12")
        assert token.kind is Kind.SIGNED_INT
        assert token.value == -12
        assert token.position.length == 3

    def test_negative_float_with_suffix(self):
        token = scan_number("-2.5f")
        assert token.kind is Kind.SIGNED_FLOAT
        assert token.value == -2.5

    def test_negative_unsigned_rejected(self):
        with pytest.raises(LexError) as exc_info:
            scan_number("-3u")
        assert exc_info.value.kind is ErrorKind.NEGATIVE_UNSIGNED

    def test_bare_minus_reads_as_zero(self):
        token = scan_number("-")
        assert token.kind is Kind.SIGNED_INT
        assert token.value == 0


class TestSuffixes:
    def test_float_suffix(self, lex):
        tokens = lex("3.14f")
        assert_kinds(tokens, [Kind.SIGNED_FLOAT])
        assert tokens[0].specific == "signed_float"
        assert tokens[0].value == pytest.approx(3.14)
        assert tokens[0].position.length == 5

    def test_double_suffix(self, lex):
        tokens = lex("2d")
        assert_kinds(tokens, [Kind.SIGNED_DOUBLE])
        assert tokens[0].value == 2.0
        assert isinstance(tokens[0].value, float)

    def test_int_suffix(self, lex):
        tokens = lex("7i")
        assert_kinds(tokens, [Kind.SIGNED_INT])
        assert tokens[0].value == 7

    def test_int_suffix_truncates(self, lex):
        tokens = lex("3.9l")
        assert_kinds(tokens, [Kind.SIGNED_LONG])
        assert tokens[0].value == 3

    def test_short_suffix(self, lex):
        assert_kinds(lex("5s"), [Kind.SIGNED_SHORT])

    def test_suffix_is_case_insensitive(self, lex):
        assert_kinds(lex("1.5F"), [Kind.SIGNED_FLOAT])

    def test_unknown_suffix(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex("5x")
        assert exc_info.value.kind is ErrorKind.UNKNOWN_NUMBER_TYPE

    def test_multi_char_symbol_start_is_not_a_terminator(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex("1&&2")
        assert exc_info.value.kind is ErrorKind.UNKNOWN_NUMBER_TYPE


class TestUnsigned:
    def test_unsigned_long(self, lex):
        tokens = lex("10ul")
        assert_kinds(tokens, [Kind.UNSIGNED_LONG])
        assert tokens[0].specific == "unsigned_long"
        assert tokens[0].value == 10
        assert tokens[0].position.length == 4

    def test_unsigned_upper_u(self, lex):
        assert_kinds(lex("1Ui"), [Kind.UNSIGNED_INT])

    def test_unsigned_truncates_decimal(self, lex):
        tokens = lex("2.75us")
        assert_kinds(tokens, [Kind.UNSIGNED_SHORT])
        assert tokens[0].value == 2

    def test_unsigned_followed_by_terminator(self, lex):
        tokens = lex("4ui;")
        assert_kinds(tokens, [Kind.UNSIGNED_INT, Kind.END])

    def test_u_at_end_of_input(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex("5u")
        assert exc_info.value.kind is ErrorKind.UNEXPECTED_END

    def test_unknown_integer_type(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex("5uf")
        assert exc_info.value.kind is ErrorKind.UNKNOWN_INTEGER_TYPE

    def test_u_followed_by_space(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex("10u l")
        assert exc_info.value.kind is ErrorKind.UNKNOWN_INTEGER_TYPE


class TestDecimalPoints:
    def test_double_decimal(self, lex):
        with pytest.raises(LexError) as exc_info:
            lex("1.2.3")
        err = exc_info.value
        assert err.kind is ErrorKind.DOUBLE_DECIMAL_POINT
        assert err.offset == 3
        assert (err.row, err.column) == (1, 3)


class TestHugeLiterals:
    BIG = "1" + "0" * 400

    def test_plain_integer_stays_exact(self, lex):
        tokens = lex(self.BIG)
        assert_kinds(tokens, [Kind.SIGNED_INT])
        assert tokens[0].value == 10**400

    def test_float_suffix_saturates(self, lex):
        tokens = lex(self.BIG + "f")
        assert_kinds(tokens, [Kind.SIGNED_FLOAT])
        assert tokens[0].value == math.inf

    def test_double_suffix_saturates(self, lex):
        tokens = lex(self.BIG + "d")
        assert_kinds(tokens, [Kind.SIGNED_DOUBLE])
        assert tokens[0].value == math.inf

    def test_negative_float_suffix_saturates(self):
        token = scan_number("-" + self.BIG + "f")
        assert token.value == -math.inf

    def test_int_suffix_on_exact_integer(self, lex):
        tokens = lex(self.BIG + "l")
        assert_kinds(tokens, [Kind.SIGNED_LONG])
        assert tokens[0].value == 10**400

    def test_int_suffix_on_infinite_decimal(self, lex):
        tokens = lex(self.BIG + ".5i")
        assert_kinds(tokens, [Kind.SIGNED_INT])
        assert tokens[0].value == math.inf

    def test_unsigned_on_infinite_decimal(self, lex):
        tokens = lex(self.BIG + ".5ul")
        assert_kinds(tokens, [Kind.UNSIGNED_LONG])
        assert tokens[0].value == math.inf
        assert tokens[0].position.length == len(self.BIG) + 4

    def test_analyze_does_not_crash(self):
        result = analyze("/ " + self.BIG + "f ;")
        assert result.ok
        assert result.nodes[0].value[0].value == math.inf
