"""Tests for Parser combinator methods: or_, bind, and_, map, named."""

from __future__ import annotations

from comblex.diagnostics import DiagnosticCode
from comblex.syntax.cursor import Cursor, ParseError, ParseResult
from comblex.syntax.parser.core import Parser
from comblex.syntax.parser.primitives import constant, error, regexp

DIGITS = regexp(r"[0-9]+")
LETTERS = regexp(r"[a-z]+")


class TestOr:
    """Test ordered choice."""

    def test_first_alternative_wins(self) -> None:
        parser = regexp(r"a").or_(regexp(r"ab"))

        assert parser.parse(Cursor("ab", 0)) == ParseResult("a", Cursor("ab", 1))

    def test_second_alternative_tried_at_original_cursor(self) -> None:
        """Backtracking: the failed branch consumed nothing from the caller's view."""
        first = regexp(r"a").and_(regexp(r"x"))
        parser = first.or_(regexp(r"ab"))

        assert parser.parse(Cursor("ab", 0)) == ParseResult("ab", Cursor("ab", 2))

    def test_both_fail_returns_none(self) -> None:
        assert DIGITS.or_(LETTERS).parse(Cursor("+", 0)) is None

    def test_fatal_error_skips_alternative(self) -> None:
        parser = error("stop").or_(LETTERS)

        result = parser.parse(Cursor("abc", 0))

        assert isinstance(result, ParseError)
        assert result.code is DiagnosticCode.GRAMMAR_ABORT

    def test_pipe_operator_is_or(self) -> None:
        parser = DIGITS | LETTERS

        assert parser.parse(Cursor("abc", 0)) == ParseResult("abc", Cursor("abc", 3))


class TestBind:
    """Test monadic sequencing."""

    def test_second_parser_depends_on_first_value(self) -> None:
        """Length-prefixed field: '3abcde' reads exactly three letters."""
        parser = DIGITS.bind(lambda n: regexp(r"[a-z]{%d}" % int(n)))

        result = parser.parse(Cursor("3abcde", 0))

        assert result == ParseResult("abc", Cursor("3abcde", 4))

    def test_second_runs_from_successor_cursor(self) -> None:
        parser = DIGITS.bind(lambda _: LETTERS)

        assert parser.parse(Cursor("12ab", 0)) == ParseResult("ab", Cursor("12ab", 4))

    def test_first_failure_skips_callback(self) -> None:
        calls: list[str] = []

        def callback(value: str) -> Parser[str]:
            calls.append(value)
            return LETTERS

        assert DIGITS.bind(callback).parse(Cursor("ab", 0)) is None
        assert calls == []

    def test_second_failure_fails_whole(self) -> None:
        assert DIGITS.bind(lambda _: LETTERS).parse(Cursor("12+", 0)) is None

    def test_fatal_error_from_first_propagates(self) -> None:
        result = error("first").bind(lambda _: LETTERS).parse(Cursor("ab", 0))

        assert isinstance(result, ParseError)
        assert result.message == "first"


class TestAnd:
    """Test sequencing that discards the first value."""

    def test_keeps_second_value(self) -> None:
        parser = regexp(r"\(").and_(DIGITS)

        assert parser.parse(Cursor("(12", 0)) == ParseResult("12", Cursor("(12", 3))

    def test_fails_if_first_fails(self) -> None:
        assert regexp(r"\(").and_(DIGITS).parse(Cursor("12", 0)) is None

    def test_rshift_operator_is_and(self) -> None:
        parser = regexp(r"\(") >> DIGITS

        assert parser.parse(Cursor("(7", 0)) == ParseResult("7", Cursor("(7", 2))

    def test_fatal_error_in_second_reports_its_position(self) -> None:
        result = regexp(r"ab").and_(error("after ab")).parse(Cursor("abc", 0))

        assert isinstance(result, ParseError)
        assert result.pos == 2


class TestMap:
    """Test value transformation."""

    def test_transforms_value_keeps_cursor(self) -> None:
        result = DIGITS.map(int).parse(Cursor("42x", 0))

        assert result == ParseResult(42, Cursor("42x", 2))

    def test_failure_passes_through(self) -> None:
        assert DIGITS.map(int).parse(Cursor("x", 0)) is None

    def test_map_equivalent_to_bind_constant(self) -> None:
        cursor = Cursor("42x", 0)

        via_map = DIGITS.map(int).parse(cursor)
        via_bind = DIGITS.bind(lambda d: constant(int(d))).parse(cursor)

        assert via_map == via_bind


class TestParserIdentity:
    """Test labels and sharing."""

    def test_repr_uses_label(self) -> None:
        assert repr(DIGITS.named("digits")) == "Parser(digits)"

    def test_repr_without_label(self) -> None:
        assert repr(Parser(lambda cursor: None)) == "Parser(<anonymous>)"

    def test_shared_subparser_in_two_composites(self) -> None:
        """One instance reused by several parsers behaves the same in each."""
        number = DIGITS.map(int)
        pair = number.bind(lambda a: regexp(",").and_(number).map(lambda b: (a, b)))
        single = regexp("#").and_(number)

        assert pair.parse_to_completion("1,2") == (1, 2)
        assert single.parse_to_completion("#3") == 3
