"""Primitive parser constructors.

Leaf parsers (regexp, constant, error) and the two repetition helpers that
are not methods on Parser (zero_or_more, maybe).
"""

import re

from comblex.diagnostics import Diagnostic, ErrorTemplate, GrammarDefinitionError
from comblex.syntax.cursor import Cursor, ParseError, ParseResult
from comblex.syntax.parser.core import ParseOutcome, Parser

__all__ = ["constant", "error", "fail", "maybe", "regexp", "zero_or_more"]


def regexp(pattern: str | re.Pattern[str], flags: int = 0) -> Parser[str]:
    """Match a regular expression anchored at the cursor.

    Args:
        pattern: Pattern source or compiled pattern
        flags: re flags (only valid with a pattern string)

    Returns:
        Parser yielding the matched text

    Raises:
        GrammarDefinitionError: If pattern does not compile

    Example:
        >>> regexp(r"[0-9]+").parse(Cursor("42+1", 0)).value
        '42'
    """
    try:
        compiled = re.compile(pattern, flags)
    except re.error as e:
        raise GrammarDefinitionError(
            ErrorTemplate.invalid_pattern(str(pattern), str(e))
        ) from e

    def parse_pattern(cursor: Cursor) -> ParseResult[str] | None:
        return cursor.match(compiled)

    return Parser(parse_pattern, label=f"regexp({compiled.pattern!r})")


def constant[T](value: T) -> Parser[T]:
    """Succeed without consuming input, yielding value."""

    def parse_constant(cursor: Cursor) -> ParseResult[T]:
        return ParseResult(value, cursor)

    return Parser(parse_constant, label=f"constant({value!r})")


def fail[T](diagnostic: Diagnostic) -> Parser[T]:
    """Always return a fatal ParseError built from diagnostic."""

    def parse_failure(cursor: Cursor) -> ParseError:
        return ParseError.from_diagnostic(diagnostic, cursor)

    return Parser(parse_failure, label=f"fail({diagnostic.code.name})")


def error[T](message: str) -> Parser[T]:
    """Abort parsing with message at the current cursor.

    Use for grammar slots that must never be reached. The resulting
    ParseError is fatal: no alternative is tried after it.
    """
    return fail(ErrorTemplate.grammar_abort(message))


def zero_or_more[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Apply parser repeatedly until it returns no match.

    Always succeeds (possibly with an empty tuple); the cursor is left after
    the last successful item.

    An item that succeeds without consuming input would repeat forever, so
    it is reported as a fatal NO_PROGRESS ParseError at that position.
    """

    def parse_many(cursor: Cursor) -> ParseOutcome[tuple[T, ...]]:
        values: list[T] = []
        while True:
            result = parser.parse(cursor)
            if result is None:
                return ParseResult(tuple(values), cursor)
            if isinstance(result, ParseError):
                return result
            if result.cursor.pos <= cursor.pos:
                return ParseError.from_diagnostic(
                    ErrorTemplate.no_progress(cursor.pos), cursor
                )
            values.append(result.value)
            cursor = result.cursor

    return Parser(parse_many, label=f"zero_or_more({parser!r})")


def maybe[T](parser: Parser[T]) -> Parser[T | None]:
    """Optional match: parser's value, or None without consuming input."""
    return parser.or_(constant(None))
