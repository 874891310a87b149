"""Core Parser abstraction and completion entry points.

A :class:`Parser` wraps a function ``Cursor -> ParseOutcome[T]`` where the
outcome is one of:

- :class:`~comblex.syntax.cursor.ParseResult` - success, value plus successor cursor
- ``None`` - recoverable no-match; lets ``or_`` try the next alternative
- :class:`~comblex.syntax.cursor.ParseError` - fatal; every combinator passes it
  through untouched, nothing backtracks past it

Exceptions appear only at the API boundary: :meth:`Parser.parse_to_completion`
raises :class:`~comblex.diagnostics.CombLexSyntaxError`. Use
:meth:`Parser.try_parse` to receive the ParseError as a value instead.

See Also:
    - :mod:`comblex.syntax.parser.primitives` - regexp, constant, error, zero_or_more, maybe
    - :mod:`comblex.syntax.parser.rules` - ForwardRule and infix grammar builders
"""

import logging
from collections.abc import Callable

from comblex.constants import MAX_SOURCE_SIZE
from comblex.diagnostics import CombLexSyntaxError, ErrorTemplate
from comblex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = ["ParseFunction", "ParseOutcome", "Parser"]

logger = logging.getLogger(__name__)

type ParseOutcome[T] = ParseResult[T] | ParseError | None
type ParseFunction[T] = Callable[[Cursor], ParseOutcome[T]]


class Parser[T]:
    """Composable parser over an immutable cursor.

    Parsers are pure descriptions of grammar rules: building one never reads
    input, and the same instance can be shared by any number of composite
    parsers.

    Example:
        >>> digits = regexp(r"[0-9]+").map(int)
        >>> pair = digits.bind(lambda a: regexp(",").and_(digits).map(lambda b: (a, b)))
        >>> pair.parse_to_completion("4,2")
        (4, 2)
    """

    __slots__ = ("_parse_fn", "label")

    def __init__(self, parse_fn: ParseFunction[T], label: str | None = None) -> None:
        """Initialize parser.

        Args:
            parse_fn: Function implementing the rule
            label: Optional name shown in repr() and debug logs
        """
        self._parse_fn = parse_fn
        self.label = label

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label or '<anonymous>'})"

    def parse(self, cursor: Cursor) -> ParseOutcome[T]:
        """Run the rule at cursor."""
        return self._parse_fn(cursor)

    def named(self, label: str) -> "Parser[T]":
        """Return the same rule under a new label."""
        return Parser(self._parse_fn, label)

    # =========================================================================
    # COMBINATORS
    # =========================================================================

    def or_[U](self, other: "Parser[U]") -> "Parser[T | U]":
        """Ordered choice: try self, then other at the ORIGINAL cursor.

        First success wins; there is no longest-match preference. A fatal
        ParseError from self is returned without trying other.
        """

        def parse_choice(cursor: Cursor) -> ParseOutcome[T | U]:
            result = self.parse(cursor)
            if result is None:
                return other.parse(cursor)
            return result

        return Parser(parse_choice)

    def bind[U](self, fn: Callable[[T], "Parser[U]"]) -> "Parser[U]":
        """Sequence: run self, then the parser fn(value) from the successor cursor."""

        def parse_bound(cursor: Cursor) -> ParseOutcome[U]:
            result = self.parse(cursor)
            if not isinstance(result, ParseResult):
                return result
            return fn(result.value).parse(result.cursor)

        return Parser(parse_bound)

    def and_[U](self, other: "Parser[U]") -> "Parser[U]":
        """Run self, discard its value, then run other."""
        return self.bind(lambda _: other)

    def map[U](self, fn: Callable[[T], U]) -> "Parser[U]":
        """Transform the value, keep the successor cursor.

        Equivalent to ``self.bind(lambda v: constant(fn(v)))`` without the
        intermediate parser.
        """

        def parse_mapped(cursor: Cursor) -> ParseOutcome[U]:
            result = self.parse(cursor)
            if not isinstance(result, ParseResult):
                return result
            return ParseResult(fn(result.value), result.cursor)

        return Parser(parse_mapped)

    # p | q  and  p >> q
    __or__ = or_
    __rshift__ = and_

    # =========================================================================
    # ENTRY POINTS
    # =========================================================================

    def try_parse(
        self, source: str, *, max_source_size: int | None = None
    ) -> ParseResult[T] | ParseError:
        """Parse source from offset 0, requiring the whole input be consumed.

        Args:
            source: Input text
            max_source_size: Maximum input length in characters
                (default: MAX_SOURCE_SIZE, 0 disables the check)

        Returns:
            ParseResult at end of input, or the ParseError describing why
            the input was rejected
        """
        limit = max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        start = Cursor(source, 0)

        if limit and len(source) > limit:
            return ParseError.from_diagnostic(
                ErrorTemplate.source_too_large(len(source), limit), start
            )

        result = self.parse(start)
        if result is None:
            return ParseError.from_diagnostic(ErrorTemplate.no_match(start.pos), start)
        if isinstance(result, ParseError):
            return result
        if not result.cursor.is_eof:
            return ParseError.from_diagnostic(
                ErrorTemplate.incomplete_parse(result.cursor.pos), result.cursor
            )
        return result

    def parse_to_completion(self, source: str, *, max_source_size: int | None = None) -> T:
        """Parse source and return the value, rejecting partial matches.

        Args:
            source: Input text
            max_source_size: Maximum input length in characters
                (default: MAX_SOURCE_SIZE, 0 disables the check)

        Returns:
            Value produced by the grammar

        Raises:
            CombLexSyntaxError: If nothing matched, the match stopped short of
                the end of input, or the grammar reported a fatal error.
                The error's ``pos`` is the offending offset.
        """
        outcome = self.try_parse(source, max_source_size=max_source_size)
        if isinstance(outcome, ParseError):
            logger.debug(
                "Parse failed at position %d (%s): %s",
                outcome.pos,
                outcome.code.name,
                outcome.format_error(),
            )
            raise CombLexSyntaxError(outcome)
        return outcome.value
