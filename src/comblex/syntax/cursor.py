"""Immutable cursor and parse outcomes.

Every parser receives a Cursor and, on success, returns a ParseResult with
a NEW cursor. Backtracking is therefore free: keep the old cursor and try
the next alternative from it.

Line numbers count \\n only. CRLF input works because the \\n is still
present; CR-only input reports everything on line 1.
"""

import re
from dataclasses import dataclass

from comblex.diagnostics import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Position in a source string.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = cursor.match(re.compile(r"hel"))
        >>> result.value, result.cursor.pos
        ('hel', 3)
        >>> cursor.pos
        0
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True once every character has been consumed."""
        return self.pos >= len(self.source)

    def match(self, pattern: re.Pattern[str]) -> "ParseResult[str] | None":
        """Match pattern anchored at the current position.

        Pattern.match(source, pos) never scans forward: a match either
        starts exactly at pos or does not happen. Note that "^" in the
        pattern still means start of the whole string, not pos.

        Args:
            pattern: Compiled regular expression

        Returns:
            ParseResult with the matched text and a cursor advanced past it,
            or None if the pattern does not match at pos

        Example:
            >>> Cursor("a1", 1).match(re.compile(r"[0-9]+")).value
            '1'
            >>> Cursor("a1", 0).match(re.compile(r"[0-9]+")) is None
            True
        """
        found = pattern.match(self.source, self.pos)
        if found is None:
            return None
        return ParseResult(found.group(0), Cursor(self.source, found.end()))

    def compute_line_col(self) -> tuple[int, int]:
        """Return the 1-indexed (line, column) of pos.

        O(pos); only called when reporting errors.

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        return (line, self.pos - last_newline)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Successful parse: the value and the cursor just past it."""

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Fatal parse failure.

    Returned (not raised) by parsers that must abort instead of
    backtracking. Combinators pass it through untouched; only
    Parser.parse_to_completion() turns it into an exception.

    Example:
        >>> error = ParseError("Unexpected input", Cursor("1 +\\n2 )", 6))
        >>> error.format_error()
        '2:3: Unexpected input'
    """

    message: str
    cursor: Cursor
    code: DiagnosticCode = DiagnosticCode.NO_MATCH
    hint: str | None = None

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic, cursor: Cursor) -> "ParseError":
        """Build a ParseError from an ErrorTemplate diagnostic."""
        return cls(
            message=diagnostic.message,
            cursor=cursor,
            code=diagnostic.code,
            hint=diagnostic.hint,
        )

    @property
    def pos(self) -> int:
        """Character offset where the failure was detected."""
        return self.cursor.pos

    def to_diagnostic(self) -> Diagnostic:
        """Convert to a Diagnostic with a line:column span."""
        line, col = self.cursor.compute_line_col()
        span = SourceSpan(start=self.pos, end=self.pos, line=line, column=col)
        return Diagnostic(code=self.code, message=self.message, span=span, hint=self.hint)

    def format_error(self) -> str:
        """One-line ``line:col: message`` form, used in log records."""
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: {self.message}"
