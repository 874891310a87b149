"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Syntax errors (fatal parse failures)
        2000-2999: Grammar definition errors (misbuilt combinator graphs)
        3000-3999: Evaluation errors (bundled grammars' AST execution)
    """

    # Syntax errors (1000-1999)
    NO_MATCH = 1001
    INCOMPLETE_PARSE = 1002
    GRAMMAR_ABORT = 1003  # error() primitive reached
    UNBOUND_RULE = 1004
    NO_PROGRESS = 1005  # zero_or_more item matched empty input
    NESTING_DEPTH_EXCEEDED = 1006
    SOURCE_TOO_LARGE = 1007

    # Grammar definition errors (2000-2999)
    RULE_ALREADY_DEFINED = 2001
    INVALID_PATTERN = 2002

    # Evaluation errors (3000-3999)
    DIVISION_BY_ZERO = 3001
    UNKNOWN_ACTION = 3002
    ARITY_MISMATCH = 3003
    UNKNOWN_SPRITE = 3004
    INVALID_ARGUMENT = 3005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for errors not tied to input text)
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[INCOMPLETE_PARSE]: Unexpected input at position 2
              --> line 1, column 3
              = help: The grammar matched only a prefix of the input

        Returns:
            Formatted error message
        """
        parts = [f"error[{self.code.name}]: {self.message}"]
        if self.span:
            parts.append(f"  --> line {self.span.line}, column {self.span.column}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)
