"""CombLex exception hierarchy with structured diagnostics.

Recoverable no-match never raises: combinators signal it with None.
These exceptions exist for the API boundary and for misbuilt grammars.

Python 3.13+. Zero external dependencies.
"""

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from comblex.syntax.cursor import ParseError


class CombLexError(Exception):
    """Base exception for all CombLex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CombLexSyntaxError(CombLexError):
    """Fatal parse failure surfaced by parse_to_completion().

    Wraps the ParseError value that combinators propagated internally.

    Attributes:
        parse_error: The underlying ParseError
        pos: Character offset where the failure was detected
    """

    def __init__(self, parse_error: "ParseError") -> None:
        """Initialize CombLexSyntaxError.

        Args:
            parse_error: Fatal parse error returned by the grammar
        """
        super().__init__(parse_error.to_diagnostic())
        self.parse_error = parse_error
        self.pos = parse_error.pos


class GrammarDefinitionError(CombLexError):
    """Grammar was built incorrectly.

    Examples:
    - Defining a forward rule twice
    - Passing a regular expression that does not compile
    """


class EvaluationError(CombLexError):
    """Runtime error while executing a parsed AST.

    Examples:
    - Division by zero in an arithmetic expression
    - Unknown action or sprite in a graphics pipeline
    """
