"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistent, and documents every error case.
    """

    # =========================================================================
    # SYNTAX ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def no_match(position: int) -> Diagnostic:
        """Grammar produced no match at all.

        Args:
            position: Position where matching was attempted

        Returns:
            Diagnostic for NO_MATCH
        """
        msg = f"No match at position {position}"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCH,
            message=msg,
            hint="Check that the input starts with a token the grammar accepts",
        )

    @staticmethod
    def incomplete_parse(position: int) -> Diagnostic:
        """Grammar matched only a prefix of the input.

        Args:
            position: First position the grammar did not consume

        Returns:
            Diagnostic for INCOMPLETE_PARSE
        """
        msg = f"Unexpected input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.INCOMPLETE_PARSE,
            message=msg,
            hint="The grammar matched only a prefix of the input",
        )

    @staticmethod
    def grammar_abort(message: str) -> Diagnostic:
        """error() primitive reached during parsing.

        Args:
            message: Message supplied by the grammar author

        Returns:
            Diagnostic for GRAMMAR_ABORT
        """
        return Diagnostic(
            code=DiagnosticCode.GRAMMAR_ABORT,
            message=message,
            hint="This grammar path is marked unreachable or incomplete",
        )

    @staticmethod
    def unbound_rule(rule_name: str) -> Diagnostic:
        """Forward rule used before define() was called.

        Args:
            rule_name: Name of the forward rule

        Returns:
            Diagnostic for UNBOUND_RULE
        """
        msg = f"Rule '{rule_name}' used before definition"
        return Diagnostic(
            code=DiagnosticCode.UNBOUND_RULE,
            message=msg,
            hint=f"Call {rule_name}.define(...) once the grammar is assembled",
        )

    @staticmethod
    def no_progress(position: int) -> Diagnostic:
        """zero_or_more item parser succeeded without consuming input.

        Args:
            position: Position where the empty match occurred

        Returns:
            Diagnostic for NO_PROGRESS
        """
        msg = f"Repeated parser matched empty input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.NO_PROGRESS,
            message=msg,
            hint="Items passed to zero_or_more() must consume at least one character",
        )

    @staticmethod
    def nesting_depth_exceeded(rule_name: str, max_depth: int) -> Diagnostic:
        """Forward rule re-entered more often than allowed.

        Args:
            rule_name: Name of the forward rule
            max_depth: Configured nesting limit

        Returns:
            Diagnostic for NESTING_DEPTH_EXCEEDED
        """
        msg = f"Rule '{rule_name}' nesting depth exceeded (max: {max_depth})"
        return Diagnostic(
            code=DiagnosticCode.NESTING_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce nesting in the input or raise max_depth",
        )

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Input rejected by size limit.

        Args:
            size: Input length in characters
            max_size: Configured limit

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size {size} exceeds limit of {max_size} characters"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Pass max_source_size=0 to disable the limit",
        )

    # =========================================================================
    # GRAMMAR DEFINITION ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def rule_already_defined(rule_name: str) -> Diagnostic:
        """Forward rule bound a second time.

        Args:
            rule_name: Name of the forward rule

        Returns:
            Diagnostic for RULE_ALREADY_DEFINED
        """
        msg = f"Rule '{rule_name}' is already defined"
        return Diagnostic(
            code=DiagnosticCode.RULE_ALREADY_DEFINED,
            message=msg,
            hint="Forward rules can be defined only once",
        )

    @staticmethod
    def invalid_pattern(pattern: str, reason: str) -> Diagnostic:
        """Regular expression failed to compile.

        Args:
            pattern: Offending pattern source
            reason: Compiler error text

        Returns:
            Diagnostic for INVALID_PATTERN
        """
        msg = f"Invalid pattern {pattern!r}: {reason}"
        return Diagnostic(code=DiagnosticCode.INVALID_PATTERN, message=msg)

    # =========================================================================
    # EVALUATION ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def division_by_zero() -> Diagnostic:
        """Arithmetic division with a zero divisor."""
        return Diagnostic(
            code=DiagnosticCode.DIVISION_BY_ZERO,
            message="Division by zero",
        )

    @staticmethod
    def unknown_action(name: str, known: tuple[str, ...]) -> Diagnostic:
        """Graphics call names no known action.

        Args:
            name: Callee name from the source
            known: Accepted action names

        Returns:
            Diagnostic for UNKNOWN_ACTION
        """
        msg = f"Unknown action '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ACTION,
            message=msg,
            hint=f"Use one of: {', '.join(known)}",
        )

    @staticmethod
    def arity_mismatch(name: str, expected: int, received: int) -> Diagnostic:
        """Graphics call received the wrong number of arguments.

        Args:
            name: Action name
            expected: Required argument count
            received: Supplied argument count

        Returns:
            Diagnostic for ARITY_MISMATCH
        """
        msg = f"Action '{name}' expects {expected} argument(s), got {received}"
        return Diagnostic(code=DiagnosticCode.ARITY_MISMATCH, message=msg)

    @staticmethod
    def unknown_sprite(name: str) -> Diagnostic:
        """Sprite name missing from the sprite table.

        Args:
            name: Sprite name from the source

        Returns:
            Diagnostic for UNKNOWN_SPRITE
        """
        msg = f"Unknown sprite '{name}'"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_SPRITE,
            message=msg,
            hint="Register the sprite in SPRITES before drawing it",
        )

    @staticmethod
    def invalid_argument(name: str, expected_type: str, received: object) -> Diagnostic:
        """Graphics call argument has the wrong type.

        Args:
            name: Action name
            expected_type: Human-readable expected type
            received: Value actually supplied

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        msg = (
            f"Action '{name}' expects {expected_type} arguments, "
            f"got {type(received).__name__}"
        )
        return Diagnostic(code=DiagnosticCode.INVALID_ARGUMENT, message=msg)
