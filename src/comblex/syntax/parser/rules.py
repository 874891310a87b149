"""Grammar-building helpers: recursive rules and precedence climbing.

ForwardRule:
    Placeholder for a rule that appears inside its own definition, such as
    a parenthesized sub-expression. Build the grammar against the
    placeholder, then bind it once with define().

infix:
    One precedence level of left-associative binary operators. Stack
    calls to get several levels: each level's term parser is the next
    tighter level.

Example:
    >>> expression = ForwardRule[int]("expression")
    >>> atom = number.or_(lparen.and_(expression).bind(lambda e: rparen.and_(constant(e))))
    >>> expression.define(infix(add_op, infix(mul_op, atom)))
"""

import logging
from typing import Protocol

from comblex.core import DepthGuard
from comblex.diagnostics import ErrorTemplate, GrammarDefinitionError
from comblex.syntax.cursor import Cursor, ParseError
from comblex.syntax.parser.core import ParseOutcome, Parser
from comblex.syntax.parser.primitives import fail, zero_or_more

__all__ = ["ForwardRule", "InfixOperator", "infix"]

logger = logging.getLogger(__name__)


class ForwardRule[T](Parser[T]):
    """Late-bound parser for recursive grammar rules.

    Lifecycle:
        1. ForwardRule("name") - parsing it now fails with UNBOUND_RULE
        2. Build the grammar, embedding the rule by reference
        3. rule.define(grammar) - exactly once; later calls raise

    Every parser that captured the rule before define() sees the final
    definition, because they all hold this same object.

    Each rule carries a DepthGuard: re-entering the rule more than
    max_depth times within one parse returns a fatal
    NESTING_DEPTH_EXCEEDED ParseError instead of overflowing the stack.

    Thread Safety:
        Not thread-safe. define() is meant for single-threaded grammar
        setup, and the depth counter is per rule instance.
    """

    __slots__ = ("_defined", "_guard", "_target")

    def __init__(self, name: str, *, max_depth: int | None = None) -> None:
        """Initialize an unbound rule.

        Args:
            name: Rule name used in diagnostics
            max_depth: Nesting limit (default: MAX_DEPTH)
        """
        super().__init__(self._delegate, label=name)
        self._target: Parser[T] = fail(ErrorTemplate.unbound_rule(name))
        self._defined = False
        if max_depth is None:
            self._guard = DepthGuard(label=name)
        else:
            self._guard = DepthGuard(max_depth=max_depth, label=name)

    @property
    def name(self) -> str:
        """Rule name."""
        return self.label or "<anonymous>"

    @property
    def is_defined(self) -> bool:
        """True once define() has been called."""
        return self._defined

    @property
    def max_depth(self) -> int:
        """Effective nesting limit (after clamping to the recursion limit)."""
        return self._guard.max_depth

    def define(self, parser: Parser[T]) -> "ForwardRule[T]":
        """Bind the rule to its final definition.

        Args:
            parser: Complete grammar for this rule

        Returns:
            self, for chaining

        Raises:
            GrammarDefinitionError: If the rule is already defined
        """
        if self._defined:
            raise GrammarDefinitionError(ErrorTemplate.rule_already_defined(self.name))
        self._target = parser
        self._defined = True
        logger.debug("Bound forward rule %r to %r", self.name, parser)
        return self

    def _delegate(self, cursor: Cursor) -> ParseOutcome[T]:
        if self._guard.is_exceeded():
            logger.warning(
                "Rule %r exceeded nesting depth %d at position %d",
                self.name,
                self._guard.max_depth,
                cursor.pos,
            )
            return ParseError.from_diagnostic(
                ErrorTemplate.nesting_depth_exceeded(self.name, self._guard.max_depth),
                cursor,
            )
        with self._guard:
            return self._target.parse(cursor)


class InfixOperator[N](Protocol):
    """Binary operator tag understood by infix().

    Implemented by closed Enum unions (one member per operator) so the fold
    dispatches on the tag: ``operator.build(left, right)``.
    """

    def build(self, left: N, right: N) -> N:
        """Combine two operands into an operator node."""
        ...


def _fold_left[N](first: N, pairs: tuple[tuple[InfixOperator[N], N], ...]) -> N:
    tree = first
    for operator, term in pairs:
        tree = operator.build(tree, term)
    return tree


def infix[N](
    op_parser: Parser[InfixOperator[N]], term_parser: Parser[N]
) -> Parser[N]:
    """Build one left-associative precedence level.

    Parses ``term (operator term)*`` and folds left to right, so
    ``1 - 2 - 3`` becomes ``(1 - 2) - 3``. A trailing operator without a
    term is not consumed: the (operator, term) pair fails as a whole and
    the cursor stays after the last complete term.

    Args:
        op_parser: Yields an InfixOperator tag; use or_ for several
            operators at the same level
        term_parser: Operand parser (the next tighter level)

    Returns:
        Parser yielding the folded tree
    """
    operation = op_parser.bind(
        lambda operator: term_parser.map(lambda term: (operator, term))
    )
    return term_parser.bind(
        lambda first: zero_or_more(operation).map(lambda pairs: _fold_left(first, pairs))
    )
