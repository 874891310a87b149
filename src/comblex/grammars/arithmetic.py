"""Arithmetic expression grammar.

Integers, the four binary operators and parentheses, with the usual
precedence (* and / bind tighter than + and -) and left associativity:

    expression ::= product (("+" | "-") product)*
    product    ::= atom (("*" | "/") atom)*
    atom       ::= NUMBER | "(" expression ")"

Whitespace (spaces, tabs, newlines) may appear around any token.

Example:
    >>> evaluate("((4 + 8) * 6)")
    72
    >>> parse_expression("1 - 2 - 3").left.run()
    -1
"""

import re
from dataclasses import dataclass
from enum import Enum
from functools import cache

from comblex.diagnostics import ErrorTemplate, EvaluationError
from comblex.syntax import ForwardRule, Parser, constant, infix, lexeme_start, token

__all__ = [
    "ArithmeticOperator",
    "BinaryExpression",
    "Expression",
    "Number",
    "build_arithmetic_grammar",
    "evaluate",
    "parse_expression",
]


@dataclass(frozen=True, slots=True)
class Number:
    """Integer literal."""

    value: int

    def run(self) -> int | float:
        return self.value


@dataclass(frozen=True, slots=True)
class BinaryExpression:
    """Binary operation node."""

    operator: "ArithmeticOperator"
    left: "Expression"
    right: "Expression"

    def run(self) -> int | float:
        """Evaluate the tree.

        Operator chains fold into left-deep trees, so the left spine is
        walked with a loop; only parenthesized operands recurse, and those
        are bounded by the grammar's nesting limit.
        """
        spine: list[BinaryExpression] = []
        node: Expression = self
        while isinstance(node, BinaryExpression):
            spine.append(node)
            node = node.left
        value = node.run()
        for binary in reversed(spine):
            value = binary.operator.apply(value, binary.right.run())
        return value


type Expression = Number | BinaryExpression


class ArithmeticOperator(Enum):
    """Binary arithmetic operators, keyed by their source symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def build(self, left: Expression, right: Expression) -> Expression:
        return BinaryExpression(self, left, right)

    def apply(self, left: int | float, right: int | float) -> int | float:
        """Evaluate the operator on two numbers.

        Raises:
            EvaluationError: On division by zero
        """
        match self:
            case ArithmeticOperator.ADD:
                return left + right
            case ArithmeticOperator.SUB:
                return left - right
            case ArithmeticOperator.MUL:
                return left * right
            case ArithmeticOperator.DIV:
                if right == 0:
                    raise EvaluationError(ErrorTemplate.division_by_zero())
                return left / right


def _operator_token(operator: ArithmeticOperator) -> Parser[ArithmeticOperator]:
    return token(re.escape(operator.value)).map(lambda _: operator)


def build_arithmetic_grammar(*, max_depth: int | None = None) -> Parser[Expression]:
    """Build a fresh arithmetic grammar.

    Args:
        max_depth: Parenthesis nesting limit (default: MAX_DEPTH)

    Returns:
        Parser for a complete expression, leading whitespace allowed
    """
    left_paren = token(r"[(]")
    right_paren = token(r"[)]")
    number = token(r"[0-9]+").map(lambda digits: Number(int(digits)))

    sum_op = _operator_token(ArithmeticOperator.ADD).or_(
        _operator_token(ArithmeticOperator.SUB)
    )
    product_op = _operator_token(ArithmeticOperator.MUL).or_(
        _operator_token(ArithmeticOperator.DIV)
    )

    expression: ForwardRule[Expression] = ForwardRule("expression", max_depth=max_depth)

    parenthesized = left_paren.and_(expression).bind(
        lambda inner: right_paren.and_(constant(inner))
    )
    atom = number.or_(parenthesized)
    product = infix(product_op, atom)
    expression.define(infix(sum_op, product))

    return lexeme_start(expression).named("arithmetic")


@cache
def _default_grammar() -> Parser[Expression]:
    return build_arithmetic_grammar()


def parse_expression(source: str) -> Expression:
    """Parse source into an expression tree.

    Raises:
        CombLexSyntaxError: If source is not a complete expression
    """
    return _default_grammar().parse_to_completion(source)


def evaluate(source: str) -> int | float:
    """Parse and evaluate source.

    Raises:
        CombLexSyntaxError: If source is not a complete expression
        EvaluationError: On division by zero
    """
    return parse_expression(source).run()
