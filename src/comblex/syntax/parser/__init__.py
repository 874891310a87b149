"""Parser combinator engine.

Module Organization:
- core.py: Parser class, combinator methods, completion entry points
- primitives.py: regexp, constant, error, zero_or_more, maybe
- rules.py: ForwardRule (recursive rules) and infix (precedence climbing)
- whitespace.py: token() and whitespace skipping

Public API:
    Parser: Composable parser over an immutable cursor
    ForwardRule: Late-bound placeholder for recursive rules
    infix: Left-associative precedence level builder
"""

from comblex.syntax.parser.core import ParseFunction, ParseOutcome, Parser
from comblex.syntax.parser.primitives import (
    constant,
    error,
    fail,
    maybe,
    regexp,
    zero_or_more,
)
from comblex.syntax.parser.rules import ForwardRule, InfixOperator, infix
from comblex.syntax.parser.whitespace import WHITESPACE, ignored, lexeme_start, token

__all__ = [
    "WHITESPACE",
    "ForwardRule",
    "InfixOperator",
    "ParseFunction",
    "ParseOutcome",
    "Parser",
    "constant",
    "error",
    "fail",
    "ignored",
    "infix",
    "lexeme_start",
    "maybe",
    "regexp",
    "token",
    "zero_or_more",
]
