"""CombLex syntax package.

Provides the immutable cursor and the parser combinator engine. Separate
from the bundled grammars so tools can build their own on top.

Python 3.13+.
"""

from .cursor import Cursor, ParseError, ParseResult
from .parser import (
    WHITESPACE,
    ForwardRule,
    InfixOperator,
    ParseOutcome,
    Parser,
    constant,
    error,
    ignored,
    infix,
    lexeme_start,
    maybe,
    regexp,
    token,
    zero_or_more,
)

__all__ = [
    "WHITESPACE",
    "Cursor",
    "ForwardRule",
    "InfixOperator",
    "ParseError",
    "ParseOutcome",
    "ParseResult",
    "Parser",
    "constant",
    "error",
    "ignored",
    "infix",
    "lexeme_start",
    "maybe",
    "regexp",
    "token",
    "zero_or_more",
]
