"""CombLex - parser combinators over an immutable cursor.

A small generic parser-combinator engine: anchored regex matching,
backtracking ordered choice, monadic sequencing, precedence climbing and
late-bound recursive rules.

Public API:
    Parser - Composable parser (or_, bind, and_, map, parse_to_completion)
    regexp, constant, error - Primitive parsers
    zero_or_more, maybe - Repetition and optional matching
    ForwardRule - Placeholder for recursive rules, defined once
    infix - Left-associative precedence level builder
    token, ignored - Whitespace-skipping token helpers
    Cursor, ParseResult, ParseError - Cursor-level types

Exceptions:
    CombLexError - Base exception class
    CombLexSyntaxError - Fatal parse error at the API boundary
    GrammarDefinitionError - Misbuilt grammar
    EvaluationError - Bundled grammar evaluation failure

Submodules:
    comblex.grammars.arithmetic - Arithmetic expression grammar
    comblex.grammars.graphics - Pipe-style graphics DSL
    comblex.diagnostics - Error codes, templates and formatting
"""

from .diagnostics import (
    CombLexError,
    CombLexSyntaxError,
    EvaluationError,
    GrammarDefinitionError,
)
from .syntax import (
    Cursor,
    ForwardRule,
    InfixOperator,
    ParseError,
    Parser,
    ParseResult,
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

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("comblex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CombLexError",
    "CombLexSyntaxError",
    "Cursor",
    "EvaluationError",
    "ForwardRule",
    "GrammarDefinitionError",
    "InfixOperator",
    "ParseError",
    "ParseResult",
    "Parser",
    "__version__",
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
