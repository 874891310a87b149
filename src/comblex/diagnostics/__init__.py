"""Diagnostic system for CombLex errors.

Provides structured error diagnostics with codes, spans and hints,
rendered Rust-style by Diagnostic.format_error().
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CombLexError,
    CombLexSyntaxError,
    EvaluationError,
    GrammarDefinitionError,
)
from .templates import ErrorTemplate

__all__ = [
    "CombLexError",
    "CombLexSyntaxError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "EvaluationError",
    "GrammarDefinitionError",
    "SourceSpan",
]
