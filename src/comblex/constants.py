"""Shared constants for CombLex.

This module provides centralized configuration constants used across the
syntax and grammar packages. Placing constants here avoids circular
imports and provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MAX_DEPTH",
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Default nesting limit for a ForwardRule (re-entries of the same rule
# within one parse). A nested level through a combinator grammar costs
# roughly ten Python frames, so 50 levels stay well inside the default
# recursion limit of 1000.
MAX_DEPTH: int = 50

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB of ASCII).
# Checked by Parser.try_parse() and Parser.parse_to_completion().
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
