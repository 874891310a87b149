"""Hypothesis strategies for CombLex property-based testing.

Strategies are organized by grammar:

- arithmetic: well-formed expressions paired with their values
- graphics: well-formed pipelines paired with their primitive actions

Usage:
    from tests.strategies import arithmetic_sources, pipeline_sources

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - arith_depth, arith_ws
    - pipe_length, pipe_grouped
"""

from .arithmetic import arithmetic_expressions, arithmetic_sources
from .graphics import graphics_calls, pipeline_sources

__all__ = [
    "arithmetic_expressions",
    "arithmetic_sources",
    "graphics_calls",
    "pipeline_sources",
]
