"""Bundled example grammars built on the combinator engine.

Submodules:
    arithmetic - integer expressions with + - * / and parentheses
    graphics - ``move 40, 40 |> scale 5 |> draw 'straight'`` pipelines
"""

from . import arithmetic, graphics

__all__ = ["arithmetic", "graphics"]
