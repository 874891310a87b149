"""Pipe-style graphics DSL.

A pipeline is a chain of action calls joined by ``|>``, read left to
right. Parentheses group a sub-pipeline:

    pipeline ::= atom ("|>" atom)*
    atom     ::= call | "(" pipeline ")"
    call     ::= NAME argument ("," argument)*
    argument ::= NUMBER | "'" WORD "'"

Executing a pipeline builds a tree of graphic action records (move, scale,
draw, compose). Drawing those records is left to the caller.

Example:
    >>> actions = execute("move 40, 40 |> scale 5 |> draw 'straight'")
    >>> [action.type for action in flatten_actions(actions)]
    [<ActionType.MOVE: 'move'>, <ActionType.SCALE: 'scale'>, <ActionType.DRAW_SPRITE: 'draw'>]
"""

from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import Literal

from comblex.diagnostics import ErrorTemplate, EvaluationError
from comblex.syntax import (
    ForwardRule,
    Parser,
    constant,
    infix,
    lexeme_start,
    token,
    zero_or_more,
)

__all__ = [
    "SPRITES",
    "ActionType",
    "Call",
    "ComposeAction",
    "Composable",
    "DrawSprite",
    "EmptyAction",
    "GraphicAction",
    "Move",
    "Numeric",
    "PipeOperator",
    "Scale",
    "SpriteData",
    "Text",
    "and_then",
    "build_graphics_grammar",
    "draw_sprite",
    "empty",
    "execute",
    "flatten_actions",
    "move",
    "parse_pipeline",
    "scale",
]


# ============================================================================
# GRAPHIC ACTIONS
# ============================================================================


class ActionType(Enum):
    """Action kinds; the values are the callee names used in source."""

    EMPTY = "empty"
    MOVE = "move"
    SCALE = "scale"
    DRAW_SPRITE = "draw"
    COMPOSE = "compose"


@dataclass(frozen=True, slots=True)
class SpriteData:
    """Source rectangle in a sprite sheet and its destination size."""

    sx: int
    sy: int
    sw: int
    sh: int
    dw: int
    dh: int
    dx: int = 0
    dy: int = 0


@dataclass(frozen=True, slots=True)
class EmptyAction:
    type: Literal[ActionType.EMPTY] = ActionType.EMPTY


@dataclass(frozen=True, slots=True)
class Move:
    x: int
    y: int
    type: Literal[ActionType.MOVE] = ActionType.MOVE


@dataclass(frozen=True, slots=True)
class Scale:
    scale: int
    type: Literal[ActionType.SCALE] = ActionType.SCALE


@dataclass(frozen=True, slots=True)
class DrawSprite:
    sprite: str
    data: SpriteData
    type: Literal[ActionType.DRAW_SPRITE] = ActionType.DRAW_SPRITE


@dataclass(frozen=True, slots=True)
class ComposeAction:
    """Run first, then second."""

    first: "GraphicAction"
    second: "GraphicAction"
    type: Literal[ActionType.COMPOSE] = ActionType.COMPOSE


type GraphicAction = EmptyAction | Move | Scale | DrawSprite | ComposeAction


SPRITES: dict[str, SpriteData] = {
    "straight": SpriteData(sx=212, sy=1, sw=49, sh=62, dw=49, dh=62),
}


def empty() -> EmptyAction:
    return EmptyAction()


def move(x: int, y: int) -> Move:
    return Move(x, y)


def scale(ratio: int) -> Scale:
    return Scale(ratio)


def draw_sprite(name: str, sprites: dict[str, SpriteData] | None = None) -> DrawSprite:
    """Look up name in sprites (default: SPRITES).

    Raises:
        EvaluationError: If the sprite is not registered
    """
    table = SPRITES if sprites is None else sprites
    if name not in table:
        raise EvaluationError(ErrorTemplate.unknown_sprite(name))
    return DrawSprite(name, table[name])


def and_then(first: GraphicAction, second: GraphicAction) -> ComposeAction:
    return ComposeAction(first, second)


def flatten_actions(action: GraphicAction) -> list[GraphicAction]:
    """List primitive actions in the order they run, dropping empties."""
    actions: list[GraphicAction] = []
    pending = [action]
    while pending:
        current = pending.pop()
        match current:
            case ComposeAction(first=first, second=second):
                pending.append(second)
                pending.append(first)
            case EmptyAction():
                pass
            case _:
                actions.append(current)
    return actions


# ============================================================================
# AST
# ============================================================================


@dataclass(frozen=True, slots=True)
class Numeric:
    value: int

    def exec(self) -> int:
        return self.value


@dataclass(frozen=True, slots=True)
class Text:
    value: str

    def exec(self) -> str:
        return self.value


type Argument = Numeric | Text

_ARITY: dict[ActionType, int] = {
    ActionType.MOVE: 2,
    ActionType.SCALE: 1,
    ActionType.DRAW_SPRITE: 1,
}


@dataclass(frozen=True, slots=True)
class Call:
    """Action call such as ``move 20, 20``."""

    name: str
    args: tuple[Argument, ...]

    def exec(self) -> GraphicAction:
        """Build the graphic action for this call.

        Raises:
            EvaluationError: Unknown action, wrong argument count, wrong
                argument type, or unknown sprite
        """
        action_type = next(
            (kind for kind in _ARITY if kind.value == self.name), None
        )
        if action_type is None:
            known = tuple(kind.value for kind in _ARITY)
            raise EvaluationError(ErrorTemplate.unknown_action(self.name, known))

        expected = _ARITY[action_type]
        if len(self.args) != expected:
            raise EvaluationError(
                ErrorTemplate.arity_mismatch(self.name, expected, len(self.args))
            )

        values = [arg.exec() for arg in self.args]
        match action_type:
            case ActionType.MOVE:
                x, y = self._numbers(values)
                return move(x, y)
            case ActionType.SCALE:
                (ratio,) = self._numbers(values)
                return scale(ratio)
            case _:
                (sprite_name,) = values
                if not isinstance(sprite_name, str):
                    raise EvaluationError(
                        ErrorTemplate.invalid_argument(self.name, "string", sprite_name)
                    )
                return draw_sprite(sprite_name)

    def _numbers(self, values: list[int | str]) -> list[int]:
        for value in values:
            if not isinstance(value, int):
                raise EvaluationError(
                    ErrorTemplate.invalid_argument(self.name, "numeric", value)
                )
        return [int(value) for value in values]


@dataclass(frozen=True, slots=True)
class Composable:
    """Two pipeline stages joined by ``|>``."""

    left: "Pipeline"
    right: "Pipeline"

    def exec(self) -> GraphicAction:
        """Build the action tree, walking the left-deep pipe chain with a loop."""
        spine: list[Composable] = []
        stage: Pipeline = self
        while isinstance(stage, Composable):
            spine.append(stage)
            stage = stage.left
        action = stage.exec()
        for composable in reversed(spine):
            action = and_then(action, composable.right.exec())
        return action


type Pipeline = Call | Composable


class PipeOperator(Enum):
    """Pipeline operators (currently only ``|>``)."""

    COMPOSE = "|>"

    def build(self, left: Pipeline, right: Pipeline) -> Pipeline:
        return Composable(left, right)


# ============================================================================
# GRAMMAR
# ============================================================================


def build_graphics_grammar(*, max_depth: int | None = None) -> Parser[Pipeline]:
    """Build a fresh pipeline grammar.

    Args:
        max_depth: Parenthesis nesting limit (default: MAX_DEPTH)

    Returns:
        Parser for a complete pipeline, leading whitespace allowed
    """
    numeric_value = token(r"[0-9]+").map(lambda digits: Numeric(int(digits)))
    comma = token(r",")
    quote = token(r"'")
    name = token(r"[a-zA-Z_][a-zA-Z0-9_]*")
    left_paren = token(r"[(]")
    right_paren = token(r"[)]")
    pipe_op = token(r"\|>").map(lambda _: PipeOperator.COMPOSE)

    text_value = (
        quote.and_(token(r"[a-zA-Z0-9_]*"))
        .bind(lambda word: quote.and_(constant(word)))
        .map(Text)
    )
    argument = numeric_value.or_(text_value)
    arguments = argument.bind(
        lambda first: zero_or_more(comma.and_(argument)).map(lambda rest: (first, *rest))
    )

    call = name.bind(lambda callee: arguments.map(lambda args: Call(callee, args)))

    pipeline: ForwardRule[Pipeline] = ForwardRule("pipeline", max_depth=max_depth)

    grouped = left_paren.and_(pipeline).bind(
        lambda inner: right_paren.and_(constant(inner))
    )
    atom = call.or_(grouped)
    pipeline.define(infix(pipe_op, atom))

    return lexeme_start(pipeline).named("graphics")


@cache
def _default_grammar() -> Parser[Pipeline]:
    return build_graphics_grammar()


def parse_pipeline(source: str) -> Pipeline:
    """Parse source into a pipeline tree.

    Raises:
        CombLexSyntaxError: If source is not a complete pipeline
    """
    return _default_grammar().parse_to_completion(source)


def execute(source: str) -> GraphicAction:
    """Parse source and build its graphic action tree.

    Raises:
        CombLexSyntaxError: If source is not a complete pipeline
        EvaluationError: If a call is invalid
    """
    return parse_pipeline(source).exec()
