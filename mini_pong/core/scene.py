"""
Scene description of a game snapshot, the shapes a renderer has to draw
"""

from dataclasses import dataclass
from enum import Enum

from mini_pong.core.entities import Board
from mini_pong.core.entities import GameState


class ShapeKind(Enum):
    """What a shape stands for, so that renderers can pick colors"""

    BACKGROUND = "background"
    BALL = "ball"
    PADDLE = "paddle"


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float
    kind: ShapeKind


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    kind: ShapeKind


Shape = Rectangle | Circle


def build_scene(state: GameState, board: Board | None = None) -> list[Shape]:
    """
    Lists the shapes of a snapshot in drawing order

    The background covers the whole board, then come the ball and the left
    and right paddles.
    """
    board = board if board is not None else Board.from_config()
    ball = state.ball
    return [
        Rectangle(0.0, 0.0, board.width, board.height, ShapeKind.BACKGROUND),
        Circle(*ball.to_tuple(), ball.radius, ShapeKind.BALL),
        *(
            Rectangle(*paddle.get_rect(), ShapeKind.PADDLE)
            for paddle in (state.paddle_left, state.paddle_right)
        ),
    ]
