"""
Physics system for Mini Pong

One call to ``step`` is one tick of the game: it reads an immutable
``GameState`` and returns a new one. Deltas are the elapsed time reported by
the frame clock, in the same time unit as the entity velocities.
"""

import logging

import numpy as np

from mini_pong.core.collision import within
from mini_pong.core.entities import Ball
from mini_pong.core.entities import Board
from mini_pong.core.entities import GameState
from mini_pong.core.entities import Paddle

logger = logging.getLogger(__name__)


def sanitize_delta(delta: float) -> float:
    """
    Returns the elapsed time actually used for integration

    Negative deltas are clamped to 0. NaN and infinite deltas skip the
    integration term entirely, which is also an integration over 0.
    """
    if not np.isfinite(delta):
        logger.warning("Ignoring non-finite tick delta %r", delta)
        return 0.0
    if delta < 0:
        logger.warning("Clamping negative tick delta %r to 0", delta)
        return 0.0
    return float(delta)


def _bounce_x(ball: Ball, paddle_left: Paddle, paddle_right: Paddle) -> float:
    # Left paddle is checked first and wins if both capture zones contain the ball
    if within(ball, paddle_left):
        return abs(ball.vx)
    if within(ball, paddle_right):
        return -abs(ball.vx)
    return ball.vx


def _bounce_y(ball: Ball, board: Board) -> float:
    if ball.y < ball.radius:
        return abs(ball.vy)
    if ball.y > board.height - ball.radius:
        return -abs(ball.vy)
    return ball.vy


def step_ball(
    delta: float,
    ball: Ball,
    paddle_left: Paddle,
    paddle_right: Paddle,
    board: Board | None = None,
) -> Ball:
    """
    Computes the ball of the next tick

    A ball that has left the board horizontally is moved back to the center
    with its velocity untouched, and nothing else happens on that tick.
    Otherwise each velocity component is reflected by the paddles (x) and
    the walls (y), then the position is integrated with the new velocity.
    Reflection only ever forces the sign of a component.
    """
    board = board if board is not None else Board.from_config()

    if ball.is_out_of_bounds(board):
        logger.debug("Ball left the board at (%s, %s), resetting to center", ball.x, ball.y)
        return ball.to_center(board)

    delta = sanitize_delta(delta)
    vx = _bounce_x(ball, paddle_left, paddle_right)
    vy = _bounce_y(ball, board)

    return Ball(
        x=ball.x + vx * delta,
        y=ball.y + vy * delta,
        vx=vx,
        vy=vy,
        radius=ball.radius,
    )


def step_paddle(delta: float, paddle: Paddle, board: Board | None = None) -> Paddle:
    """
    Computes the paddle of the next tick

    The paddle slides vertically at its nominal speed and stops at the board
    edges. Reaching an edge does not reverse its velocity.
    """
    board = board if board is not None else Board.from_config()
    delta = sanitize_delta(delta)

    y = float(np.clip(paddle.y + paddle.vy * delta, 0.0, paddle.max_y(board)))
    return Paddle(
        x=paddle.x,
        y=y,
        vx=paddle.vx,
        vy=paddle.vy,
        width=paddle.width,
        height=paddle.height,
    )


def step(delta: float, state: GameState, board: Board | None = None) -> GameState:
    """Advances the whole game by one tick

    Ball and paddles are all computed from the pre-tick snapshot.
    """
    board = board if board is not None else Board.from_config()
    delta = sanitize_delta(delta)

    return GameState(
        ball=step_ball(delta, state.ball, state.paddle_left, state.paddle_right, board),
        paddle_left=step_paddle(delta, state.paddle_left, board),
        paddle_right=step_paddle(delta, state.paddle_right, board),
    )

