"""
Collision detection for Mini Pong

Both predicates are pure functions of the current snapshot, they keep no
history between ticks.
"""

from mini_pong.core.entities import Ball
from mini_pong.core.entities import Paddle


def near(center: float, spacing: float, value: float) -> bool:
    """Checks if value lies in the closed interval [center - spacing, center + spacing]"""
    return center - spacing <= value <= center + spacing


def within(ball: Ball, paddle: Paddle) -> bool:
    """
    Checks if the ball center is inside the paddle capture zone

    The capture zone is the paddle rectangle expanded by the ball radius on
    every side (a point-in-rectangle test on the Minkowski sum). Only a
    hit/no-hit answer is given, there is no penetration depth or normal.
    """
    center_x, center_y = paddle.center
    return near(center_x, paddle.width / 2 + ball.radius, ball.x) and near(
        center_y, paddle.height / 2 + ball.radius, ball.y
    )
