"""
Core module of Mini Pong game
"""

from mini_pong.core.collision import near
from mini_pong.core.collision import within
from mini_pong.core.entities import Ball
from mini_pong.core.entities import Board
from mini_pong.core.entities import GameState
from mini_pong.core.entities import Paddle
from mini_pong.core.entities import initial_state
from mini_pong.core.game_loop import GameLoop
from mini_pong.core.messages import Stop
from mini_pong.core.messages import Tick
from mini_pong.core.messages import update
from mini_pong.core.physics import step
from mini_pong.core.physics import step_ball
from mini_pong.core.physics import step_paddle

__all__ = [
    "Ball",
    "Board",
    "Paddle",
    "GameState",
    "GameLoop",
    "Tick",
    "Stop",
    "initial_state",
    "near",
    "within",
    "step",
    "step_ball",
    "step_paddle",
    "update",
]
