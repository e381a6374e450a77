"""
Messages delivered to the game and their exhaustive dispatch
"""

from dataclasses import dataclass

from mini_pong.core.entities import Board
from mini_pong.core.entities import GameState
from mini_pong.core.physics import step


@dataclass(frozen=True)
class Tick:
    """One frame clock event carrying the time elapsed since the previous one"""

    delta: float


@dataclass(frozen=True)
class Stop:
    """Request to stop listening to the frame clock"""


Message = Tick | Stop


def update(message: Message, state: GameState, board: Board | None = None) -> GameState:
    """
    Returns the state that follows ``state`` once ``message`` is handled

    Args:
        message: Message to handle
        state: Current snapshot, never modified
        board: Play field, defaults to the configured one

    Raises:
        TypeError: If the message is not one of the known message types
    """
    if isinstance(message, Tick):
        return step(message.delta, state, board)
    if isinstance(message, Stop):
        # The last computed state stays valid and frozen
        return state
    raise TypeError(f"Unhandled message type: {type(message).__name__}")
