"""
Main game loop of Mini Pong: ties a frame clock, the simulation and a renderer
"""

import logging

from mini_pong.core.entities import Board
from mini_pong.core.entities import GameState
from mini_pong.core.entities import initial_state
from mini_pong.core.interfaces import ClockProtocol
from mini_pong.core.interfaces import RendererProtocol
from mini_pong.core.messages import Message
from mini_pong.core.messages import Stop
from mini_pong.core.messages import Tick
from mini_pong.core.messages import update

logger = logging.getLogger(__name__)


class GameLoop:
    """
    Tick-driven loop running the simulation

    Each tick is processed to completion before the next one is pulled from
    the clock, and the renderer only ever receives the already computed
    snapshot. Stopping the loop unsubscribes from the clock; the last state
    stays available through ``state``.
    """

    def __init__(
        self,
        clock: ClockProtocol,
        renderer: RendererProtocol,
        state: GameState | None = None,
        board: Board | None = None,
    ):
        self.clock = clock
        self.renderer = renderer
        self.board = board if board is not None else Board.from_config()
        self.state = state if state is not None else initial_state()
        self.running = False
        self.tick_count = 0

    def dispatch(self, message: Message) -> GameState:
        """Handles one message and returns the resulting state"""
        self.state = update(message, self.state, self.board)
        if isinstance(message, Tick):
            self.tick_count += 1
            logger.debug("Tick %d (delta=%s): %s", self.tick_count, message.delta, self.state)
        elif isinstance(message, Stop):
            self.running = False
        return self.state

    def stop(self) -> None:
        """Stops requesting ticks, the current state is kept as is"""
        self.dispatch(Stop())

    def run(self, max_ticks: int | None = None) -> GameState:
        """
        Runs the loop until the clock is exhausted, the renderer is closed,
        ``stop`` is called or ``max_ticks`` ticks have been processed

        Returns:
            The last computed state
        """
        self.running = True
        logger.info("Game loop started from %s", self.state)
        self.renderer.render(self.state)

        ticks_this_run = 0
        if max_ticks is None or max_ticks > 0:
            for delta in self.clock.ticks():
                if not self.running or not self.renderer.is_active():
                    break

                self.dispatch(Tick(delta))
                self.renderer.render(self.state)

                ticks_this_run += 1
                if max_ticks is not None and ticks_this_run >= max_ticks:
                    break

        self.running = False
        logger.info("Game loop stopped after %d ticks", self.tick_count)
        return self.state
