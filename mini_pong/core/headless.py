"""
Display-free clock and renderer, used for headless runs and tests
"""

from collections.abc import Iterator

from mini_pong.core.entities import Board
from mini_pong.core.entities import GameState
from mini_pong.core.scene import Shape
from mini_pong.core.scene import build_scene


class FixedClock:
    """Clock yielding the same delta for a given number of ticks (forever if None)"""

    def __init__(self, delta: float, count: int | None = None):
        self.delta = delta
        self.count = count

    def ticks(self) -> Iterator[float]:
        emitted = 0
        while self.count is None or emitted < self.count:
            emitted += 1
            yield self.delta


class SequenceClock:
    """Clock replaying a recorded list of deltas"""

    def __init__(self, deltas: list[float]):
        self.deltas = list(deltas)

    def ticks(self) -> Iterator[float]:
        yield from self.deltas


class RecordingRenderer:
    """Renderer keeping every frame it is given instead of drawing it"""

    def __init__(self, board: Board | None = None):
        self.board = board
        self.states: list[GameState] = []
        self.frames: list[list[Shape]] = []
        self.closed = False

    def render(self, state: GameState) -> None:
        self.states.append(state)
        self.frames.append(build_scene(state, self.board))

    def is_active(self) -> bool:
        return not self.closed

    def cleanup(self) -> None:
        self.closed = True

    @property
    def last_state(self) -> GameState | None:
        return self.states[-1] if self.states else None
