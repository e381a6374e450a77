"""
Mini Pong game entities: board, ball, paddles and the game state snapshot

Every entity is an immutable value. A simulation tick never mutates an
entity in place, it builds a new one with ``dataclasses.replace``.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import replace
from typing import Any

from mini_pong.utils.config import GameConfig
from mini_pong.utils.config import game_config


@dataclass(frozen=True)
class Board:
    """Fixed-size play field with its origin at the top-left corner"""

    width: float
    height: float

    @classmethod
    def from_config(cls, config: GameConfig | None = None) -> "Board":
        config = config if config is not None else game_config
        return cls(float(config.FIELD_WIDTH), float(config.FIELD_HEIGHT))

    @property
    def center(self) -> tuple[float, float]:
        return (self.width / 2, self.height / 2)


@dataclass(frozen=True)
class Ball:
    """Game ball, positioned by its center"""

    x: float
    y: float
    vx: float
    vy: float
    radius: float

    def to_center(self, board: Board) -> "Ball":
        """Returns the same ball moved to the board center, velocity and radius are kept"""
        center_x, center_y = board.center
        return replace(self, x=center_x, y=center_y)

    def is_out_of_bounds(self, board: Board) -> bool:
        """True once the ball has fully left the board on the left or right side"""
        return self.x < -self.radius or self.x > board.width + self.radius

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Paddle:
    """Player paddle, positioned by its top-left corner"""

    x: float
    y: float
    vx: float
    vy: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def max_y(self, board: Board) -> float:
        """Lowest reachable top edge for this paddle on the given board"""
        return board.height - self.height

    def get_rect(self) -> tuple[float, float, float, float]:
        """Returns the collision rectangle properties (x, y, width, height)"""
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class GameState:
    """Complete game snapshot consumed and produced by one simulation tick"""

    ball: Ball
    paddle_left: Paddle
    paddle_right: Paddle

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def initial_ball(config: GameConfig | None = None) -> Ball:
    config = config if config is not None else game_config
    board = Board.from_config(config)
    center_x, center_y = board.center
    return Ball(
        x=center_x,
        y=center_y,
        vx=config.BALL_VX,
        vy=config.BALL_VY,
        radius=config.BALL_RADIUS,
    )


def initial_paddle(x: float, config: GameConfig | None = None) -> Paddle:
    config = config if config is not None else game_config
    return Paddle(
        x=x,
        y=0.0,
        vx=config.PADDLE_SPEED,
        vy=config.PADDLE_SPEED,
        width=config.PADDLE_WIDTH,
        height=config.PADDLE_HEIGHT,
    )


def initial_state(config: GameConfig | None = None) -> GameState:
    """
    Builds the start-of-game snapshot

    With the default configuration this is a ball at (250, 150) moving at
    (0.3, 0.3) with radius 8, and two 5x80 paddles at x=20 and x=475,
    both at the top of the board with a nominal speed of 0.4.
    """
    config = config if config is not None else game_config
    return GameState(
        ball=initial_ball(config),
        paddle_left=initial_paddle(config.left_paddle_x, config),
        paddle_right=initial_paddle(config.right_paddle_x, config),
    )
