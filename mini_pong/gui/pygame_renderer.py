"""
PyGame renderer and frame clock for Mini Pong
"""

from collections.abc import Iterator

import pygame

from mini_pong.core.entities import Board
from mini_pong.core.entities import GameState
from mini_pong.core.scene import Circle
from mini_pong.core.scene import Rectangle
from mini_pong.core.scene import ShapeKind
from mini_pong.core.scene import build_scene
from mini_pong.utils.config import game_config


class PygameRenderer:
    """PyGame-based renderer for Mini Pong"""

    def __init__(self, board: Board | None = None):
        """Initialize the PyGame renderer"""
        self.board = board if board is not None else Board.from_config()
        self.width = int(self.board.width)
        self.height = int(self.board.height)

        # Initialize PyGame
        pygame.init()

        # Create the display
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Mini Pong")

        self.colors: dict[ShapeKind, tuple[int, int, int]] = {
            ShapeKind.BACKGROUND: game_config.BACKGROUND_COLOR,
            ShapeKind.BALL: game_config.BALL_COLOR,
            ShapeKind.PADDLE: game_config.PADDLE_COLOR,
        }
        self.active = True

    def handle_events(self) -> None:
        """Process window events, closing the window or pressing ESC deactivates the renderer"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.active = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.active = False

    def draw_rectangle(self, shape: Rectangle) -> None:
        rect = pygame.Rect(int(shape.x), int(shape.y), int(shape.width), int(shape.height))
        pygame.draw.rect(self.screen, self.colors[shape.kind], rect)

    def draw_circle(self, shape: Circle) -> None:
        pos = (int(shape.x), int(shape.y))
        pygame.draw.circle(self.screen, self.colors[shape.kind], pos, int(shape.radius))

    def render(self, state: GameState) -> None:
        """Render a single frame of the game"""
        self.handle_events()
        if not self.active:
            return

        for shape in build_scene(state, self.board):
            if isinstance(shape, Circle):
                self.draw_circle(shape)
            else:
                self.draw_rectangle(shape)

        pygame.display.flip()

    def is_active(self) -> bool:
        return self.active

    def cleanup(self) -> None:
        """Clean up PyGame resources"""
        self.active = False
        pygame.quit()


class PygameClock:
    """Frame clock paced by pygame, yields milliseconds since the previous frame"""

    def __init__(self, fps: int | None = None):
        self.fps = fps or game_config.FPS
        self.clock = pygame.time.Clock()

    def ticks(self) -> Iterator[float]:
        # The first call only starts the clock, its value is not a frame duration
        self.clock.tick(self.fps)
        while True:
            yield float(self.clock.tick(self.fps))
