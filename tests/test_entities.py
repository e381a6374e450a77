"""
Tests for Mini Pong game entities
"""

import dataclasses

import pytest

from mini_pong.core.entities import Ball, Board, GameState, Paddle, initial_state
from mini_pong.utils.config import GameConfig


class TestBoard:
    """Tests for Board class"""

    def test_default_dimensions(self) -> None:
        """Test the board built from the default configuration"""
        board = Board.from_config()
        assert board.width == 500
        assert board.height == 300

    def test_center(self) -> None:
        """Test board center"""
        assert Board(500, 300).center == (250, 150)

    def test_from_custom_config(self) -> None:
        """Test building a board from an explicit configuration"""
        board = Board.from_config(GameConfig(FIELD_WIDTH=800, FIELD_HEIGHT=600))
        assert board.width == 800.0
        assert board.height == 600.0


class TestBall:
    """Tests for Ball class"""

    def test_creation(self) -> None:
        """Test ball creation"""
        ball = Ball(100.0, 200.0, 0.5, -0.3, 8.0)
        assert ball.x == 100.0
        assert ball.y == 200.0
        assert ball.vx == 0.5
        assert ball.vy == -0.3
        assert ball.radius == 8.0

    def test_is_immutable(self) -> None:
        """Test that a ball cannot be modified in place"""
        ball = Ball(100.0, 200.0, 0.5, -0.3, 8.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ball.x = 10.0  # type: ignore[misc]

    def test_to_center_keeps_velocity_and_radius(self) -> None:
        """Test that moving the ball to the center only changes its position"""
        ball = Ball(-20.0, 12.0, -0.7, 0.2, 5.0)
        centered = ball.to_center(Board(500, 300))
        assert centered == Ball(250, 150, -0.7, 0.2, 5.0)
        assert ball.x == -20.0, "Original ball should be untouched"

    @pytest.mark.parametrize(
        "x,expected",
        [
            (-8.0, False),
            (-8.01, True),
            (250.0, False),
            (508.0, False),
            (508.01, True),
        ],
    )
    def test_is_out_of_bounds(self, x: float, expected: bool) -> None:
        """Test the horizontal out-of-bounds limits, one radius past each side"""
        ball = Ball(x, 150.0, 0.3, 0.3, 8.0)
        assert ball.is_out_of_bounds(Board(500, 300)) is expected

    def test_to_tuple(self) -> None:
        """Test center position"""
        ball = Ball(100.0, 50.0, 0.0, 0.0, 8.0)
        assert ball.to_tuple() == (100.0, 50.0)


class TestPaddle:
    """Tests for Paddle class"""

    def test_center(self) -> None:
        """Test paddle center from its top-left corner"""
        paddle = Paddle(20.0, 0.0, 0.4, 0.4, 5.0, 80.0)
        assert paddle.center == (22.5, 40.0)

    def test_max_y(self) -> None:
        """Test the lowest reachable position"""
        paddle = Paddle(20.0, 0.0, 0.4, 0.4, 5.0, 80.0)
        assert paddle.max_y(Board(500, 300)) == 220.0

    def test_get_rect(self) -> None:
        """Test getting collision rectangle"""
        paddle = Paddle(100.0, 200.0, 0.4, 0.4, 5.0, 80.0)
        assert paddle.get_rect() == (100.0, 200.0, 5.0, 80.0)

    def test_is_immutable(self) -> None:
        """Test that a paddle cannot be modified in place"""
        paddle = Paddle(100.0, 200.0, 0.4, 0.4, 5.0, 80.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            paddle.y = 0.0  # type: ignore[misc]


class TestInitialState:
    """Tests for the start-of-game snapshot"""

    def test_ball(self) -> None:
        """Test the initial ball"""
        state = initial_state()
        assert state.ball == Ball(250.0, 150.0, 0.3, 0.3, 8.0)

    def test_paddles(self) -> None:
        """Test the initial paddles share a shape and differ only by x"""
        state = initial_state()
        assert state.paddle_left == Paddle(20.0, 0.0, 0.4, 0.4, 5.0, 80.0)
        assert state.paddle_right == Paddle(475.0, 0.0, 0.4, 0.4, 5.0, 80.0)

    def test_to_dict(self) -> None:
        """Test the plain dictionary snapshot"""
        snapshot = initial_state().to_dict()
        assert snapshot["ball"] == {"x": 250.0, "y": 150.0, "vx": 0.3, "vy": 0.3, "radius": 8.0}
        assert snapshot["paddle_right"]["x"] == 475.0
        assert set(snapshot) == {"ball", "paddle_left", "paddle_right"}

    def test_is_a_game_state(self) -> None:
        """Test the snapshot type"""
        assert isinstance(initial_state(), GameState)
