"""
Mini Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import model_validator

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation

    Velocities are expressed in board units per millisecond, so one tick of
    the frame clock (a delta in milliseconds) moves an entity by ``v * delta``.
    """

    # Allow mutation for compatibility with the temporary override helpers
    model_config = {"validate_assignment": True}

    # Board dimensions
    FIELD_WIDTH: int = Field(default=500, gt=0, description="Board width in board units")
    FIELD_HEIGHT: int = Field(default=300, gt=0, description="Board height in board units")

    # Ball
    BALL_RADIUS: float = Field(default=8.0, gt=0, description="Ball radius")
    BALL_VX: float = Field(default=0.3, description="Initial horizontal ball velocity")
    BALL_VY: float = Field(default=0.3, description="Initial vertical ball velocity")

    # Paddles
    PADDLE_WIDTH: float = Field(default=5.0, gt=0, description="Paddle width")
    PADDLE_HEIGHT: float = Field(default=80.0, gt=0, description="Paddle height")
    PADDLE_SPEED: float = Field(default=0.4, description="Nominal paddle speed (vx and vy)")
    PADDLE_MARGIN: float = Field(default=20.0, ge=0, description="Paddle margin from edge")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB color")

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate the board is large enough for both paddles"""
        if self.PADDLE_HEIGHT > self.FIELD_HEIGHT:
            raise ValueError(
                f"PADDLE_HEIGHT ({self.PADDLE_HEIGHT}) must not exceed "
                f"FIELD_HEIGHT ({self.FIELD_HEIGHT})"
            )

        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH)
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} units")

        return self

    @property
    def left_paddle_x(self) -> float:
        return self.PADDLE_MARGIN

    @property
    def right_paddle_x(self) -> float:
        return self.FIELD_WIDTH - self.PADDLE_MARGIN - self.PADDLE_WIDTH

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "mini_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "mini_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "mini_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.info("No configuration file at %s, keeping defaults", filepath)
        return False
    except (ValueError, TypeError, OSError) as e:
        logger.warning("Error loading config from %s: %s", filepath, e)
        return False

    _write_values(game_config, loaded_config.model_dump())
    return True


def _write_values(obj: BaseModel, values: dict[str, Any]) -> None:
    """Writes already validated values without per-field validation

    Fields are checked together by the model validator, so assigning them one
    at a time could fail on an intermediate combination (e.g. a smaller board
    set before a smaller paddle).
    """
    for name, value in values.items():
        object.__setattr__(obj, name, value)


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily

    The overrides are validated together against the current values before
    anything is written, so a rejected override leaves the config untouched.
    """
    old_values = {name: getattr(obj, name) for name in kwargs}
    validated = type(obj)(**{**obj.model_dump(), **kwargs})
    _write_values(obj, {name: getattr(validated, name) for name in kwargs})
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _write_values(game_config, old_values)
