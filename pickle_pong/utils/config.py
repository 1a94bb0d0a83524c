"""
Pickle Pong game configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    dog_keys: dict[str, int]
    cat_keys: dict[str, int]
    display_names: dict[str, str]


_ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        dog_keys={"up": pygame.K_w, "down": pygame.K_s},
        cat_keys=dict(_ARROW_KEYS),
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        dog_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        cat_keys=dict(_ARROW_KEYS),
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        dog_keys={"up": pygame.K_w, "down": pygame.K_s},
        cat_keys=dict(_ARROW_KEYS),
        display_names={"up": "W", "down": "S"},
    ),
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation, every assignment is validated again
    model_config = {"validate_assignment": True}

    # Court
    COURT_WIDTH: int = Field(default=400, gt=0, description="Court width in pixels")
    COURT_HEIGHT: int = Field(default=800, gt=0, description="Court height in pixels")

    # Paddles and ball
    PADDLE_WIDTH: float = Field(default=10.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=60.0, gt=0, description="Paddle height in pixels")
    BALL_SIZE: float = Field(default=15.0, gt=0, description="Ball diameter in pixels")
    INITIAL_SPEED: float = Field(default=5.0, gt=0, description="Ball speed per axis per tick")

    # Gameplay
    WIN_SCORE: int = Field(default=11, gt=0, description="Points needed to win a match")

    # Frame driver and input
    FPS: int = Field(default=60, gt=0, description="Ticks per second of the frame driver")
    PADDLE_KEY_STEP: float = Field(
        default=8.0, gt=0, description="Paddle movement per frame when a key is held"
    )
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    SCOREBOARD_HEIGHT: int = Field(default=70, ge=0, description="Scoreboard band height")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(165, 214, 167), description="RGB")
    COURT_LINE_COLOR: tuple[int, int, int] = Field(default=(255, 255, 255), description="RGB")
    BALL_COLOR: tuple[int, int, int] = Field(default=(255, 235, 59), description="RGB color")
    DOG_PADDLE_COLOR: tuple[int, int, int] = Field(default=(139, 69, 19), description="RGB")
    CAT_PADDLE_COLOR: tuple[int, int, int] = Field(default=(128, 128, 128), description="RGB")
    BUTTON_COLOR: tuple[int, int, int] = Field(default=(76, 175, 80), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(0, 0, 0), description="RGB color")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str, info: ValidationInfo) -> str:
        """Normalize and validate the log level name"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown {info.field_name} '{v}'. Available: {list(LOG_LEVELS)}")
        return level

    @model_validator(mode="after")
    def validate_court_dimensions(self) -> "GameConfig":
        """Validate the court is large enough for both paddles"""
        if self.COURT_WIDTH <= 2 * self.PADDLE_WIDTH:
            raise ValueError(
                f"COURT_WIDTH ({self.COURT_WIDTH}) must be larger than both paddles "
                f"({2 * self.PADDLE_WIDTH})"
            )
        if self.COURT_HEIGHT < self.PADDLE_HEIGHT:
            raise ValueError(
                f"COURT_HEIGHT ({self.COURT_HEIGHT}) must be at least PADDLE_HEIGHT "
                f"({self.PADDLE_HEIGHT})"
            )
        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "pickle_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "pickle_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls.model_validate(config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        _copy_fields(self, GameConfig())


def _copy_fields(target: GameConfig, source: GameConfig) -> None:
    """Copy every field of an already validated config into another one"""
    # Court fields are checked together, so skip per-field revalidation
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(target, field_name, getattr(source, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def validate_game_config(config: GameConfig) -> list[str]:
    """
    Check a configuration for settings that are accepted but play badly

    Hard errors are already rejected by the model itself, this only returns
    human readable warnings.
    """
    warnings: list[str] = []

    if config.INITIAL_SPEED > config.PADDLE_WIDTH:
        warnings.append(
            f"INITIAL_SPEED ({config.INITIAL_SPEED}) exceeds PADDLE_WIDTH "
            f"({config.PADDLE_WIDTH}): the ball may skip past a paddle"
        )
    if config.BALL_SIZE > config.PADDLE_HEIGHT:
        warnings.append(
            f"BALL_SIZE ({config.BALL_SIZE}) is larger than PADDLE_HEIGHT "
            f"({config.PADDLE_HEIGHT})"
        )
    if config.INITIAL_SPEED * 2 > min(config.COURT_WIDTH, config.COURT_HEIGHT) / 2:
        warnings.append(
            f"INITIAL_SPEED ({config.INITIAL_SPEED}) is too fast for a "
            f"{config.COURT_WIDTH}x{config.COURT_HEIGHT} court"
        )
    if config.FPS < 30:
        warnings.append(f"FPS ({config.FPS}) is too low for smooth play")

    return warnings


def load_config_from_file(filepath: str = "pickle_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except (OSError, ValueError) as e:
        logger.warning("Error loading config from %s: %s", filepath, e)
        return False

    _copy_fields(game_config, loaded_config)
    for warning in validate_game_config(game_config):
        logger.warning(warning)
    return True


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        for name, new_value in kwargs.items():
            old_values[name] = getattr(game_config, name)
            setattr(game_config, name, new_value)
        yield
    finally:
        # Old values were valid together, restore them without revalidation
        for name, old_value in old_values.items():
            object.__setattr__(game_config, name, old_value)
