"""Centralized configuration, palette and presets for Grid Snake."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame


def _default_data_dir() -> Path:
    """Return a platform-appropriate user data directory for saves."""

    if sys.platform.startswith("win"):
        base = Path(os.getenv("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.getenv("XDG_DATA_HOME") or Path.home() / ".local" / "share")
    return base / "grid-snake"


DATA_DIR = Path(os.getenv("GRID_SNAKE_DATA_DIR") or _default_data_dir())
HIGHSCORE_FILE = Path(
    os.getenv("GRID_SNAKE_HIGHSCORE_FILE") or DATA_DIR / "highscore.txt"
)
LOG_LEVEL: str = os.getenv("GRID_SNAKE_LOG_LEVEL", "INFO").upper()

GRID_SIZE: int = int(os.getenv("GRID_SNAKE_GRID_SIZE") or 20)
INITIAL_LENGTH: int = 3
INITIAL_TARGET: int = 10
TARGET_STEP: int = 5
INITIAL_SPEED: float = 5.0  # moves per second
SPEED_STEP: float = 0.5
COUNTDOWN_FROM: int = 3
COUNTDOWN_INTERVAL: float = 1.0
ELAPSED_INTERVAL: float = 0.01

WINDOW_SIZE: int = 600  # 600 / 20 => 30px tiles
FONT_NAME: str = "consolas"
FONT_SIZE: int = 24
HUD_HEIGHT: int = 44
FPS: int = 120

UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}
KEY_TO_DIRECTION = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
}
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)

PALETTE = {
    "bg_top": pygame.Color(26, 11, 46),
    "bg_bottom": pygame.Color(45, 27, 78),
    "grid": pygame.Color(60, 44, 92),
    "text": pygame.Color(240, 240, 255),
    "accent": pygame.Color(250, 204, 21),
    "snake": pygame.Color(78, 205, 196),
    "snake_dark": pygame.Color(38, 128, 122),
    "snake_belly": pygame.Color(170, 240, 232),
    "eye": pygame.Color(250, 250, 250),
    "pupil": pygame.Color(20, 20, 30),
}


@dataclass(frozen=True)
class ColorPreset:
    """Hue rotation plus optional saturate/brightness/contrast factors."""

    id: str
    label: str
    hue: float = 0.0
    saturation: float = 1.0
    brightness: float = 1.0
    contrast: float = 1.0


COLOR_PRESETS: tuple[ColorPreset, ...] = (
    ColorPreset("cyan", "Cyan"),
    ColorPreset("green", "Green", hue=90),
    ColorPreset("purple", "Purple", hue=200),
    ColorPreset("red", "Red", hue=150, saturation=1.5),
    ColorPreset("yellow", "Yellow", hue=60, brightness=1.2),
    ColorPreset("pink", "Pink", hue=280),
    ColorPreset("blue", "Blue", hue=20),
    ColorPreset("gradient", "Gradient", contrast=1.2),
)

FOOD_OPTIONS: tuple[str, ...] = ("apple", "banana", "cherry")


@dataclass(frozen=True)
class GameSettings:
    """Rules that shape a play session; validated on creation."""

    grid_size: int = GRID_SIZE
    initial_length: int = INITIAL_LENGTH
    initial_target: int = INITIAL_TARGET
    target_step: int = TARGET_STEP
    initial_speed: float = INITIAL_SPEED
    speed_step: float = SPEED_STEP
    countdown_from: int = COUNTDOWN_FROM

    def __post_init__(self) -> None:
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1")
        # Snake starts at the centre and extends downward.
        if self.grid_size // 2 + self.initial_length > self.grid_size:
            raise ValueError(
                f"grid_size {self.grid_size} cannot hold a snake of "
                f"length {self.initial_length}"
            )
        if self.initial_target < 1:
            raise ValueError("initial_target must be positive")
        if self.initial_speed <= 0:
            raise ValueError("initial_speed must be positive")
        if self.countdown_from < 0:
            raise ValueError("countdown_from cannot be negative")

    @property
    def max_score(self) -> int:
        """Score at which every cell is filled by the snake."""
        return self.grid_size * self.grid_size - self.initial_length
