"""Phases and the game state record owned by the controller."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .config import UP, GameSettings
from .grid import Cell, Direction
from .input_buffer import InputBuffer


class Phase(enum.Enum):
    IDLE = "idle"
    COUNTDOWN = "countdown"
    RUNNING = "running"
    LEVEL_CLEARED = "level_cleared"
    GAME_OVER = "game_over"


class Outcome(enum.Enum):
    VICTORY = "victory"
    DEFEAT = "defeat"


def initial_snake(settings: GameSettings) -> list[Cell]:
    """Centre the head and stack the body below it, facing up."""
    centre = settings.grid_size // 2
    return [(centre, centre + i) for i in range(settings.initial_length)]


@dataclass(slots=True)
class GameState:
    """Everything a single tick reads and writes."""

    grid_size: int
    snake: list[Cell]
    direction: Direction
    food: Cell
    target: int
    speed: float
    max_score: int
    score: int = 0
    pending: InputBuffer = field(default_factory=InputBuffer)
    phase: Phase = Phase.IDLE
    outcome: Outcome | None = None

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def tail(self) -> Cell:
        return self.snake[-1]

    def copy(self) -> GameState:
        return GameState(
            grid_size=self.grid_size,
            snake=list(self.snake),
            direction=self.direction,
            food=self.food,
            target=self.target,
            speed=self.speed,
            max_score=self.max_score,
            score=self.score,
            pending=self.pending.copy(),
            phase=self.phase,
            outcome=self.outcome,
        )


def new_layout(settings: GameSettings) -> tuple[list[Cell], Direction, InputBuffer]:
    """Snake, heading and seeded input buffer used at start and on each level."""
    return initial_snake(settings), UP, InputBuffer([UP])
