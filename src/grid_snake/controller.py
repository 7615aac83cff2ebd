"""Phase state machine: start, countdown, level progression and scoring."""

from __future__ import annotations

import logging
import random

from .config import COUNTDOWN_INTERVAL, DIRECTIONS, ELAPSED_INTERVAL, GameSettings
from .grid import Direction
from .highscore import MemoryHighScoreStore
from .input_buffer import classify_swipe
from .model import GameState, Outcome, Phase, new_layout
from .scheduler import IntervalTimer, TickGate
from .simulation import place_food, step

logger = logging.getLogger(__name__)


class GameController:
    """Owns the game state and drives it from commands plus a frame clock.

    ``update(now)`` is the only entry point that advances time. Commands
    issued in the wrong phase are ignored and report ``False``.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        rng: random.Random | None = None,
        store=None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.rng = rng or random.Random()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.high_score: int = self.store.load()

        self.state = self._fresh_state(
            score=0,
            target=self.settings.initial_target,
            speed=self.settings.initial_speed,
        )
        self.gate = TickGate(self.state.speed)
        self.countdown_timer = IntervalTimer(COUNTDOWN_INTERVAL)
        self.elapsed_timer = IntervalTimer(ELAPSED_INTERVAL)
        self.countdown_value: int = 0
        self.banner: str | None = None
        self.elapsed: float = 0.0
        self.level: int = 1
        self._clock: float = 0.0

    # --- Read-only views ----------------------------------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def outcome(self) -> Outcome | None:
        return self.state.outcome

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def target(self) -> int:
        return self.state.target

    @property
    def speed(self) -> float:
        return self.state.speed

    # --- Commands -----------------------------------------------------

    def start(self) -> bool:
        """Begin a new session from scratch (idle or after game over)."""
        if self.phase not in (Phase.IDLE, Phase.GAME_OVER):
            logger.debug("Start ignored in phase %s", self.phase.value)
            return False
        self.state = self._fresh_state(
            score=0,
            target=self.settings.initial_target,
            speed=self.settings.initial_speed,
        )
        self.level = 1
        logger.info("New game (target=%d, speed=%.1f)", self.target, self.speed)
        self._begin_countdown()
        return True

    def next_level(self) -> bool:
        """Raise target and speed, reset the board, keep the score."""
        if self.phase is not Phase.LEVEL_CLEARED:
            logger.debug("Next level ignored in phase %s", self.phase.value)
            return False
        self.state = self._fresh_state(
            score=self.score,
            target=self.target + self.settings.target_step,
            speed=self.speed + self.settings.speed_step,
        )
        self.level += 1
        logger.info(
            "Level %d (target=%d, speed=%.1f)", self.level, self.target, self.speed
        )
        self._begin_countdown()
        return True

    def press(self, direction: Direction) -> bool:
        if self.phase is not Phase.RUNNING:
            return False
        return self.state.pending.push(direction, self.state.direction)

    def press_key(self, name: str) -> bool:
        direction = DIRECTIONS.get(name.upper())
        if direction is None:
            return False
        return self.press(direction)

    def swipe(
        self, start: tuple[float, float], end: tuple[float, float]
    ) -> bool:
        direction = classify_swipe(start, end)
        if direction is None:
            return False
        return self.press(direction)

    # --- Frame callback -----------------------------------------------

    def update(self, now: float) -> bool:
        """Poll timers and run at most one tick; True when the snake moved."""
        self._clock = now
        for _ in range(self.countdown_timer.poll(now)):
            self._countdown_tick(now)
        if self.elapsed_timer.poll(now):
            self.elapsed = self.elapsed_timer.elapsed(now)

        if self.phase is not Phase.RUNNING or not self.gate.ready(now):
            return False
        self._advance()
        return True

    # --- Internals ----------------------------------------------------

    def _fresh_state(self, *, score: int, target: int, speed: float) -> GameState:
        snake, direction, pending = new_layout(self.settings)
        return GameState(
            grid_size=self.settings.grid_size,
            snake=snake,
            direction=direction,
            food=place_food(snake, self.settings.grid_size, self.rng),
            target=target,
            speed=speed,
            max_score=self.settings.max_score,
            score=score,
            pending=pending,
        )

    def _begin_countdown(self) -> None:
        self.elapsed_timer.cancel()
        self.elapsed = 0.0
        self.gate.speed = self.speed
        self.gate.reset()
        self.countdown_value = self.settings.countdown_from
        if self.countdown_value <= 0:
            self.countdown_timer.cancel()
            self.banner = None
            self._begin_running(self._clock)
            return
        self.state.phase = Phase.COUNTDOWN
        self.banner = str(self.countdown_value)
        self.countdown_timer.start(self._clock)

    def _countdown_tick(self, now: float) -> None:
        if self.phase is not Phase.COUNTDOWN:
            # One period after GO! the banner clears and the timer retires.
            self.banner = None
            self.countdown_timer.cancel()
            return
        self.countdown_value -= 1
        if self.countdown_value > 0:
            self.banner = str(self.countdown_value)
            return
        self.banner = "GO!"
        self._begin_running(now)

    def _begin_running(self, now: float) -> None:
        self.state.phase = Phase.RUNNING
        self.elapsed = 0.0
        self.elapsed_timer.start(now)
        logger.debug("Running")

    def _advance(self) -> None:
        self.state = step(self.state, self.rng)

        if self.score > self.high_score:
            self.high_score = self.score
            self.store.save(self.high_score)

        if self.phase is Phase.RUNNING:
            return
        self.elapsed = self.elapsed_timer.elapsed(self._clock)
        self.elapsed_timer.cancel()
        if self.phase is Phase.LEVEL_CLEARED:
            logger.info("Level %d cleared with score %d", self.level, self.score)
        else:
            logger.info("Game over (%s) with score %d", self.outcome.value, self.score)
