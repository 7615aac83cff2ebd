"""One-cell-per-tick simulation and food placement."""

from __future__ import annotations

import logging
import random
from typing import Iterable

from .grid import Cell, add, in_bounds
from .model import GameState, Outcome, Phase

logger = logging.getLogger(__name__)


def place_food(snake: Iterable[Cell], grid_size: int, rng: random.Random) -> Cell:
    """Return a random grid cell that the snake does not occupy."""
    occupied = set(snake)
    if len(occupied) >= grid_size * grid_size:
        raise ValueError("no free cell left for food")
    while True:
        pos = (rng.randrange(grid_size), rng.randrange(grid_size))
        if pos not in occupied:
            return pos


def step(state: GameState, rng: random.Random) -> GameState:
    """Advance the snake by exactly one grid cell.

    Returns a new state; ``state`` itself is left untouched. Outside the
    running phase the state is returned as is.
    """
    if state.phase is not Phase.RUNNING:
        return state

    nxt = state.copy()
    turn = nxt.pending.pop()
    if turn is not None:
        nxt.direction = turn

    head = add(nxt.head, nxt.direction)

    if not in_bounds(head, nxt.grid_size):
        logger.debug("Wall hit at %s", head)
        return _finish(nxt, Outcome.DEFEAT)

    # Checked against the untrimmed body: the tail has not moved yet.
    if head in nxt.snake:
        logger.debug("Self hit at %s", head)
        return _finish(nxt, Outcome.DEFEAT)

    nxt.snake.insert(0, head)

    if head == nxt.food:
        nxt.score += 1
        if nxt.score >= nxt.max_score:
            return _finish(nxt, Outcome.VICTORY)
        if nxt.score >= nxt.target:
            nxt.phase = Phase.LEVEL_CLEARED
            return nxt
        nxt.food = place_food(nxt.snake, nxt.grid_size, rng)
    else:
        nxt.snake.pop()
    return nxt


def _finish(state: GameState, outcome: Outcome) -> GameState:
    state.phase = Phase.GAME_OVER
    state.outcome = outcome
    return state
