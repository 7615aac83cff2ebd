import os
import random

import pytest

# Headless SDL so window and font tests run without a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from grid_snake.config import UP  # noqa: E402
from grid_snake.input_buffer import InputBuffer  # noqa: E402
from grid_snake.model import GameState, Phase  # noqa: E402


def make_state(
    snake,
    *,
    direction=UP,
    food=(0, 0),
    grid_size=20,
    score=0,
    target=10,
    pending=(),
    phase=Phase.RUNNING,
):
    return GameState(
        grid_size=grid_size,
        snake=list(snake),
        direction=direction,
        food=food,
        target=target,
        speed=5.0,
        max_score=grid_size * grid_size - 3,
        score=score,
        pending=InputBuffer(pending),
        phase=phase,
    )


@pytest.fixture
def rng():
    return random.Random(1234)
