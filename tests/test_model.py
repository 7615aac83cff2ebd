"""Tests for settings validation and the starting layout."""

import pytest

from grid_snake.config import UP, GameSettings
from grid_snake.model import GameState, Phase, initial_snake, new_layout


class TestGameSettings:
    def test_defaults_match_classic_board(self):
        settings = GameSettings(grid_size=20)
        assert settings.max_score == 397
        assert settings.initial_target == 10
        assert settings.initial_speed == 5.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"grid_size": 4},
            {"initial_length": 0},
            {"initial_target": 0},
            {"initial_speed": 0},
            {"countdown_from": -1},
        ],
    )
    def test_invalid_settings_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GameSettings(**kwargs)


class TestLayout:
    def test_initial_snake_is_centred_facing_up(self):
        assert initial_snake(GameSettings(grid_size=14)) == [(7, 7), (7, 8), (7, 9)]

    def test_new_layout_seeds_buffer_with_heading(self):
        snake, direction, pending = new_layout(GameSettings(grid_size=20))
        assert snake[0] == (10, 10)
        assert direction == UP
        assert list(pending) == [UP]

    def test_copy_is_deep_enough(self):
        snake, direction, pending = new_layout(GameSettings(grid_size=20))
        state = GameState(
            grid_size=20,
            snake=snake,
            direction=direction,
            food=(0, 0),
            target=10,
            speed=5.0,
            max_score=397,
            pending=pending,
        )
        clone = state.copy()
        clone.snake.pop()
        clone.pending.pop()
        clone.phase = Phase.RUNNING
        assert len(state.snake) == 3
        assert len(state.pending) == 1
        assert state.phase is Phase.IDLE
