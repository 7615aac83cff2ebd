"""Smoke tests for the pygame shell using the dummy SDL drivers."""

import pygame
import pytest

from grid_snake import game as game_module
from grid_snake.config import GameSettings
from grid_snake.model import Phase


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setattr(game_module, "HIGHSCORE_FILE", tmp_path / "highscore.txt")
    shell = game_module.GridSnake(GameSettings(grid_size=20))
    yield shell
    pygame.quit()


def test_enter_starts_and_draws(app):
    app._handle_key(pygame.K_RETURN)
    assert app.game.phase is Phase.COUNTDOWN
    app.draw()


def test_customization_keys(app):
    app._handle_key(pygame.K_f)
    app._handle_key(pygame.K_c)
    assert app.renderer.food_id == "banana"
    assert app.renderer.preset.id == "green"


def test_quit_event_stops_loop(app):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert app.handle_events() is False


def test_mouse_drag_is_a_swipe(app):
    app.game.start()
    app.game.state.phase = Phase.RUNNING
    app.game.state.pending.clear()
    app._swipe_start = (10, 10)
    app._finish_swipe((90, 15))
    assert list(app.game.state.pending) == [(1, 0)]
