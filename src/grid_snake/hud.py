"""Text shown around the board: score line, timer and phase overlays."""

from __future__ import annotations

from .controller import GameController
from .model import Outcome, Phase


def format_elapsed(seconds: float) -> str:
    """``mm:ss:hh`` with hundredths; minutes wrap at an hour."""
    total_ms = max(0, round(seconds * 1000))
    hundredths = (total_ms % 1000) // 10
    secs = (total_ms // 1000) % 60
    minutes = (total_ms // 60000) % 60
    return f"{minutes:02}:{secs:02}:{hundredths:02}"


def score_line(game: GameController) -> str:
    return (
        f"SCORE {game.score}  TARGET {game.target}  "
        f"BEST {game.high_score}  {format_elapsed(game.elapsed)}"
    )


def overlay_lines(game: GameController) -> list[str]:
    """Lines for the centred overlay; empty while the snake is moving."""
    phase = game.phase
    if phase is Phase.IDLE:
        return ["GRID SNAKE", "Press ENTER to start", "F: food   C: color"]
    if phase is Phase.COUNTDOWN:
        return [game.banner or ""]
    if phase is Phase.RUNNING:
        return [game.banner] if game.banner else []
    if phase is Phase.LEVEL_CLEARED:
        return [
            "LEVEL CLEARED!",
            f"Next target: {game.target + game.settings.target_step}",
            "Press ENTER for next level",
        ]
    if game.outcome is Outcome.VICTORY:
        return [f"YOU WIN! Score: {game.score}", "ENTER to PLAY AGAIN"]
    return [f"Game Over! Score: {game.score}", "ENTER to PLAY AGAIN"]
