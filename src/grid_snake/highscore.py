"""Single-integer high score kept in a small text file."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
            return max(0, int(text.strip() or "0"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(value), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)


class MemoryHighScoreStore:
    """Store that never touches the disk; handy for tests and demos."""

    def __init__(self, value: int = 0) -> None:
        self.value = value

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
