"""Entry point for the Grid Snake game."""

from __future__ import annotations

import logging

from grid_snake.config import LOG_LEVEL
from grid_snake.game import GridSnake


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = GridSnake()
    game.start()


if __name__ == "__main__":
    main()
