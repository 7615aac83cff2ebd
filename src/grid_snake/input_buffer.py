"""Queue of pending turns fed by key presses and swipe gestures."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Iterator

from .config import DIRECTIONS, DOWN, LEFT, RIGHT, UP
from .grid import Direction, is_orthogonal

logger = logging.getLogger(__name__)


class InputBuffer:
    """FIFO of directions, each orthogonal to the one queued before it.

    Entries are checked against the last queued turn, falling back to the
    snake's current heading when the queue is empty.
    """

    def __init__(self, directions: Iterable[Direction] = ()) -> None:
        self._queue: deque[Direction] = deque(directions)

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._queue)

    def __repr__(self) -> str:
        return f"InputBuffer({list(self._queue)!r})"

    def last(self, current: Direction) -> Direction:
        return self._queue[-1] if self._queue else current

    def push(self, direction: Direction, current: Direction) -> bool:
        """Queue ``direction`` if it turns relative to the last queued heading."""
        if direction not in DIRECTIONS.values():
            return False
        if not is_orthogonal(direction, self.last(current)):
            return False
        self._queue.append(direction)
        logger.debug("Queued turn %s (pending=%d)", direction, len(self._queue))
        return True

    def push_named(self, name: str, current: Direction) -> bool:
        direction = DIRECTIONS.get(name.upper())
        if direction is None:
            return False
        return self.push(direction, current)

    def pop(self) -> Direction | None:
        return self._queue.popleft() if self._queue else None

    def clear(self) -> None:
        self._queue.clear()

    def copy(self) -> InputBuffer:
        return InputBuffer(self._queue)


def classify_swipe(
    start: tuple[float, float], end: tuple[float, float]
) -> Direction | None:
    """Map a gesture to its dominant axis; zero-length swipes map to nothing."""
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    if dx == 0 and dy == 0:
        return None
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    # Screen y grows downward.
    return DOWN if dy > 0 else UP
