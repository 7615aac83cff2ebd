"""Tick gate and interval timers driven by caller-supplied timestamps.

Nothing here reads a clock: the frame loop passes ``now`` in seconds, so
tests can feed plain numbers instead of waiting on wall time.
"""

from __future__ import annotations


class TickGate:
    """Admit at most one simulation tick per ``1 / speed`` seconds."""

    def __init__(self, speed: float) -> None:
        self.speed = speed
        self._last: float | None = None

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        if value <= 0:
            raise ValueError("speed must be positive")
        self._speed = value
        self.min_interval = 1.0 / value

    def reset(self) -> None:
        self._last = None

    def ready(self, now: float) -> bool:
        if self._last is not None and now - self._last < self.min_interval:
            return False
        self._last = now
        return True


class IntervalTimer:
    """Fixed-period timer polled by the frame loop; inert until started."""

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.active = False
        self.started_at = 0.0
        self._next_fire = 0.0

    def start(self, now: float) -> None:
        self.active = True
        self.started_at = now
        self._next_fire = now + self.interval

    def cancel(self) -> None:
        self.active = False

    def elapsed(self, now: float) -> float:
        return max(0.0, now - self.started_at)

    def poll(self, now: float) -> int:
        """Return how many periods have elapsed since the previous poll."""
        if not self.active or now < self._next_fire:
            return 0
        fired = int((now - self._next_fire) // self.interval) + 1
        self._next_fire += fired * self.interval
        return fired
