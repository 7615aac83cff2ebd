"""Tests for turn buffering and swipe classification."""

import pytest

from grid_snake.config import DOWN, LEFT, RIGHT, UP
from grid_snake.grid import opposite
from grid_snake.input_buffer import InputBuffer, classify_swipe


class TestInputBuffer:
    def test_rejects_reversal_of_current_direction(self):
        buffer = InputBuffer()
        assert buffer.push(DOWN, current=UP) is False
        assert len(buffer) == 0

    def test_rejects_same_direction(self):
        buffer = InputBuffer()
        assert buffer.push(UP, current=UP) is False

    def test_accepts_turns(self):
        buffer = InputBuffer()
        assert buffer.push(LEFT, current=UP) is True
        assert list(buffer) == [LEFT]

    def test_validates_against_last_queued_entry(self):
        buffer = InputBuffer()
        assert buffer.push(LEFT, current=UP)
        # DOWN is orthogonal to LEFT even though it reverses the heading.
        assert buffer.push(DOWN, current=UP)
        assert list(buffer) == [LEFT, DOWN]

    def test_rapid_reversal_cannot_sneak_in(self):
        buffer = InputBuffer()
        buffer.push(LEFT, current=UP)
        assert buffer.push(RIGHT, current=UP) is False
        assert list(buffer) == [LEFT]

    def test_seeded_entry_is_the_reference(self):
        buffer = InputBuffer([UP])
        assert buffer.push(UP, current=UP) is False
        assert buffer.push(RIGHT, current=UP) is True

    def test_pop_is_fifo(self):
        buffer = InputBuffer([LEFT, UP, RIGHT])
        assert buffer.pop() == LEFT
        assert buffer.pop() == UP
        assert buffer.pop() == RIGHT
        assert buffer.pop() is None

    def test_unbounded_queue(self):
        buffer = InputBuffer()
        current = UP
        for turn in [LEFT, UP, RIGHT, DOWN] * 25:
            assert buffer.push(turn, current)
        assert len(buffer) == 100

    def test_never_holds_consecutive_opposites(self):
        buffer = InputBuffer()
        for turn in [LEFT, RIGHT, DOWN, UP, RIGHT, LEFT, LEFT, UP, DOWN]:
            buffer.push(turn, current=UP)
        entries = [UP] + list(buffer)
        for a, b in zip(entries, entries[1:]):
            assert b != opposite(a)

    def test_ignores_non_unit_vectors(self):
        buffer = InputBuffer()
        assert buffer.push((1, 1), current=UP) is False
        assert buffer.push((0, 0), current=UP) is False

    def test_named_pushes(self):
        buffer = InputBuffer()
        assert buffer.push_named("left", current=UP)
        assert not buffer.push_named("sideways", current=UP)
        assert list(buffer) == [LEFT]

    def test_copy_is_independent(self):
        buffer = InputBuffer([LEFT])
        clone = buffer.copy()
        clone.pop()
        assert list(buffer) == [LEFT]

    def test_clear(self):
        buffer = InputBuffer([LEFT, UP])
        buffer.clear()
        assert len(buffer) == 0


class TestClassifySwipe:
    @pytest.mark.parametrize(
        "start, end, expected",
        [
            ((0, 0), (50, 10), RIGHT),
            ((100, 40), (20, 55), LEFT),
            ((10, 10), (15, 80), DOWN),
            ((10, 90), (0, 5), UP),
        ],
    )
    def test_dominant_axis_wins(self, start, end, expected):
        assert classify_swipe(start, end) == expected

    def test_zero_length_swipe_is_ignored(self):
        assert classify_swipe((30, 30), (30, 30)) is None

    def test_diagonal_tie_goes_vertical(self):
        assert classify_swipe((0, 0), (20, 20)) == DOWN
        assert classify_swipe((0, 0), (-20, -20)) == UP
