"""Pick the sprite variant for every snake segment from its neighbours."""

from __future__ import annotations

import enum
from typing import Sequence

from .config import DOWN, LEFT, RIGHT, UP
from .grid import Cell, Direction, offset


class Sprite(enum.Enum):
    HEAD_UP = "head_up"
    HEAD_DOWN = "head_down"
    HEAD_LEFT = "head_left"
    HEAD_RIGHT = "head_right"
    TAIL_UP = "tail_up"
    TAIL_DOWN = "tail_down"
    TAIL_LEFT = "tail_left"
    TAIL_RIGHT = "tail_right"
    BODY_VERTICAL = "body_vertical"
    BODY_HORIZONTAL = "body_horizontal"
    BODY_TOP_LEFT = "body_top_left"
    BODY_TOP_RIGHT = "body_top_right"
    BODY_BOTTOM_LEFT = "body_bottom_left"
    BODY_BOTTOM_RIGHT = "body_bottom_right"

    @property
    def part(self) -> str:
        return self.value.split("_", 1)[0]


_HEADS = {
    UP: Sprite.HEAD_UP,
    DOWN: Sprite.HEAD_DOWN,
    LEFT: Sprite.HEAD_LEFT,
    RIGHT: Sprite.HEAD_RIGHT,
}
_TAILS = {
    UP: Sprite.TAIL_UP,
    DOWN: Sprite.TAIL_DOWN,
    LEFT: Sprite.TAIL_LEFT,
    RIGHT: Sprite.TAIL_RIGHT,
}
_CORNERS = {
    frozenset((UP, LEFT)): Sprite.BODY_TOP_LEFT,
    frozenset((UP, RIGHT)): Sprite.BODY_TOP_RIGHT,
    frozenset((DOWN, LEFT)): Sprite.BODY_BOTTOM_LEFT,
    frozenset((DOWN, RIGHT)): Sprite.BODY_BOTTOM_RIGHT,
}


def head_sprite(direction: Direction) -> Sprite:
    return _HEADS.get(direction, Sprite.HEAD_UP)


def tail_sprite(before_tail: Cell, tail: Cell) -> Sprite:
    """Tail points away from the segment in front of it."""
    return _TAILS.get(offset(before_tail, tail), Sprite.TAIL_UP)


def body_sprite(prev_offset: Direction, next_offset: Direction) -> Sprite:
    """Choose a straight or corner piece from the two neighbour offsets.

    Offsets are measured from the segment to its neighbour toward the head
    (``prev_offset``) and toward the tail (``next_offset``), screen y down.
    """
    if prev_offset[0] == next_offset[0]:
        return Sprite.BODY_VERTICAL
    if prev_offset[1] == next_offset[1]:
        return Sprite.BODY_HORIZONTAL
    return _CORNERS[frozenset((prev_offset, next_offset))]


def snake_sprites(snake: Sequence[Cell], direction: Direction) -> list[Sprite]:
    """Sprite for each segment, head first."""
    sprites: list[Sprite] = []
    last = len(snake) - 1
    for idx, segment in enumerate(snake):
        if idx == 0:
            sprites.append(head_sprite(direction))
        elif idx == last:
            sprites.append(tail_sprite(snake[idx - 1], segment))
        else:
            sprites.append(
                body_sprite(
                    offset(segment, snake[idx - 1]),
                    offset(segment, snake[idx + 1]),
                )
            )
    return sprites
