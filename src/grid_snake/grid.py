"""Grid model: cells, unit directions and the arithmetic between them."""

from __future__ import annotations

Cell = tuple[int, int]
Direction = tuple[int, int]


def add(cell: Cell, direction: Direction) -> Cell:
    return cell[0] + direction[0], cell[1] + direction[1]


def offset(origin: Cell, other: Cell) -> Direction:
    """Vector pointing from ``origin`` to ``other``."""
    return other[0] - origin[0], other[1] - origin[1]


def opposite(direction: Direction) -> Direction:
    return -direction[0], -direction[1]


def is_orthogonal(a: Direction, b: Direction) -> bool:
    """True when the two unit vectors lie on different axes."""
    return a[0] * b[0] + a[1] * b[1] == 0


def in_bounds(cell: Cell, grid_size: int) -> bool:
    return 0 <= cell[0] < grid_size and 0 <= cell[1] < grid_size


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
