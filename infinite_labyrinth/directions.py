"""Cardinal direction helpers for the integer grid."""
from __future__ import annotations

from enum import IntEnum
from typing import Tuple

Cell = Tuple[int, int]


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


# North points towards negative y to match screen coordinates.
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))
HORIZONTAL = (Direction.EAST, Direction.WEST)
VERTICAL = (Direction.NORTH, Direction.SOUTH)


def _checked(direction: int) -> int:
    if direction not in (0, 1, 2, 3):
        raise ValueError(f"direction must be one of 0..3, got {direction!r}")
    return int(direction)


def opposite(direction: int) -> int:
    return (_checked(direction) + 2) % 4


def perpendiculars(direction: int) -> Tuple[int, int]:
    index = _checked(direction)
    return (index + 1) % 4, (index + 3) % 4


def offset(direction: int) -> Tuple[int, int]:
    return DIRECTIONS[_checked(direction)]


def step(x: int, y: int, direction: int, distance: int = 1) -> Cell:
    dx, dy = offset(direction)
    return x + dx * distance, y + dy * distance


def direction_between(dx: int, dy: int) -> int | None:
    """Return the direction index for a unit offset, ``None`` otherwise."""

    try:
        return DIRECTIONS.index((dx, dy))
    except ValueError:
        return None


def is_horizontal(direction: int) -> bool:
    return _checked(direction) in HORIZONTAL
