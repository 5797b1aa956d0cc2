"""Read-only raster views of the labyrinth around a centre cell."""
from __future__ import annotations

from typing import List, Optional

import numpy as np

from .directions import Cell, Direction
from .logic import LabyrinthLogic

WALL = "#"
FLOOR = " "
VISITED = "."
EXPLORER = "@"


def _origin(center: Cell, size: int) -> Cell:
    if size <= 0 or size % 2 == 0:
        raise ValueError("size must be a positive odd number")
    half = size // 2
    return center[0] - half, center[1] - half


def window_edges(logic: LabyrinthLogic, center: Cell, size: int, *, trigger: bool = False) -> np.ndarray:
    """Return a ``(size, size, 4)`` boolean array of open edges.

    Index order is ``[row, column, direction]`` with row 0 at the top of
    the window. With ``trigger`` the generating query is used, so unseen
    regions are carved on the way.
    """

    origin_x, origin_y = _origin(center, size)
    query = logic.is_edge_open if trigger else logic.is_edge_open_cached
    edges = np.zeros((size, size, 4), dtype=bool)
    for row in range(size):
        for col in range(size):
            for direction in range(4):
                edges[row, col, direction] = query(origin_x + col, origin_y + row, direction)
    return edges


def visited_mask(logic: LabyrinthLogic, center: Cell, size: int) -> np.ndarray:
    origin_x, origin_y = _origin(center, size)
    mask = np.zeros((size, size), dtype=bool)
    for row in range(size):
        for col in range(size):
            mask[row, col] = logic.is_visited(origin_x + col, origin_y + row)
    return mask


def render_ascii(logic: LabyrinthLogic, center: Optional[Cell] = None, size: int = 15) -> str:
    """Draw the window with one character per cell and one per wall slot."""

    center = center or logic.get_current_world_pos()
    edges = window_edges(logic, center, size)
    visited = visited_mask(logic, center, size)
    explorer = logic.get_current_world_pos()
    origin_x, origin_y = _origin(center, size)

    canvas: List[List[str]] = [[WALL] * (size * 2 + 1) for _ in range(size * 2 + 1)]
    for row in range(size):
        for col in range(size):
            cell_x, cell_y = origin_x + col, origin_y + row
            if not logic.is_carved(cell_x, cell_y):
                continue
            mark = VISITED if visited[row, col] else FLOOR
            if (cell_x, cell_y) == explorer:
                mark = EXPLORER
            canvas[row * 2 + 1][col * 2 + 1] = mark
            if edges[row, col, Direction.EAST]:
                canvas[row * 2 + 1][col * 2 + 2] = FLOOR
            if edges[row, col, Direction.SOUTH]:
                canvas[row * 2 + 2][col * 2 + 1] = FLOOR
            if edges[row, col, Direction.NORTH]:
                canvas[row * 2][col * 2 + 1] = FLOOR
            if edges[row, col, Direction.WEST]:
                canvas[row * 2 + 1][col * 2] = FLOOR
    return "\n".join("".join(line) for line in canvas)
