"""Viewport controller that walks the explorer towards unvisited cells."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, List, Optional, Tuple

import numpy as np

from .directions import DIRECTIONS, Cell
from .store import StructureStore

LOGGER = logging.getLogger(__name__)

EdgeQuery = Callable[[int, int, int], bool]


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Create a numpy Generator; ``None`` draws fresh entropy."""

    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(seed & ((1 << 64) - 1))


@dataclass
class ViewportState:
    """Camera state: whole-cell offset, sub-cell progress and pending path.

    ``pixel_x`` and ``pixel_y`` are fractions of a cell in ``(-1, 1)``; at
    most one of them is non-zero at any time.
    """

    cell_x: int = 0
    cell_y: int = 0
    pixel_x: float = 0.0
    pixel_y: float = 0.0
    is_moving: bool = False
    path: List[Cell] = field(default_factory=list)


class ExplorerController:
    """Idle/moving state machine driving the viewport one cell at a time."""

    def __init__(
        self,
        store: StructureStore,
        is_edge_open: EdgeQuery,
        *,
        speed: float = 12.0,
        search_limit: int = 500,
        rng: Optional[np.random.Generator] = None,
        observer: Cell = (0, 0),
    ) -> None:
        if speed <= 0:
            raise ValueError("speed must be positive")
        if search_limit <= 0:
            raise ValueError("search_limit must be positive")
        self._store = store
        self._is_edge_open = is_edge_open
        self.speed = float(speed)
        self.search_limit = int(search_limit)
        self._rng = rng if rng is not None else make_rng(None)
        self.observer = observer
        self.state = ViewportState()

    def current_world_pos(self) -> Cell:
        return self.observer[0] + self.state.cell_x, self.observer[1] + self.state.cell_y

    # //1.- Breadth-first search for the closest cell not yet visited.
    def _search_unvisited(self, start: Cell) -> Optional[List[Cell]]:
        queue: Deque[Tuple[Cell, Tuple[Cell, ...]]] = deque([(start, ())])
        seen = {start}
        while queue and len(seen) < self.search_limit:
            (x, y), path = queue.popleft()
            for direction, (dx, dy) in enumerate(DIRECTIONS):
                neighbour = (x + dx, y + dy)
                if not self._is_edge_open(x, y, direction) or neighbour in seen:
                    continue
                seen.add(neighbour)
                extended = path + (neighbour,)
                if not self._store.is_visited(*neighbour):
                    return list(extended)
                queue.append((neighbour, extended))
        return None

    # //2.- Fall back to any open neighbour once the search budget is spent.
    def _random_open_neighbour(self, start: Cell) -> Optional[Cell]:
        x, y = start
        options = [
            (x + dx, y + dy)
            for direction, (dx, dy) in enumerate(DIRECTIONS)
            if self._is_edge_open(x, y, direction)
        ]
        if not options:
            return None
        choice = options[int(self._rng.integers(len(options)))]
        LOGGER.debug("No unvisited cell within %d nodes of %s, wandering to %s", self.search_limit, start, choice)
        return choice

    def find_next_move(self) -> bool:
        """Plan a path from the current cell; return whether the explorer is moving."""

        if self.state.is_moving:
            return True
        start = self.current_world_pos()
        path = self._search_unvisited(start)
        if path is None:
            fallback = self._random_open_neighbour(start)
            path = [fallback] if fallback is not None else None
        if path:
            self.state.path = path
            self.state.is_moving = True
        return self.state.is_moving

    # //3.- Advance sub-cell motion along exactly one axis per tick.
    def update(self, delta_time: float) -> None:
        state = self.state
        x, y = self.current_world_pos()
        self._store.mark_visited(x, y)

        if not state.is_moving:
            self.find_next_move()
            return

        if not state.path:
            state.is_moving = False
            state.pixel_x = 0.0
            state.pixel_y = 0.0
            self.find_next_move()
            return

        target_x, target_y = state.path[0]
        dx = target_x - x
        dy = target_y - y
        move_step = self.speed * delta_time

        if dx != 0:
            sign = 1 if dx > 0 else -1
            state.pixel_x += sign * move_step
            if abs(state.pixel_x) >= 1:
                state.cell_x += sign
                state.pixel_x = 0.0
                state.path.pop(0)
        elif dy != 0:
            sign = 1 if dy > 0 else -1
            state.pixel_y += sign * move_step
            if abs(state.pixel_y) >= 1:
                state.cell_y += sign
                state.pixel_y = 0.0
                state.path.pop(0)
