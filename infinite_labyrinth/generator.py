"""Frontier-growth generator that carves one labyrinth region on demand."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .directions import Cell, perpendiculars, step
from .hashing import rand_hash
from .heuristics import (
    adjacent_dead_end_penalty,
    density_penalty,
    detect_parallel_corridor,
    direction_balance,
    distance_to_nearest_junction,
    short_corridor_penalty,
    would_create_short_dead_end,
)
from .params import ArtisticParameters
from .postprocess import ensure_smart_breathing_holes, soft_extend_short_dead_ends
from .store import StructureStore

LOGGER = logging.getLogger(__name__)

NO_DIRECTION = -1
_CONNECTION_SALT = 1000
_CONNECTION_STRIDE = 123


@dataclass(frozen=True)
class FrontierCell:
    x: int
    y: int
    last_direction: int = NO_DIRECTION


@dataclass(frozen=True)
class Candidate:
    x: int
    y: int
    direction: int
    score: float


@dataclass(frozen=True)
class RegionReport:
    """Summary of one :meth:`RegionGenerator.generate` call."""

    seed_cell: Cell
    cells_carved: int
    iterations: int
    breathing_holes: int
    extension_cells: int

    @property
    def total_cells(self) -> int:
        return self.cells_carved + self.breathing_holes + self.extension_cells


class RegionGenerator:
    """Grow a connected region of corridors around a single uncarved cell.

    The frontier list and the record of cells carved during a call are local
    to :meth:`generate`; nothing but the store survives between calls.
    """

    def __init__(
        self,
        store: StructureStore,
        seed: int,
        params: ArtisticParameters,
        *,
        window_size: int = 31,
    ) -> None:
        self._store = store
        self._seed = seed
        self._params = params
        self._window_size = window_size
        self._max_iterations = window_size * window_size * 2

    @property
    def window_size(self) -> int:
        return self._window_size

    def _hash(self, x: int, y: int, salt: int) -> float:
        return rand_hash(self._seed, x, y, salt)

    # //1.- Entry point: carve the seed, grow the frontier, then post-process.
    def generate(self, start_x: int, start_y: int) -> Optional[RegionReport]:
        store = self._store
        if store.is_carved(start_x, start_y):
            return None

        carved: List[Cell] = [(start_x, start_y)]
        store.carve(start_x, start_y)
        self._connect_to_existing(start_x, start_y)

        frontier: List[FrontierCell] = [FrontierCell(start_x, start_y)]
        iterations = self._grow(frontier, carved, start_x, start_y)

        holes = ensure_smart_breathing_holes(store, start_x, start_y, self._window_size)
        extended = soft_extend_short_dead_ends(store, self._seed, carved)

        report = RegionReport(
            seed_cell=(start_x, start_y),
            cells_carved=len(carved),
            iterations=iterations,
            breathing_holes=holes,
            extension_cells=extended,
        )
        LOGGER.debug(
            "Generated region at (%d, %d): %d cells in %d iterations, %d holes, %d extension cells",
            start_x,
            start_y,
            report.cells_carved,
            report.iterations,
            report.breathing_holes,
            report.extension_cells,
        )
        return report

    # //2.- Join the new region to any neighbouring structure through one edge.
    def _connect_to_existing(self, x: int, y: int) -> None:
        best_hash = float("-inf")
        best_direction = NO_DIRECTION
        for direction in self._store.carved_neighbours(x, y):
            value = self._hash(x, y, _CONNECTION_SALT + direction * _CONNECTION_STRIDE)
            if value > best_hash:
                best_hash = value
                best_direction = direction
        if best_direction != NO_DIRECTION:
            self._store.set_edge(x, y, best_direction, True)

    # //3.- Frontier growth loop bounded by the iteration cap.
    def _grow(self, frontier: List[FrontierCell], carved: List[Cell], start_x: int, start_y: int) -> int:
        store = self._store
        iterations = 0
        while frontier and iterations < self._max_iterations:
            iterations += 1
            index = self._pick_index(len(frontier), start_x, start_y, iterations)
            current = frontier[index]

            candidates = self._score_candidates(current, iterations)
            if not candidates:
                del frontier[index]
                continue

            best = max(candidates, key=lambda candidate: candidate.score)
            store.carve(best.x, best.y)
            carved.append((best.x, best.y))
            store.set_edge(current.x, current.y, best.direction, True)
            frontier.append(FrontierCell(best.x, best.y, best.direction))
        return iterations

    def _pick_index(self, length: int, start_x: int, start_y: int, iteration: int) -> int:
        if self._hash(start_x, start_y, iteration) < self._params.tunnel_preference:
            return length - 1
        index = int(self._hash(start_x, start_y, iteration + 1) * length)
        return max(0, min(index, length - 1))

    # //4.- Score every uncarved neighbour of the chosen frontier cell.
    def _score_candidates(self, current: FrontierCell, iteration: int) -> List[Candidate]:
        candidates = []
        for direction in range(4):
            nx, ny = step(current.x, current.y, direction)
            if self._store.is_carved(nx, ny):
                continue
            score = self._score(current, direction, nx, ny)
            score *= self._hash(nx, ny, iteration + direction * 5)
            candidates.append(Candidate(nx, ny, direction, score))
        return candidates

    def _score(self, current: FrontierCell, direction: int, nx: int, ny: int) -> float:
        store = self._store
        params = self._params
        score = 1.0

        if direction == current.last_direction:
            score *= params.straight_preference_boost
        elif current.last_direction != NO_DIRECTION:
            score *= params.turn_preference_boost

        crowding = len(store.carved_neighbours(nx, ny, exclude=(current.x, current.y)))
        score *= density_penalty(crowding, params.sparsity_penalty)

        junction_distance = distance_to_nearest_junction(store, current.x, current.y, direction)
        score *= short_corridor_penalty(junction_distance)

        if would_create_short_dead_end(store, nx, ny, current.x, current.y):
            score *= 0.05
            score *= adjacent_dead_end_penalty(store, nx, ny, current.x, current.y, direction)

        for side_direction in perpendiculars(direction):
            side_x, side_y = step(current.x, current.y, side_direction)
            if store.is_carved(side_x, side_y) and store.is_edge_open_cached(side_x, side_y, direction):
                score *= params.diversity_penalty * 0.5

        score *= detect_parallel_corridor(store, current.x, current.y, direction, nx, ny)
        score *= direction_balance(store, current.x, current.y, direction)
        return score
