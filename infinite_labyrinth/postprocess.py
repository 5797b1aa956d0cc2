"""Passes that tidy a freshly generated region."""
from __future__ import annotations

import logging
from typing import Iterable, List

from .directions import Cell, opposite, step
from .hashing import rand_hash
from .heuristics import detect_parallel_corridor
from .store import StructureStore

LOGGER = logging.getLogger(__name__)

STRAIGHT_PROBABILITY = 0.7


def _least_parallel_direction(store: StructureStore, x: int, y: int, candidates: List[int]) -> int:
    best_direction = candidates[0]
    best_score = -1.0
    for direction in candidates:
        to_x, to_y = step(x, y, direction)
        score = detect_parallel_corridor(store, x, y, direction, to_x, to_y)
        if score > best_score:
            best_score = score
            best_direction = direction
    return best_direction


def ensure_smart_breathing_holes(store: StructureStore, center_x: int, center_y: int, window_size: int) -> int:
    """Open every uncarved pocket in the window that is walled in on all four sides.

    Returns the number of pockets opened.
    """

    radius = window_size // 2
    opened = 0
    for y in range(center_y - radius, center_y + radius + 1):
        for x in range(center_x - radius, center_x + radius + 1):
            if store.is_carved(x, y):
                continue
            neighbours = store.carved_neighbours(x, y)
            if len(neighbours) != 4:
                continue
            direction = _least_parallel_direction(store, x, y, neighbours)
            store.set_edge(x, y, direction, True)
            store.carve(x, y)
            opened += 1
    if opened:
        LOGGER.debug("Opened %d breathing holes around (%d, %d)", opened, center_x, center_y)
    return opened


def _extend_dead_end(store: StructureStore, seed: int, x: int, y: int, direction: int) -> int:
    length = 2 + int(rand_hash(seed, x, y, 888) * 2)
    current_x, current_y = x, y
    heading = direction
    extended = 0
    for index in range(length):
        next_x, next_y = step(current_x, current_y, heading)
        if store.is_carved(next_x, next_y):
            break
        if len(store.carved_neighbours(next_x, next_y, exclude=(current_x, current_y))) > 1:
            break

        store.carve(next_x, next_y)
        store.set_edge(current_x, current_y, heading, True)
        extended += 1

        if rand_hash(seed, next_x, next_y, 999 + index) >= STRAIGHT_PROBABILITY:
            turns = [
                d
                for d in range(4)
                if d not in (heading, opposite(heading)) and not store.is_carved(*step(next_x, next_y, d))
            ]
            if not turns:
                break
            heading = turns[int(rand_hash(seed, next_x, next_y, 1111 + index) * len(turns))]
        current_x, current_y = next_x, next_y
    return extended


def soft_extend_short_dead_ends(store: StructureStore, seed: int, cells: Iterable[Cell]) -> int:
    """Lengthen dead ends among ``cells`` by two or three cells each.

    Returns the total number of cells carved by the extensions.
    """

    extended = 0
    for x, y in list(cells):
        open_dirs = store.open_directions(x, y)
        if len(open_dirs) != 1:
            continue
        free = [d for d in range(4) if d not in open_dirs and not store.is_carved(*step(x, y, d))]
        if not free:
            continue
        direction = _least_parallel_direction(store, x, y, free)
        extended += _extend_dead_end(store, seed, x, y, direction)
    if extended:
        LOGGER.debug("Extended short dead ends by %d cells", extended)
    return extended
