"""Scoring heuristics that bias frontier growth towards a tidy aesthetic.

Every function here reads only the non-triggering edge cache, so they are
safe to call while a region is still being generated.
"""
from __future__ import annotations

from .directions import Direction, is_horizontal, opposite, perpendiculars, step
from .store import StructureStore

JUNCTION_SEARCH_LIMIT = 10
BALANCE_RADIUS = 3
DEAD_END_RADIUS = 2

# Neighbour order used when looking for adjacent dead ends.
_ADJACENT_ORDER = (Direction.WEST, Direction.EAST, Direction.NORTH, Direction.SOUTH)


def parallel_signal_count(
    store: StructureStore,
    from_x: int,
    from_y: int,
    direction: int,
    to_x: int,
    to_y: int,
) -> int:
    count = 0
    ahead1 = step(to_x, to_y, direction)
    ahead2 = step(ahead1[0], ahead1[1], direction)
    for side_direction in perpendiculars(direction):
        side_x, side_y = step(from_x, from_y, side_direction)
        if not (store.is_carved(side_x, side_y) and store.is_edge_open_cached(side_x, side_y, direction)):
            continue
        count += 1
        side_ahead = step(side_x, side_y, direction)
        if (
            store.is_carved(*ahead1)
            and store.is_carved(*side_ahead)
            and store.is_edge_open_cached(side_ahead[0], side_ahead[1], direction)
        ):
            count += 3
        if store.is_carved(*ahead2) and store.is_edge_open_cached(ahead1[0], ahead1[1], direction):
            count += 2
    return count


def detect_parallel_corridor(
    store: StructureStore,
    from_x: int,
    from_y: int,
    direction: int,
    to_x: int,
    to_y: int,
) -> float:
    """Return a multiplier that punishes steps running alongside a corridor."""

    count = parallel_signal_count(store, from_x, from_y, direction, to_x, to_y)
    if count == 0:
        return 1.0
    if count == 1:
        return 0.15
    if count == 2:
        return 0.05
    return 0.01


def direction_balance(store: StructureStore, center_x: int, center_y: int, direction: int) -> float:
    """Favour the axis that is under-represented around ``(center_x, center_y)``."""

    horizontal = 0
    vertical = 0
    for y in range(center_y - BALANCE_RADIUS, center_y + BALANCE_RADIUS + 1):
        for x in range(center_x - BALANCE_RADIUS, center_x + BALANCE_RADIUS + 1):
            if not store.is_carved(x, y):
                continue
            if store.is_edge_open_cached(x, y, Direction.EAST) or store.is_edge_open_cached(x, y, Direction.WEST):
                horizontal += 1
            if store.is_edge_open_cached(x, y, Direction.NORTH) or store.is_edge_open_cached(x, y, Direction.SOUTH):
                vertical += 1

    total = horizontal + vertical
    if total == 0:
        return 1.0
    ratio = (horizontal if is_horizontal(direction) else vertical) / total
    if ratio > 0.6:
        return 0.3
    if ratio > 0.55:
        return 0.6
    if ratio < 0.4:
        return 1.5
    return 1.0


def would_create_short_dead_end(store: StructureStore, nx: int, ny: int, from_x: int, from_y: int) -> bool:
    potential_exits = 0
    for direction in range(4):
        neighbour = step(nx, ny, direction)
        if neighbour == (from_x, from_y):
            continue
        if not store.is_carved(*neighbour):
            potential_exits += 1
    if potential_exits <= 1:
        return True

    nearby_dead_ends = 0
    for y in range(ny - DEAD_END_RADIUS, ny + DEAD_END_RADIUS + 1):
        for x in range(nx - DEAD_END_RADIUS, nx + DEAD_END_RADIUS + 1):
            if (x, y) == (nx, ny):
                continue
            if store.is_dead_end(x, y):
                nearby_dead_ends += 1
    return nearby_dead_ends >= 2


def distance_to_nearest_junction(store: StructureStore, start_x: int, start_y: int, exclude_direction: int) -> int:
    """Walk corridors from the start cell and return the steps to the first junction.

    Returns ``JUNCTION_SEARCH_LIMIT`` when no junction is reachable within it.
    """

    best = JUNCTION_SEARCH_LIMIT
    for search_direction in range(4):
        if search_direction == exclude_direction:
            continue
        x, y = start_x, start_y
        heading = search_direction
        distance = 0
        while distance < JUNCTION_SEARCH_LIMIT:
            next_x, next_y = step(x, y, heading)
            if not store.is_carved(next_x, next_y):
                break
            if not store.is_edge_open_cached(x, y, heading):
                break
            x, y = next_x, next_y
            distance += 1

            open_count = store.open_count(x, y)
            if open_count > 2:
                best = min(best, distance)
                break
            if open_count != 2:
                break
            back = opposite(heading)
            heading = next(d for d in range(4) if d != back and store.is_edge_open_cached(x, y, d))
    return best


def adjacent_dead_end_penalty(
    store: StructureStore,
    nx: int,
    ny: int,
    from_x: int,
    from_y: int,
    direction: int,
) -> float:
    """Punish dead ends that would sit beside another dead end in an M/E/W shape."""

    for neighbour_direction in _ADJACENT_ORDER:
        x, y = step(nx, ny, neighbour_direction)
        if (x, y) == (from_x, from_y) or not store.is_carved(x, y):
            continue
        open_dirs = store.open_directions(x, y)
        if len(open_dirs) != 1:
            continue
        if open_dirs[0] == direction:
            return 0.01
        if open_dirs[0] == opposite(direction):
            return 0.05
    return 1.0


def density_penalty(carved_neighbours: int, sparsity_penalty: float) -> float:
    if carved_neighbours >= 3:
        return sparsity_penalty * 0.3
    if carved_neighbours == 2:
        return sparsity_penalty
    if carved_neighbours == 1:
        return 0.7
    return 1.0


def short_corridor_penalty(distance: int) -> float:
    if distance < 3:
        return 0.4
    if distance < 5:
        return 0.7
    return 1.0
