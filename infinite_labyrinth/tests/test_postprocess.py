"""Tests for breathing holes and dead-end extension passes."""
from __future__ import annotations

from infinite_labyrinth.directions import Direction
from infinite_labyrinth.postprocess import ensure_smart_breathing_holes, soft_extend_short_dead_ends
from infinite_labyrinth.store import StructureStore


# //1.- A pocket walled in on four sides is carved and joined to one neighbour.
def test_breathing_hole_opens_isolated_pocket():
    store = StructureStore()
    for cell in [(0, -1), (1, 0), (0, 1), (-1, 0)]:
        store.carve(*cell)
    opened = ensure_smart_breathing_holes(store, 0, 0, window_size=3)
    assert opened == 1
    assert store.is_carved(0, 0)
    assert store.open_count(0, 0) == 1
    assert store.is_edge_open_cached(0, -1, Direction.SOUTH)


def test_breathing_holes_ignore_partially_enclosed_cells():
    store = StructureStore()
    for cell in [(0, -1), (1, 0), (0, 1)]:
        store.carve(*cell)
    assert ensure_smart_breathing_holes(store, 0, 0, window_size=5) == 0
    assert not store.is_carved(0, 0)


# //2.- A stub dead end is extended by two or three fresh cells.
def test_dead_end_extension_lengthens_stub():
    for seed in (1, 7, 42, 99):
        store = StructureStore()
        store.carve(0, 0)
        store.carve(1, 0)
        store.set_edge(0, 0, Direction.EAST, True)
        extended = soft_extend_short_dead_ends(store, seed, [(1, 0)])
        assert 2 <= extended <= 3
        assert len(store.carved) == 2 + extended
        assert store.open_count(1, 0) == 2
        assert all(store.open_count(x, y) >= 1 for x, y in store.carved)


# //3.- Cells that are not dead ends are left alone.
def test_dead_end_extension_skips_corridors():
    store = StructureStore()
    for x in range(3):
        store.carve(x, 0)
    store.set_edge(0, 0, Direction.EAST, True)
    store.set_edge(1, 0, Direction.EAST, True)
    assert soft_extend_short_dead_ends(store, 3, [(1, 0)]) == 0
    assert len(store.carved) == 3
