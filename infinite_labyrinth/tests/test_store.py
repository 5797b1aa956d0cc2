"""Tests for the sparse structure store."""
from __future__ import annotations

import pytest

from infinite_labyrinth.directions import Direction, direction_between, opposite, step
from infinite_labyrinth.store import StructureStore


def test_unknown_cells_and_edges_are_closed():
    store = StructureStore()
    assert not store.is_carved(3, -4)
    assert not store.is_edge_open_cached(3, -4, Direction.NORTH)
    assert not store.has_edge(3, -4, Direction.NORTH)


def test_carve_is_idempotent():
    store = StructureStore()
    store.carve(1, 1)
    store.carve(1, 1)
    assert store.is_carved(1, 1)
    assert len(store.carved) == 1


# //1.- Setting an edge writes the mirrored edge on the neighbour as well.
@pytest.mark.parametrize("direction", [0, 1, 2, 3])
def test_set_edge_is_mirrored(direction: int):
    store = StructureStore()
    store.set_edge(5, 5, direction, True)
    nx, ny = step(5, 5, direction)
    assert store.is_edge_open_cached(5, 5, direction)
    assert store.is_edge_open_cached(nx, ny, opposite(direction))
    store.set_edge(nx, ny, opposite(direction), False)
    assert not store.is_edge_open_cached(5, 5, direction)
    assert store.has_edge(5, 5, direction)


def test_dead_end_and_neighbour_helpers():
    store = StructureStore()
    store.carve(0, 0)
    store.carve(1, 0)
    store.set_edge(0, 0, Direction.EAST, True)
    assert store.is_dead_end(0, 0)
    assert store.open_directions(1, 0) == [Direction.WEST]
    assert store.carved_neighbours(0, 0) == [Direction.EAST]
    assert store.carved_neighbours(0, 0, exclude=(1, 0)) == []


# //2.- Direction indices outside 0..3 are programming errors.
def test_invalid_direction_rejected():
    with pytest.raises(ValueError):
        step(0, 0, 4)
    with pytest.raises(ValueError):
        opposite(-1)


def test_direction_between_unit_offsets():
    assert direction_between(0, -1) == Direction.NORTH
    assert direction_between(-1, 0) == Direction.WEST
    assert direction_between(1, 1) is None
