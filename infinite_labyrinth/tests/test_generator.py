"""Tests covering lazy region generation and its structural guarantees."""
from __future__ import annotations

from infinite_labyrinth.directions import opposite, step
from infinite_labyrinth.generator import RegionGenerator
from infinite_labyrinth.logic import LabyrinthLogic
from infinite_labyrinth.params import ArtisticParameters
from infinite_labyrinth.settings import LabyrinthSettings
from infinite_labyrinth.store import StructureStore


def _first_uncarved_neighbour(store: StructureStore):
    for x, y in sorted(store.carved):
        for direction in range(4):
            neighbour = step(x, y, direction)
            if not store.is_carved(*neighbour):
                return neighbour
    raise AssertionError("structure has no frontier")


# //1.- Querying an uncarved cell generates a region that contains it.
def test_edge_query_triggers_generation(small_logic: LabyrinthLogic):
    assert not small_logic.is_carved(0, 0)
    small_logic.is_edge_open(0, 0, 0)
    assert small_logic.is_carved(0, 0)
    assert small_logic.regions_generated == 1
    report = small_logic.last_report
    assert report is not None
    assert report.seed_cell == (0, 0)
    assert report.cells_carved > 1
    assert report.iterations <= small_logic.settings.max_iterations


# //2.- Every stored edge agrees with its mirror on the neighbouring cell.
def test_generated_edges_are_symmetric(small_logic: LabyrinthLogic):
    small_logic.is_edge_open(0, 0, 0)
    store = small_logic.store
    for (x, y, direction), value in store.edges.items():
        nx, ny = step(x, y, direction)
        assert store.is_edge_open_cached(nx, ny, opposite(direction)) == value


# //3.- No carved cell is left without an opening after post-processing.
def test_every_carved_cell_has_an_opening(small_logic: LabyrinthLogic):
    small_logic.is_edge_open(0, 0, 0)
    small_logic.generate_region(*_first_uncarved_neighbour(small_logic.store))
    store = small_logic.store
    assert all(store.open_count(x, y) >= 1 for x, y in store.carved)


# //4.- Two instances with one seed replay identical structure.
def test_generation_is_deterministic(small_settings: LabyrinthSettings):
    queries = [(0, 0, 0), (5, -3, 1), (-8, 4, 2), (20, 20, 3), (1, 1, 1)]
    first = LabyrinthLogic(settings=small_settings)
    second = LabyrinthLogic(settings=small_settings)
    assert [first.is_edge_open(*q) for q in queries] == [second.is_edge_open(*q) for q in queries]
    assert first.store.edges == second.store.edges
    assert first.store.carved == second.store.carved


def test_different_seeds_differ():
    first = LabyrinthLogic(seed=1, settings=LabyrinthSettings(window_size=11))
    second = LabyrinthLogic(seed=2, settings=LabyrinthSettings(window_size=11))
    first.is_edge_open(0, 0, 0)
    second.is_edge_open(0, 0, 0)
    assert first.store.edges != second.store.edges


# //5.- A later region never rewrites edges that an earlier region decided.
def test_adjacent_regions_do_not_contradict(small_logic: LabyrinthLogic):
    small_logic.is_edge_open(0, 0, 0)
    store = small_logic.store
    before_edges = dict(store.edges)
    before_carved = set(store.carved)

    seed_cell = _first_uncarved_neighbour(store)
    report = small_logic.generate_region(*seed_cell)
    assert report is not None
    for key, value in before_edges.items():
        assert store.edges[key] == value
    assert before_carved <= store.carved

    joined = [
        direction
        for direction in range(4)
        if store.is_edge_open_cached(seed_cell[0], seed_cell[1], direction)
        and step(seed_cell[0], seed_cell[1], direction) in before_carved
    ]
    assert len(joined) == 1


# //6.- Generation is a no-op for cells that are already carved.
def test_generate_skips_carved_cells():
    store = StructureStore()
    store.carve(0, 0)
    generator = RegionGenerator(store, 5, ArtisticParameters.from_seed(5), window_size=5)
    assert generator.generate(0, 0) is None
    assert store.carved == {(0, 0)}
    assert not store.edges


# //7.- A carved cell whose edge was never opened reads as a wall without regenerating.
def test_unset_edge_on_carved_cell_is_closed(small_logic: LabyrinthLogic):
    small_logic.store.carve(3, 3)
    assert small_logic.is_edge_open(3, 3, 1) is False
    assert small_logic.regions_generated == 0


def test_is_path_open_maps_offsets(small_logic: LabyrinthLogic):
    small_logic.is_edge_open(0, 0, 0)
    for direction, (dx, dy) in enumerate([(0, -1), (1, 0), (0, 1), (-1, 0)]):
        assert small_logic.is_path_open(0, 0, dx, dy) == small_logic.is_edge_open_cached(0, 0, direction)
    assert small_logic.is_path_open(0, 0, 1, 1) is False
