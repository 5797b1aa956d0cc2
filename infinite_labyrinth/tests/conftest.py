"""Pytest configuration for infinite labyrinth tests."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

# //1.- Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from infinite_labyrinth.directions import Direction  # noqa: E402
from infinite_labyrinth.logic import LabyrinthLogic  # noqa: E402
from infinite_labyrinth.settings import LabyrinthSettings  # noqa: E402
from infinite_labyrinth.store import StructureStore  # noqa: E402


# //2.- Small generation windows keep region generation quick in tests.
@pytest.fixture
def small_settings() -> LabyrinthSettings:
    return LabyrinthSettings(seed=42, window_size=11)


@pytest.fixture
def small_logic(small_settings: LabyrinthSettings) -> LabyrinthLogic:
    return LabyrinthLogic(settings=small_settings)


# //3.- Factory carving a straight east-west corridor directly into a store.
@pytest.fixture
def carve_corridor() -> Callable[[StructureStore, Iterable[Tuple[int, int]]], None]:
    def _carve(store: StructureStore, cells: Iterable[Tuple[int, int]]) -> None:
        previous = None
        for x, y in cells:
            store.carve(x, y)
            if previous is not None:
                store.set_edge(previous[0], previous[1], Direction.EAST, True)
            previous = (x, y)

    return _carve
