"""Public facade tying the store, generator and explorer together."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .directions import Cell, direction_between
from .explorer import ExplorerController, ViewportState, make_rng
from .generator import RegionGenerator, RegionReport
from .hashing import rand_hash
from .params import ArtisticParameters
from .settings import LabyrinthSettings
from .store import StructureStore

LOGGER = logging.getLogger(__name__)

OBSERVER_X = 0
OBSERVER_Y = 0


class LabyrinthLogic:
    """An endless labyrinth that generates itself lazily as it is queried.

    The structure store and visited set are owned here; collaborators such
    as renderers only read through the query methods.
    """

    def __init__(self, seed: int | None = None, settings: Optional[LabyrinthSettings] = None) -> None:
        resolved = settings or LabyrinthSettings()
        if seed is not None:
            resolved = replace(resolved, seed=int(seed))
        self.settings = resolved
        self.seed = resolved.seed
        self.params = ArtisticParameters.from_seed(self.seed)
        self.store = StructureStore()
        self.generator = RegionGenerator(self.store, self.seed, self.params, window_size=resolved.window_size)
        self.last_report: Optional[RegionReport] = None
        self.regions_generated = 0
        fallback_seed = self.seed if resolved.deterministic_fallback else None
        self.explorer = ExplorerController(
            self.store,
            self.is_edge_open,
            speed=resolved.explorer_speed,
            search_limit=resolved.search_limit,
            rng=make_rng(fallback_seed),
            observer=(OBSERVER_X, OBSERVER_Y),
        )
        LOGGER.debug("LabyrinthLogic initialised with seed %d and %s", self.seed, self.params)

    @property
    def cell_size(self) -> int:
        return self.settings.cell_size

    @property
    def viewport(self) -> ViewportState:
        return self.explorer.state

    def rand_hash(self, x: int, y: int, salt: int = 0) -> float:
        return rand_hash(self.seed, x, y, salt)

    # //1.- Structure queries.
    def is_carved(self, x: int, y: int) -> bool:
        return self.store.is_carved(x, y)

    def is_visited(self, x: int, y: int) -> bool:
        return self.store.is_visited(x, y)

    def is_edge_open_cached(self, x: int, y: int, direction: int) -> bool:
        return self.store.is_edge_open_cached(x, y, direction)

    def is_edge_open(self, x: int, y: int, direction: int) -> bool:
        """Return whether an edge is open, generating its region if needed.

        An edge on an already carved cell that was never set is a wall;
        generation is only ever attempted for uncarved cells.
        """

        if self.store.has_edge(x, y, direction):
            return self.store.is_edge_open_cached(x, y, direction)
        if self.store.is_carved(x, y):
            return False
        self.generate_region(x, y)
        return self.store.is_edge_open_cached(x, y, direction)

    def is_path_open(self, x: int, y: int, dx: int, dy: int) -> bool:
        direction = direction_between(dx, dy)
        if direction is None:
            return False
        return self.is_edge_open(x, y, direction)

    def generate_region(self, x: int, y: int) -> Optional[RegionReport]:
        report = self.generator.generate(x, y)
        if report is not None:
            self.last_report = report
            self.regions_generated += 1
        return report

    # //2.- Explorer passthroughs consumed by the host loop and renderer.
    def get_current_world_pos(self) -> Cell:
        return self.explorer.current_world_pos()

    def find_next_viewport_move(self) -> bool:
        return self.explorer.find_next_move()

    def update(self, delta_time: float) -> None:
        self.explorer.update(delta_time)
