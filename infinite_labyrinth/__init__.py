"""Infinite labyrinth package.

A deterministic, seed-driven labyrinth on an unbounded integer grid. Regions
are carved lazily the first time an edge inside them is queried, and an
explorer controller keeps walking towards cells it has not seen yet.
"""

from .hashing import rand_hash, map_range
from .directions import Direction, DIRECTIONS, opposite, step
from .store import StructureStore
from .params import ArtisticParameters
from .settings import LabyrinthSettings, load_settings
from .generator import RegionGenerator, RegionReport
from .postprocess import ensure_smart_breathing_holes, soft_extend_short_dead_ends
from .explorer import ExplorerController, ViewportState
from .logic import LabyrinthLogic
from .metrics import StructureMetrics, collect_structure_metrics, export_structure_metrics
from .snapshot import render_ascii, visited_mask, window_edges

__all__ = [
    "rand_hash",
    "map_range",
    "Direction",
    "DIRECTIONS",
    "opposite",
    "step",
    "StructureStore",
    "ArtisticParameters",
    "LabyrinthSettings",
    "load_settings",
    "RegionGenerator",
    "RegionReport",
    "ensure_smart_breathing_holes",
    "soft_extend_short_dead_ends",
    "ExplorerController",
    "ViewportState",
    "LabyrinthLogic",
    "StructureMetrics",
    "collect_structure_metrics",
    "export_structure_metrics",
    "render_ascii",
    "visited_mask",
    "window_edges",
]
