"""Structure statistics for inspecting generated labyrinths."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass

from .store import StructureStore


# //1.- Counts describing the shape of everything carved so far.
@dataclass(frozen=True)
class StructureMetrics:
    carved_cells: int
    open_edges: int
    dead_ends: int
    corridor_cells: int
    junctions: int
    isolated_cells: int
    visited_cells: int

    @property
    def dead_end_ratio(self) -> float:
        if self.carved_cells == 0:
            return 0.0
        return self.dead_ends / self.carved_cells


# //2.- Classify every carved cell by its number of open edges.
def collect_structure_metrics(store: StructureStore) -> StructureMetrics:
    dead_ends = corridors = junctions = isolated = 0
    for x, y in store.carved:
        count = store.open_count(x, y)
        if count == 0:
            isolated += 1
        elif count == 1:
            dead_ends += 1
        elif count == 2:
            corridors += 1
        else:
            junctions += 1
    # Each open edge is stored once per endpoint.
    open_edges = sum(1 for _ in store.iter_open_edges()) // 2
    return StructureMetrics(
        carved_cells=len(store.carved),
        open_edges=open_edges,
        dead_ends=dead_ends,
        corridor_cells=corridors,
        junctions=junctions,
        isolated_cells=isolated,
        visited_cells=len(store.visited),
    )


# //3.- Export metrics to JSON for offline comparison across seeds.
def export_structure_metrics(metrics: StructureMetrics, *, filepath: str, seed: int | None = None) -> None:
    payload = asdict(metrics)
    payload["dead_end_ratio"] = metrics.dead_end_ratio
    if seed is not None:
        payload["seed"] = seed
    with open(filepath, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
