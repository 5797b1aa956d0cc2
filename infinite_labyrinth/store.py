"""Sparse in-memory storage for carved cells, shared edges and visits."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set, Tuple

from .directions import Cell, opposite, step

EdgeKey = Tuple[int, int, int]


@dataclass
class StructureStore:
    """Cell and edge caches keyed by integer grid coordinates.

    An edge is stored twice, once from each endpoint, and both copies are
    always written together by :meth:`set_edge`. Cells that were never carved
    and edges that were never set read back as closed.
    """

    carved: Set[Cell] = field(default_factory=set)
    edges: Dict[EdgeKey, bool] = field(default_factory=dict)
    visited: Set[Cell] = field(default_factory=set)

    # //1.- Cell state queries and mutation.
    def is_carved(self, x: int, y: int) -> bool:
        return (x, y) in self.carved

    def carve(self, x: int, y: int) -> None:
        self.carved.add((x, y))

    # //2.- Edges are written in mirrored pairs so both endpoints agree.
    def set_edge(self, x: int, y: int, direction: int, is_open: bool) -> None:
        nx, ny = step(x, y, direction)
        self.edges[(x, y, direction)] = is_open
        self.edges[(nx, ny, opposite(direction))] = is_open

    def has_edge(self, x: int, y: int, direction: int) -> bool:
        return (x, y, direction) in self.edges

    def is_edge_open_cached(self, x: int, y: int, direction: int) -> bool:
        return self.edges.get((x, y, direction), False)

    # //3.- Derived per-cell helpers used by the scoring heuristics.
    def open_directions(self, x: int, y: int) -> List[int]:
        return [d for d in range(4) if self.edges.get((x, y, d), False)]

    def open_count(self, x: int, y: int) -> int:
        return sum(1 for d in range(4) if self.edges.get((x, y, d), False))

    def is_dead_end(self, x: int, y: int) -> bool:
        return self.is_carved(x, y) and self.open_count(x, y) == 1

    def carved_neighbours(self, x: int, y: int, exclude: Cell | None = None) -> List[int]:
        result = []
        for direction in range(4):
            neighbour = step(x, y, direction)
            if neighbour != exclude and neighbour in self.carved:
                result.append(direction)
        return result

    # //4.- Visited bookkeeping for the explorer.
    def mark_visited(self, x: int, y: int) -> None:
        self.visited.add((x, y))

    def is_visited(self, x: int, y: int) -> bool:
        return (x, y) in self.visited

    def iter_open_edges(self) -> Iterator[EdgeKey]:
        for key, is_open in self.edges.items():
            if is_open:
                yield key
