"""Seed-derived artistic weights that shape the generated labyrinth."""
from __future__ import annotations

from dataclasses import dataclass

from .hashing import map_range, rand_hash


@dataclass(frozen=True)
class ArtisticParameters:
    """Immutable scoring weights computed once per seed.

    ``wall_hue``, ``visited_alpha`` and ``explorer_hue`` are fixed hints for
    renderers and never influence generation.
    """

    tunnel_preference: float
    sparsity_penalty: float
    turn_preference_boost: float
    straight_preference_boost: float
    diversity_penalty: float
    wall_hue: int = 210
    visited_alpha: float = 0.2
    explorer_hue: int = 15

    @classmethod
    def from_seed(cls, seed: int) -> "ArtisticParameters":
        return cls(
            tunnel_preference=map_range(rand_hash(seed, 0, 0, 1), 0.4, 0.8),
            sparsity_penalty=map_range(rand_hash(seed, 0, 0, 2), 0.05, 0.2),
            turn_preference_boost=map_range(rand_hash(seed, 0, 0, 6), 1.8, 2.8),
            straight_preference_boost=map_range(rand_hash(seed, 0, 0, 7), 1.2, 1.6),
            diversity_penalty=map_range(rand_hash(seed, 0, 0, 8), 0.1, 0.4),
        )
