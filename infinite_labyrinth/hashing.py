"""Deterministic coordinate hashing used for every random decision."""
from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_ORIGIN_SALT = 10101


def _u32(value: int) -> int:
    return value & _MASK32


def _imul(a: int, b: int) -> int:
    return _u32(_u32(a) * _u32(b))


def rand_hash(seed: int, x: int, y: int, salt: int = 0) -> float:
    """Map ``(seed, x, y, salt)`` to a float in ``[0, 1)``.

    The mix wraps to 32 bits after every step so negative coordinates land
    on the same values a two's complement implementation would produce.
    """

    if x == 0 and y == 0 and salt == 0:
        x, y, salt = seed, seed, _ORIGIN_SALT

    h = _u32(seed) ^ _u32(x * 73856093) ^ _u32(y * 19349663) ^ _u32(salt * 83492791)
    h = _imul(h ^ (h >> 16), 2246822507)
    h = _imul(h ^ (h >> 13), 3266489917)
    return (h ^ (h >> 16)) / 4294967296.0


def map_range(value: float, lower: float, upper: float) -> float:
    return lower + value * (upper - lower)
