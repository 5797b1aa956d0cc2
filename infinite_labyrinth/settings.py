"""Configuration loading for labyrinth generation and exploration."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = "LABYRINTH"


# //1.- Immutable bundle of every tunable the core and demo rely on.
@dataclass(frozen=True)
class LabyrinthSettings:
    """Resolved settings for one labyrinth instance."""

    seed: int = 0
    window_size: int = 31
    cell_size: int = 20
    explorer_speed: float = 12.0
    search_limit: int = 500
    deterministic_fallback: bool = False

    # //2.- Validate eagerly so misconfiguration surfaces at construction time.
    def __post_init__(self) -> None:
        if self.window_size <= 0 or self.window_size % 2 == 0:
            raise ValueError("window_size must be a positive odd number")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive")
        if self.explorer_speed <= 0:
            raise ValueError("explorer_speed must be positive")
        if self.search_limit <= 0:
            raise ValueError("search_limit must be positive")

    @property
    def max_iterations(self) -> int:
        return self.window_size * self.window_size * 2

    # //3.- Build settings from a loosely typed mapping, ignoring unknown keys.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]] = None) -> "LabyrinthSettings":
        if not payload:
            return cls()
        return replace(cls(), **_coerce(payload))

    # //4.- Allow environment overrides such as ``LABYRINTH_SEED=7``.
    @classmethod
    def from_environment(
        cls,
        prefix: str = ENV_PREFIX,
        env: Optional[Mapping[str, str]] = None,
    ) -> "LabyrinthSettings":
        source = env if env is not None else os.environ
        mapping: Dict[str, Any] = {}
        for item in fields(cls):
            raw = source.get(f"{prefix}_{item.name.upper()}")
            if raw is not None:
                mapping[item.name] = raw
        return cls.from_mapping(mapping)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off", ""}:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


def _coerce(payload: Mapping[str, Any]) -> Dict[str, Any]:
    converters = {
        "seed": int,
        "window_size": int,
        "cell_size": int,
        "explorer_speed": float,
        "search_limit": int,
        "deterministic_fallback": _parse_bool,
    }
    result: Dict[str, Any] = {}
    for key, convert in converters.items():
        if key not in payload:
            continue
        try:
            result[key] = convert(payload[key])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid value for {key}: {payload[key]!r}") from exc
    return result


def _read_json_config(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"Configuration file '{path}' must contain a JSON object")
    return payload


# //5.- Canonical accessor: explicit mapping, then JSON file, then environment.
def load_settings(
    mapping: Optional[Mapping[str, Any]] = None,
    *,
    path: Optional[str] = None,
    env_prefix: str = ENV_PREFIX,
) -> LabyrinthSettings:
    if mapping is not None:
        return LabyrinthSettings.from_mapping(mapping)
    if path is not None:
        return LabyrinthSettings.from_mapping(_read_json_config(path))
    return LabyrinthSettings.from_environment(prefix=env_prefix)
