"""Command line harness that lets the explorer wander for a while."""
from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from .logic import LabyrinthLogic
from .metrics import collect_structure_metrics, export_structure_metrics
from .settings import load_settings
from .snapshot import render_ascii

LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Wander an endless, self-generating labyrinth")
    parser.add_argument("--seed", type=int, default=None, help="Labyrinth seed (overrides configuration)")
    parser.add_argument("--ticks", type=int, default=600, help="Number of update ticks to simulate")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="Seconds per tick")
    parser.add_argument("--window", type=int, default=None, help="Generation window size (odd)")
    parser.add_argument("--view", type=int, default=21, help="Size of the printed window (odd)")
    parser.add_argument("--config", default=None, help="Optional JSON configuration file")
    parser.add_argument("--metrics", default=None, help="Write structure metrics JSON to this path")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def run(argv: Optional[Sequence[str]] = None) -> LabyrinthLogic:
    args = create_parser().parse_args(argv)
    if args.ticks < 0:
        raise ValueError("--ticks must not be negative")

    settings = load_settings(path=args.config)
    if args.seed is not None:
        settings = replace(settings, seed=args.seed)
    if args.window is not None:
        settings = replace(settings, window_size=args.window)

    logic = LabyrinthLogic(settings=settings)
    for _ in range(args.ticks):
        logic.update(args.dt)

    metrics = collect_structure_metrics(logic.store)
    LOGGER.info(
        "Seed %d after %d ticks: explorer at %s, %d regions, %d carved, %d visited",
        logic.seed,
        args.ticks,
        logic.get_current_world_pos(),
        logic.regions_generated,
        metrics.carved_cells,
        metrics.visited_cells,
    )
    print(render_ascii(logic, size=args.view))
    if args.metrics:
        export_structure_metrics(metrics, filepath=args.metrics, seed=logic.seed)
        LOGGER.info("Metrics written to %s", args.metrics)
    return logic


def main(argv: Optional[List[str]] = None) -> int:
    args, _ = create_parser().parse_known_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="[%(asctime)s] %(levelname)s %(message)s")
    run(argv)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via ``python -m`` execution
    raise SystemExit(main())
