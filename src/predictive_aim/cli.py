"""Command line interface running a scripted, headless predictive aim session."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from .arena import Arena, ArenaFrame, FireTrigger, TriggerButton
from .config import SimulationConfig, load_config
from .exporters import CallbackFrameExporter, frame_to_dict
from .geometry import Vector2

LOGGER = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fire projectiles and watch the pursuer intercept them.")
    parser.add_argument("config", type=Path, nargs="?", default=None, help="Optional JSON configuration file")
    parser.add_argument(
        "--fire",
        nargs=2,
        type=float,
        action="append",
        default=[],
        metavar=("X", "Y"),
        help="Fire from the shooter towards this point (repeatable)",
    )
    parser.add_argument(
        "--move",
        nargs=2,
        type=float,
        default=None,
        metavar=("X", "Y"),
        help="Reposition the shooter before firing",
    )
    parser.add_argument("--ticks", type=int, default=60, help="Number of simulation ticks to run")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="Seconds per tick")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging output")
    parser.add_argument("--dump", action="store_true", help="Print the final frame as JSON")
    args = parser.parse_args(argv)
    if args.ticks < 0:
        parser.error("--ticks must be non-negative")
    if args.dt < 0:
        parser.error("--dt must be non-negative")
    try:
        args.settings = load_config(args.config) if args.config is not None else SimulationConfig()
    except (OSError, ValueError) as exc:
        parser.error(f"invalid configuration {args.config}: {exc}")
    return args


def _log_frame(frame: ArenaFrame) -> None:
    LOGGER.debug("t=%.3fs active=%s", frame.time, len(frame.projectiles))


def build_triggers(args: argparse.Namespace) -> List[FireTrigger]:
    triggers: List[FireTrigger] = []
    if args.move is not None:
        triggers.append(FireTrigger(Vector2(*args.move), TriggerButton.SECONDARY))
    triggers.extend(FireTrigger(Vector2(x, y)) for x, y in args.fire)
    return triggers


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    arena = Arena(args.settings, exporters=[CallbackFrameExporter(_log_frame)])
    fired = 0
    for trigger in build_triggers(args):
        spawned = arena.handle_trigger(trigger)
        fired += len(spawned)

    frame = arena.frame()
    for _ in range(args.ticks):
        frame = arena.tick(args.dt)
    arena.close()

    if args.dump:
        print(json.dumps(frame_to_dict(frame), indent=2))

    LOGGER.info(
        "Spawned %s projectiles, %s still in flight after %.2fs",
        fired,
        len(frame.projectiles),
        frame.time,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
