"""Entry point for ``python -m honeyfield``.

Loads the default YAML config, builds a simulation engine, and either
opens a Pygame window to watch the bees forage or, with ``--headless``,
runs a fixed number of days and prints the monitors.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from honeyfield.simulation.config import SimulationConfig
from honeyfield.simulation.engine import SimulationEngine
from honeyfield.simulation.metrics import Observables

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def format_observables(obs: Observables) -> str:
    """One-line summary of a tick's monitors."""
    return (
        f"day={obs.tick:<5d} bees={obs.bees:<5d} "
        f"resources={obs.hive_resources:7.1f} "
        f"pollinated={obs.pollination_success:<4d} "
        f"yield={obs.crop_yield:<4d} "
        f"temp={obs.temperature:6.2f} "
        f"nectar={obs.mean_flower_nectar:5.2f}"
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, create engine, launch renderer or headless run."""
    parser = argparse.ArgumentParser(
        prog="honeyfield",
        description="Honeyfield - honeybee foraging and pollination simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--headless",
        type=int,
        metavar="DAYS",
        default=None,
        help="Run DAYS ticks without a window and print the monitors",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=16,
        help="Pixels per unit of field distance (default: 16)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=5.0,
        help="Simulation ticks per second (default: 5)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = args.config
    if config_path is None and _DEFAULT_CONFIG.exists():
        config_path = _DEFAULT_CONFIG
    config = (
        SimulationConfig.from_yaml(config_path)
        if config_path is not None
        else SimulationConfig()
    )
    engine = SimulationEngine(config=config)

    if args.headless is not None:
        print(format_observables(engine.observables))
        for _ in range(args.headless):
            print(format_observables(engine.step()))
        return

    from honeyfield.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(
        engine=engine,
        cell_size=args.cell_size,
        ticks_per_second=args.speed,
    )
    renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
