"""Command-line entrypoint: ``snowflake A B Y PP PM L``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from snowflake_ca.config.constants import GRID_SIZE, NOISE_SEED, OUTPUT_DIR, PROGRESS_INTERVAL
from snowflake_ca.config.types import BoundaryPolicy, RenderConfig, SimulationConfig
from snowflake_ca.io.paths import snowflake_image_path
from snowflake_ca.simulation.engine import run_simulation
from snowflake_ca.viz.render import save_snowflake_png

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snowflake",
        description="Grow a snowflake on a hexagonal lattice and save it as PNG",
    )
    parser.add_argument("diffusion", metavar="A", type=float, help="diffusion coefficient")
    parser.add_argument("background", metavar="B", type=float, help="background coldness")
    parser.add_argument("accretion", metavar="Y", type=float, help="per-step accretion")
    parser.add_argument("noise_scale", metavar="PP", type=float, help="noise coordinate scale")
    parser.add_argument("noise_amplitude", metavar="PM", type=float, help="noise amplitude")
    parser.add_argument("steps", metavar="L", type=int, help="number of iterations")
    parser.add_argument("--size", type=int, default=GRID_SIZE)
    parser.add_argument("--output-dir", type=Path, default=Path(OUTPUT_DIR))
    parser.add_argument(
        "--boundary-policy",
        choices=[policy.value for policy in BoundaryPolicy],
        default=BoundaryPolicy.DISCARD.value,
        help="what happens to diffusion aimed outside the hexagon",
    )
    parser.add_argument("--noise-seed", type=int, default=NOISE_SEED)
    parser.add_argument("--progress-interval", type=int, default=PROGRESS_INTERVAL)
    parser.add_argument(
        "--metrics-log",
        type=Path,
        default=None,
        help="write per-step metrics to this Parquet file",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> tuple[SimulationConfig, RenderConfig]:
    simulation = SimulationConfig(
        diffusion=args.diffusion,
        background=args.background,
        accretion=args.accretion,
        noise_scale=args.noise_scale,
        noise_amplitude=args.noise_amplitude,
        steps=args.steps,
        size=args.size,
        boundary_policy=BoundaryPolicy(args.boundary_policy),
        noise_seed=args.noise_seed,
        progress_interval=args.progress_interval,
    )
    return simulation, RenderConfig(output_dir=args.output_dir)


def main(argv: list[str] | None = None) -> Path:
    """Run one simulation and return the path of the saved image."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        simulation_config, render_config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    result = run_simulation(simulation_config, metrics_log_path=args.metrics_log)
    output_path = save_snowflake_png(
        result.grid.read_coldness(),
        snowflake_image_path(render_config.output_dir, simulation_config),
        shear_angle=render_config.shear_angle,
    )
    logger.info("saved result:\t %s", output_path)
    return output_path


if __name__ == "__main__":
    main()
