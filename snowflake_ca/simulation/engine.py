"""Run loop: initialize, step ``L`` times, optionally log per-step metrics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pyarrow.parquet as pq

from snowflake_ca.config.constants import FLUSH_THRESHOLD
from snowflake_ca.config.types import SimulationConfig
from snowflake_ca.domain.grid import Grid
from snowflake_ca.domain.initializer import initialize_from_config
from snowflake_ca.domain.noise import NoiseField
from snowflake_ca.io.schemas import STEP_METRIC_NAMES
from snowflake_ca.simulation.metrics import compute_step_metrics
from snowflake_ca.simulation.persistence import flush_metric_columns, new_metric_columns
from snowflake_ca.simulation.step import step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """Final grid plus a few summaries of the finished run."""

    grid: Grid
    steps_run: int
    frozen_cells: int
    crystal_radius: int
    metrics_log_path: Path | None


def describe_settings(config: SimulationConfig) -> str:
    return (
        f"settings:\t A={config.diffusion:.4f} B={config.background:.4f} "
        f"Y={config.accretion:.4f} PP={config.noise_scale:.4f} "
        f"PM={config.noise_amplitude:.4f} I={config.steps} size={config.size}"
    )


def run_steps(
    grid: Grid,
    config: SimulationConfig,
    metrics_log_path: Path | None = None,
) -> Grid:
    """Apply ``config.steps`` automaton steps to an existing grid."""
    metric_writer: pq.ParquetWriter | None = None
    metric_columns = new_metric_columns() if metrics_log_path is not None else None
    try:
        for iteration in range(1, config.steps + 1):
            step(
                config.diffusion,
                config.background,
                config.accretion,
                grid,
                boundary_policy=config.boundary_policy,
            )
            if metric_columns is not None:
                metric_columns["step"].append(iteration)
                metrics = compute_step_metrics(grid)
                for name in STEP_METRIC_NAMES:
                    metric_columns[name].append(metrics[name])
                if len(metric_columns["step"]) >= FLUSH_THRESHOLD:
                    metric_writer = flush_metric_columns(
                        metric_columns, metrics_log_path, metric_writer
                    )
            if iteration % config.progress_interval == 0 or iteration == config.steps:
                logger.info("simulation:\t %d / %d", iteration, config.steps)
            else:
                logger.debug("simulation:\t %d / %d", iteration, config.steps)
        if metric_columns is not None:
            metric_writer = flush_metric_columns(metric_columns, metrics_log_path, metric_writer)
    finally:
        if metric_writer is not None:
            metric_writer.close()
    return grid


def run_simulation(
    config: SimulationConfig,
    noise: NoiseField | None = None,
    metrics_log_path: Path | None = None,
) -> SimulationResult:
    """Initialize a grid from *config* and run it for ``config.steps`` steps.

    When *metrics_log_path* is given, one row of :data:`STEP_METRICS_SCHEMA`
    per step is written there. Nothing is written for a zero-step run.
    """
    logger.info(describe_settings(config))
    if metrics_log_path is not None:
        metrics_log_path = Path(metrics_log_path)
        metrics_log_path.parent.mkdir(parents=True, exist_ok=True)

    grid = initialize_from_config(config, noise=noise)
    run_steps(grid, config, metrics_log_path=metrics_log_path)

    final = compute_step_metrics(grid)
    written = metrics_log_path if metrics_log_path is not None and config.steps > 0 else None
    return SimulationResult(
        grid=grid,
        steps_run=config.steps,
        frozen_cells=int(final["frozen_cells"]),
        crystal_radius=int(final["crystal_radius"]),
        metrics_log_path=written,
    )
