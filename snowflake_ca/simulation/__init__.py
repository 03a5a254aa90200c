"""Simulation engine: automaton step, run loop, per-step metrics and Parquet persistence."""

from snowflake_ca.simulation.engine import (
    SimulationResult,
    describe_settings,
    run_simulation,
    run_steps,
)
from snowflake_ca.simulation.metrics import compute_step_metrics, crystal_radius
from snowflake_ca.simulation.persistence import flush_metric_columns
from snowflake_ca.simulation.step import step, update_coldness, update_mask

__all__ = [
    "SimulationResult",
    "compute_step_metrics",
    "crystal_radius",
    "describe_settings",
    "flush_metric_columns",
    "run_simulation",
    "run_steps",
    "step",
    "update_coldness",
    "update_mask",
]
