"""Configuration layer: constants and typed config dataclasses."""

from snowflake_ca.config.constants import (
    BORDER_MARGIN,
    FLUSH_THRESHOLD,
    FREEZE_THRESHOLD,
    GRID_SIZE,
    MIN_GRID_SIZE,
    NOISE_SEED,
    OUTPUT_DIR,
    PROGRESS_INTERVAL,
    SHEAR_ANGLE_DEG,
)
from snowflake_ca.config.types import BoundaryPolicy, RenderConfig, SimulationConfig

__all__ = [
    "BORDER_MARGIN",
    "BoundaryPolicy",
    "FLUSH_THRESHOLD",
    "FREEZE_THRESHOLD",
    "GRID_SIZE",
    "MIN_GRID_SIZE",
    "NOISE_SEED",
    "OUTPUT_DIR",
    "PROGRESS_INTERVAL",
    "RenderConfig",
    "SHEAR_ANGLE_DEG",
    "SimulationConfig",
]
