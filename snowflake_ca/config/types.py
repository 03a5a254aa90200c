"""Configuration dataclasses for simulation and rendering runs.

Parameters keep the short names used on the command line in their help
text (A, B, Y, PP, PM, L) but are spelled out as attributes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from snowflake_ca.config.constants import (
    GRID_SIZE,
    MIN_GRID_SIZE,
    NOISE_SEED,
    OUTPUT_DIR,
    PROGRESS_INTERVAL,
    SHEAR_ANGLE_DEG,
)

__all__ = [
    "BoundaryPolicy",
    "RenderConfig",
    "SimulationConfig",
]


class BoundaryPolicy(Enum):
    """Treatment of diffusion contributions aimed at out-of-bound cells."""

    DISCARD = "discard"
    RETAIN = "retain"


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")


@dataclass(frozen=True)
class SimulationConfig:
    """Physical parameters and grid extent for one snowflake run."""

    diffusion: float
    """A: share of a non-receptive cell's coldness diffused to neighbours."""
    background: float
    """B: background coldness added to every cell at initialization."""
    accretion: float
    """Y: coldness added to each receptive cell per step."""
    noise_scale: float
    """PP: multiplier applied to cell indices before sampling noise."""
    noise_amplitude: float
    """PM: multiplier applied to noise samples."""
    steps: int
    """L: number of automaton steps."""
    size: int = GRID_SIZE
    boundary_policy: BoundaryPolicy = BoundaryPolicy.DISCARD
    noise_seed: int = NOISE_SEED
    progress_interval: int = PROGRESS_INTERVAL

    def __post_init__(self) -> None:
        _require_finite(
            diffusion=self.diffusion,
            background=self.background,
            accretion=self.accretion,
            noise_scale=self.noise_scale,
            noise_amplitude=self.noise_amplitude,
        )
        if self.steps < 0:
            raise ValueError("steps must be >= 0")
        if self.size < MIN_GRID_SIZE:
            raise ValueError(f"size must be >= {MIN_GRID_SIZE}")
        if self.size % 2 != 0:
            raise ValueError("size must be even")
        if not isinstance(self.boundary_policy, BoundaryPolicy):
            raise ValueError(f"unknown boundary_policy: {self.boundary_policy!r}")
        if self.progress_interval < 1:
            raise ValueError("progress_interval must be >= 1")


@dataclass(frozen=True)
class RenderConfig:
    """Image output settings."""

    shear_angle: float = SHEAR_ANGLE_DEG
    output_dir: Path = Path(OUTPUT_DIR)

    def __post_init__(self) -> None:
        _require_finite(shear_angle=self.shear_angle)
        if not -90.0 < self.shear_angle < 90.0:
            raise ValueError("shear_angle must be in (-90, 90) degrees")
