"""Build the step-0 grid: noisy background, static hexagon mask, centre seed."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from snowflake_ca.config.constants import CENTER_SEED_COLDNESS, MIN_GRID_SIZE
from snowflake_ca.domain.grid import CellStatus, Grid, hexagon_mask
from snowflake_ca.domain.noise import NoiseField, PerlinNoise

if TYPE_CHECKING:
    from snowflake_ca.config.types import SimulationConfig


def sample_noise_field(noise: NoiseField, size: int, noise_scale: float) -> np.ndarray:
    """Sample ``noise(i * scale, j * scale)`` for every index of a ``size x size`` grid."""
    coords = np.arange(size, dtype=np.float64) * noise_scale
    xs, ys = np.meshgrid(coords, coords, indexing="ij")
    samples = np.asarray(noise(xs, ys), dtype=np.float64)
    return np.broadcast_to(samples, (size, size)).copy()


def initialize_grid(
    size: int,
    background: float,
    noise: NoiseField,
    noise_amplitude: float,
    noise_scale: float,
) -> Grid:
    """Return a grid with ``coldness = noise * amplitude + background`` and a frozen centre.

    Cells already at or above the freezing threshold (other than the centre)
    are left as they are; the first mask pass makes their neighbours
    receptive.

    Raises :exc:`ValueError` when the resulting field contains NaN or
    infinite values, since NaN never compares as frozen.
    """
    if size < MIN_GRID_SIZE or size % 2 != 0:
        raise ValueError(f"size must be even and >= {MIN_GRID_SIZE}, got {size}")

    grid = Grid.create(size)
    coldness = sample_noise_field(noise, size, noise_scale) * noise_amplitude + background
    if not np.isfinite(coldness).all():
        bad = int(np.count_nonzero(~np.isfinite(coldness)))
        raise ValueError(f"initial coldness has {bad} non-finite cells")
    grid.coldness = coldness
    grid.status[~hexagon_mask(size)] = CellStatus.OUT_OF_BOUND
    grid.set_coldness(grid.center, grid.center, CENTER_SEED_COLDNESS)
    return grid


def initialize_from_config(config: SimulationConfig, noise: NoiseField | None = None) -> Grid:
    """Initialize using a config; defaults to Perlin noise seeded by ``config.noise_seed``."""
    if noise is None:
        noise = PerlinNoise(seed=config.noise_seed)
    return initialize_grid(
        size=config.size,
        background=config.background,
        noise=noise,
        noise_amplitude=config.noise_amplitude,
        noise_scale=config.noise_scale,
    )
