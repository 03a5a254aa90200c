"""Domain layer: lattice grid, noise sources, and initial-state construction."""

from snowflake_ca.domain.grid import (
    NEIGHBOR_OFFSETS,
    CellStatus,
    Grid,
    hexagon_mask,
    is_in_hexagon,
)
from snowflake_ca.domain.initializer import (
    initialize_from_config,
    initialize_grid,
    sample_noise_field,
)
from snowflake_ca.domain.noise import ConstantNoise, NoiseField, PerlinNoise, pointwise

__all__ = [
    "CellStatus",
    "ConstantNoise",
    "Grid",
    "NEIGHBOR_OFFSETS",
    "NoiseField",
    "PerlinNoise",
    "hexagon_mask",
    "initialize_from_config",
    "initialize_grid",
    "is_in_hexagon",
    "pointwise",
    "sample_noise_field",
]
