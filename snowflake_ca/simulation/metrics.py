"""Per-step scalar summaries of the grid."""

from __future__ import annotations

import numpy as np

from snowflake_ca.domain.grid import CellStatus, Grid


def crystal_radius(frozen: np.ndarray) -> int:
    """Largest hexagonal distance from the centre to any frozen cell (-1 if none)."""
    if not frozen.any():
        return -1
    half = frozen.shape[0] // 2
    ii, jj = np.nonzero(frozen)
    x = ii - half
    z = jj - half
    return int(np.max(np.maximum(np.maximum(np.abs(x), np.abs(z)), np.abs(x + z))))


def compute_step_metrics(grid: Grid) -> dict[str, float | int]:
    """Summaries of the current grid state."""
    frozen = grid.frozen_mask()
    in_bounds = grid.status != CellStatus.OUT_OF_BOUND
    return {
        "frozen_cells": int(np.count_nonzero(frozen)),
        "receptive_cells": int(np.count_nonzero(grid.status == CellStatus.RECEPTIVE)),
        "total_coldness": float(grid.coldness[in_bounds].sum()),
        "max_coldness": float(grid.coldness[in_bounds].max()),
        "crystal_radius": crystal_radius(frozen),
    }
