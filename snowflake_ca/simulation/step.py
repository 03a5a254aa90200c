"""Automaton update rule: mask promotion followed by diffusion/accretion.

Both phases cover the entire grid before the next step starts. Phase 2
reads only the field as it stood after phase 1 and writes a fresh array,
so every cell donates and receives within the same step without any
dependence on scan order.
"""

from __future__ import annotations

import math

import numpy as np

from snowflake_ca.config.types import BoundaryPolicy
from snowflake_ca.domain.grid import NEIGHBOR_OFFSETS, CellStatus, Grid


def _shifted(size: int, di: int, dj: int) -> tuple[tuple[slice, slice], tuple[slice, slice]]:
    """Return ``(dst, src)`` slices such that ``dst`` cell = ``src`` cell + ``(di, dj)``."""

    def axis(d: int) -> tuple[slice, slice]:
        if d >= 0:
            return slice(d, size), slice(0, size - d)
        return slice(0, size + d), slice(-d, size)

    dst_i, src_i = axis(di)
    dst_j, src_j = axis(dj)
    return (dst_i, dst_j), (src_i, src_j)


def _require_finite_rates(a: float, y: float) -> None:
    for name, value in (("a", a), ("y", y)):
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")


def update_mask(grid: Grid) -> np.ndarray:
    """Promote every frozen cell and its six neighbours to receptive.

    Promotion never demotes and never touches out-of-bound cells. Returns the
    frozen mask the promotion was computed from.
    """
    frozen = grid.frozen_mask()
    promote = frozen.copy()
    for di, dj in NEIGHBOR_OFFSETS:
        dst, src = _shifted(grid.size, di, dj)
        promote[dst] |= frozen[src]
    promote &= grid.status != CellStatus.OUT_OF_BOUND
    grid.status[promote] = CellStatus.RECEPTIVE
    return frozen


def update_coldness(
    grid: Grid,
    a: float,
    y: float,
    boundary_policy: BoundaryPolicy = BoundaryPolicy.DISCARD,
) -> np.ndarray:
    """Replace ``grid.coldness`` with the next field and return it.

    Non-receptive cells keep ``v0 / 2`` and hand ``a * v0 / 12`` to each
    neighbour; receptive cells gain ``y`` and keep everything they had.
    Out-of-bound cells never donate. Under ``DISCARD`` they are zeroed after
    the pass; under ``RETAIN`` they keep whatever was handed to them during
    this step.
    """
    _require_finite_rates(a, y)
    old = grid.coldness
    status = grid.status
    donor = np.where(status == CellStatus.NON_RECEPTIVE, old, 0.0)
    new = np.where(status == CellStatus.RECEPTIVE, old + y, 0.0)
    new += donor / 2.0
    share = a * donor / 12.0
    for di, dj in NEIGHBOR_OFFSETS:
        dst, src = _shifted(grid.size, di, dj)
        new[dst] += share[src]
    if boundary_policy == BoundaryPolicy.DISCARD:
        new[status == CellStatus.OUT_OF_BOUND] = 0.0
    grid.coldness = new
    return new


def step(
    a: float,
    b: float,
    y: float,
    grid: Grid,
    boundary_policy: BoundaryPolicy = BoundaryPolicy.DISCARD,
) -> Grid:
    """Advance ``grid`` by one step in place and return it.

    ``b`` (background level) only shapes the initial field; it is accepted
    so callers can pass the full parameter set and plays no part here.
    """
    del b
    _require_finite_rates(a, y)
    update_mask(grid)
    update_coldness(grid, a=a, y=y, boundary_policy=boundary_policy)
    return grid
