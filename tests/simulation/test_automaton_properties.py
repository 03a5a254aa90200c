"""Multi-step invariants of the automaton."""

from __future__ import annotations

import numpy as np
import pytest

from snowflake_ca.config.types import BoundaryPolicy
from snowflake_ca.domain.grid import CellStatus, Grid, hexagon_mask
from snowflake_ca.domain.initializer import initialize_grid
from snowflake_ca.domain.noise import ConstantNoise, NoiseField, PerlinNoise
from snowflake_ca.simulation.step import step

A, B, Y = 1.0, 0.4, 0.01
SIZE = 16
STEPS = 40


def _run(noise: NoiseField, policy: BoundaryPolicy) -> list[tuple[np.ndarray, np.ndarray]]:
    grid: Grid = initialize_grid(SIZE, B, noise, noise_amplitude=0.1, noise_scale=0.3)
    history = [(grid.coldness.copy(), grid.status.copy())]
    for _ in range(STEPS):
        step(A, B, Y, grid, boundary_policy=policy)
        history.append((grid.coldness.copy(), grid.status.copy()))
    return history


@pytest.fixture(params=list(BoundaryPolicy), ids=lambda p: p.value)
def history(request: pytest.FixtureRequest) -> list[tuple[np.ndarray, np.ndarray]]:
    return _run(ConstantNoise(), request.param)


def test_crystal_grows(history: list[tuple[np.ndarray, np.ndarray]]) -> None:
    inside = hexagon_mask(SIZE)
    first_frozen = ((history[0][0] >= 1.0) & inside).sum()
    last_frozen = ((history[-1][0] >= 1.0) & inside).sum()
    assert first_frozen == 1
    assert last_frozen > first_frozen


def test_frozen_cells_stay_frozen(history: list[tuple[np.ndarray, np.ndarray]]) -> None:
    inside = hexagon_mask(SIZE)
    for (prev, _), (curr, _) in zip(history, history[1:]):
        was_frozen = (prev >= 1.0) & inside
        assert (curr[was_frozen] >= 1.0).all()


def test_receptive_is_monotonic(history: list[tuple[np.ndarray, np.ndarray]]) -> None:
    for (_, prev), (_, curr) in zip(history, history[1:]):
        was_receptive = prev == CellStatus.RECEPTIVE
        assert (curr[was_receptive] == CellStatus.RECEPTIVE).all()


def test_out_of_bound_status_never_changes(history: list[tuple[np.ndarray, np.ndarray]]) -> None:
    outside = ~hexagon_mask(SIZE)
    for _, status in history:
        assert (status[outside] == CellStatus.OUT_OF_BOUND).all()
        assert not (status[~outside] == CellStatus.OUT_OF_BOUND).any()


def test_frozen_cells_only_inside_hexagon() -> None:
    history = _run(ConstantNoise(), BoundaryPolicy.DISCARD)
    outside = ~hexagon_mask(SIZE)
    for coldness, _ in history[1:]:
        assert not (coldness[outside] >= 1.0).any()


def test_frozen_cells_are_receptive(history: list[tuple[np.ndarray, np.ndarray]]) -> None:
    inside = hexagon_mask(SIZE)
    # status is promoted at the start of the step after a cell reaches the threshold
    for (prev, _), (_, status) in zip(history, history[1:]):
        was_frozen = (prev >= 1.0) & inside
        assert (status[was_frozen] == CellStatus.RECEPTIVE).all()


def test_growth_keeps_six_fold_symmetry() -> None:
    history = _run(ConstantNoise(), BoundaryPolicy.DISCARD)
    coldness = history[-1][0]
    # swapping the two axial coordinates is one of the hexagon's mirror symmetries
    assert np.allclose(coldness, coldness.T)


@pytest.mark.parametrize("policy", list(BoundaryPolicy), ids=lambda p: p.value)
def test_runs_are_bit_identical(policy: BoundaryPolicy) -> None:
    first = _run(PerlinNoise(seed=3), policy)
    second = _run(PerlinNoise(seed=3), policy)
    for (c1, s1), (c2, s2) in zip(first, second):
        assert np.array_equal(c1, c2)
        assert np.array_equal(s1, s2)
