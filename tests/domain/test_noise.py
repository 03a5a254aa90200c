"""Tests for snowflake_ca.domain.noise module."""

from __future__ import annotations

import numpy as np
import pytest

from snowflake_ca.domain.noise import ConstantNoise, PerlinNoise, pointwise


def _sample_points() -> tuple[np.ndarray, np.ndarray]:
    coords = np.linspace(0.0, 12.7, 64)
    return np.meshgrid(coords, coords, indexing="ij")


class TestConstantNoise:
    def test_fills_broadcast_shape(self) -> None:
        xs, ys = _sample_points()
        values = ConstantNoise(0.3)(xs, ys)
        assert values.shape == xs.shape
        assert (values == 0.3).all()

    def test_default_is_zero(self) -> None:
        assert ConstantNoise()(np.zeros(3), np.zeros(3)).tolist() == [0.0, 0.0, 0.0]


class TestPerlinNoise:
    def test_same_seed_same_field(self) -> None:
        xs, ys = _sample_points()
        assert np.array_equal(PerlinNoise(seed=7)(xs, ys), PerlinNoise(seed=7)(xs, ys))

    def test_different_seed_different_field(self) -> None:
        xs, ys = _sample_points()
        assert not np.array_equal(PerlinNoise(seed=1)(xs, ys), PerlinNoise(seed=2)(xs, ys))

    def test_zero_on_integer_lattice(self) -> None:
        coords = np.arange(10, dtype=np.float64)
        xs, ys = np.meshgrid(coords, coords, indexing="ij")
        assert np.allclose(PerlinNoise()(xs, ys), 0.0)

    def test_single_octave_is_bounded(self) -> None:
        xs, ys = _sample_points()
        values = PerlinNoise()(xs, ys)
        assert np.abs(values).max() <= 1.0 + 1e-12
        assert values.std() > 0.0

    def test_accepts_scalars(self) -> None:
        value = PerlinNoise()(0.5, 0.25)
        assert np.shape(value) == ()
        assert np.isfinite(value)

    def test_more_octaves_change_field(self) -> None:
        xs, ys = _sample_points()
        assert not np.array_equal(PerlinNoise(octaves=1)(xs, ys), PerlinNoise(octaves=3)(xs, ys))

    def test_rejects_zero_octaves(self) -> None:
        with pytest.raises(ValueError, match="octaves"):
            PerlinNoise(octaves=0)


def test_pointwise_wraps_scalar_function() -> None:
    field = pointwise(lambda x, y: x - 2.0 * y)
    xs = np.array([[1.0, 2.0], [3.0, 4.0]])
    ys = np.array([[0.5, 0.5], [1.0, 0.0]])
    assert field(xs, ys).tolist() == [[0.0, 1.0], [1.0, 4.0]]
