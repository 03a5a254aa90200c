"""Scalar noise fields used to seed the initial coldness.

A noise field is any callable ``noise(x, y)`` accepting broadcastable
float arrays and returning an array of the broadcast shape. Scalar-only
functions can be adapted with :func:`pointwise`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

import numpy as np

from snowflake_ca.config.constants import (
    NOISE_SEED,
    PERLIN_ALPHA,
    PERLIN_BETA,
    PERLIN_OCTAVES,
)

_GRADIENTS = np.array(
    [[1, 1], [-1, 1], [1, -1], [-1, -1], [1, 0], [-1, 0], [0, 1], [0, -1]],
    dtype=np.float64,
)


class NoiseField(Protocol):
    def __call__(self, x: np.ndarray, y: np.ndarray) -> np.ndarray: ...


class ConstantNoise:
    """Noise field returning ``value`` everywhere; useful as a deterministic test double."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = float(value)

    def __call__(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        shape = np.broadcast_shapes(np.shape(x), np.shape(y))
        return np.full(shape, self.value, dtype=np.float64)


class PerlinNoise:
    """Seeded 2-D gradient noise summed over ``octaves``.

    Octave ``n`` is sampled at ``beta**n`` times the base frequency and
    divided by ``alpha**n``. Samples at integer lattice points are zero and
    a single octave stays within [-1, 1].
    """

    def __init__(
        self,
        alpha: float = PERLIN_ALPHA,
        beta: float = PERLIN_BETA,
        octaves: int = PERLIN_OCTAVES,
        seed: int = NOISE_SEED,
    ) -> None:
        if octaves < 1:
            raise ValueError("octaves must be >= 1")
        if alpha == 0.0:
            raise ValueError("alpha must be non-zero")
        self.alpha = alpha
        self.beta = beta
        self.octaves = octaves
        self.seed = seed
        perm = np.random.default_rng(seed).permutation(256)
        self._perm = np.concatenate([perm, perm])

    def _hash(self, xi: np.ndarray, yi: np.ndarray) -> np.ndarray:
        return self._perm[self._perm[xi] + yi]

    def _single(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        x0 = np.floor(x)
        y0 = np.floor(y)
        xf = x - x0
        yf = y - y0
        xi = x0.astype(np.int64) & 255
        yi = y0.astype(np.int64) & 255

        def corner(h: np.ndarray, dx: np.ndarray, dy: np.ndarray) -> np.ndarray:
            g = _GRADIENTS[h % len(_GRADIENTS)]
            return g[..., 0] * dx + g[..., 1] * dy

        n00 = corner(self._hash(xi, yi), xf, yf)
        n10 = corner(self._hash(xi + 1, yi), xf - 1.0, yf)
        n01 = corner(self._hash(xi, yi + 1), xf, yf - 1.0)
        n11 = corner(self._hash(xi + 1, yi + 1), xf - 1.0, yf - 1.0)

        u = _fade(xf)
        v = _fade(yf)
        return _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v)

    def __call__(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(y, dtype=np.float64))
        total = np.zeros(x.shape, dtype=np.float64)
        scale = 1.0
        for _ in range(self.octaves):
            total += self._single(x, y) / scale
            scale *= self.alpha
            x = x * self.beta
            y = y * self.beta
        return total


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def pointwise(fn: Callable[[float, float], float]) -> NoiseField:
    """Adapt a scalar ``(x, y) -> float`` function to the array protocol."""
    vectorized = np.vectorize(fn, otypes=[np.float64])

    def field(x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return vectorized(x, y)

    return field
