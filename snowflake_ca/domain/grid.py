"""Square-array storage for a hexagonal lattice.

The hexagon is embedded in an N x N array using axial coordinates: for
array indices ``(i, j)`` the third cube coordinate is
``k = -(i - N/2) - (j - N/2)``. Six of the eight square neighbours are
hexagonal neighbours; ``(i-1, j-1)`` and ``(i+1, j+1)`` are not.

    X X X X X X X X X X X X
    X X X X . . . . . . . X
    X X X . . . . . . . . X
    X X . . . N N . . . . X
    X . . . N O N . . . . X
    X . . . N N . . . . X X
    X . . . . . . . . X X X
    X . . . . . . . X X X X
    X X X X X X X X X X X X

X is out of bound, O a cell and N its six neighbours.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from snowflake_ca.config.constants import BORDER_MARGIN, FREEZE_THRESHOLD

Coord = tuple[int, int]

# Order is fixed; masking and diffusion both iterate it.
NEIGHBOR_OFFSETS: tuple[Coord, ...] = (
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
)


class CellStatus(IntEnum):
    """Per-cell state. Values match the uint8 encoding stored in the mask."""

    RECEPTIVE = 0
    NON_RECEPTIVE = 1
    OUT_OF_BOUND = 2


def is_in_hexagon(i: int, j: int, size: int) -> bool:
    """Return True when ``(i, j)`` lies inside the simulated hexagon."""
    half = size // 2
    x = i - half
    z = j - half
    y = -x - z
    return max(abs(x), abs(y), abs(z)) <= half - BORDER_MARGIN


def hexagon_mask(size: int) -> np.ndarray:
    """Vectorized :func:`is_in_hexagon` over the full ``(size, size)`` index space."""
    half = size // 2
    x = np.arange(size)[:, None] - half
    z = np.arange(size)[None, :] - half
    y = -x - z
    extent = np.maximum(np.maximum(np.abs(x), np.abs(y)), np.abs(z))
    return extent <= half - BORDER_MARGIN


@dataclass
class Grid:
    """Coldness and status fields over a fixed ``size x size`` index space.

    ``coldness`` is replaced wholesale by each automaton step; ``status`` is
    updated in place. Both are exposed as attributes for the automaton; the
    renderer and tests should go through :meth:`read_coldness` and
    :meth:`read_mask`.
    """

    size: int
    coldness: np.ndarray  # (size, size) float64
    status: np.ndarray  # (size, size) uint8, CellStatus values

    @classmethod
    def create(cls, size: int) -> Grid:
        """Zero coldness everywhere, every cell non-receptive."""
        return cls(
            size=size,
            coldness=np.zeros((size, size), dtype=np.float64),
            status=np.full((size, size), CellStatus.NON_RECEPTIVE, dtype=np.uint8),
        )

    @property
    def center(self) -> int:
        return self.size // 2

    def _check(self, i: int, j: int) -> None:
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError(f"cell ({i}, {j}) outside {self.size}x{self.size} grid")

    def at(self, i: int, j: int) -> tuple[float, CellStatus]:
        self._check(i, j)
        return float(self.coldness[i, j]), CellStatus(int(self.status[i, j]))

    def set_coldness(self, i: int, j: int, value: float) -> None:
        self._check(i, j)
        self.coldness[i, j] = value

    def set_status(self, i: int, j: int, status: CellStatus) -> None:
        self._check(i, j)
        self.status[i, j] = status

    def is_in_hexagon(self, i: int, j: int) -> bool:
        return is_in_hexagon(i, j, self.size)

    def neighbors(self, i: int, j: int) -> tuple[Coord, ...]:
        """Return the six hexagonal neighbours of ``(i, j)`` in fixed order."""
        self._check(i, j)
        return tuple((i + di, j + dj) for di, dj in NEIGHBOR_OFFSETS)

    def frozen_mask(self) -> np.ndarray:
        """Frozen in-bounds cells, derived from the threshold on every call."""
        return (self.coldness >= FREEZE_THRESHOLD) & (self.status != CellStatus.OUT_OF_BOUND)

    def read_coldness(self) -> np.ndarray:
        view = self.coldness.view()
        view.flags.writeable = False
        return view

    def read_mask(self) -> np.ndarray:
        view = self.status.view()
        view.flags.writeable = False
        return view
