"""Centralized domain constants for snowflake simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_SIZE = 800
"""Default grid extent in cells; also the rendered image size in pixels."""

MIN_GRID_SIZE = 8
"""Smallest grid that leaves a meaningful hexagon inside the border margin."""

BORDER_MARGIN = 2
"""Cells between the hexagon edge and the physical array edge."""

FREEZE_THRESHOLD = 1.0
"""Coldness at or above which a cell is frozen."""

CENTER_SEED_COLDNESS = 1.0
"""Coldness forced onto the centre cell at initialization."""

SHEAR_ANGLE_DEG = -30.0
"""Horizontal shear that turns the square embedding into a regular hexagon."""

PERLIN_ALPHA = 2.0
"""Amplitude divisor between successive Perlin octaves."""

PERLIN_BETA = 2.0
"""Frequency multiplier between successive Perlin octaves."""

PERLIN_OCTAVES = 1
"""Number of Perlin octaves summed per sample."""

NOISE_SEED = 1
"""Default seed for the Perlin permutation table."""

PROGRESS_INTERVAL = 100
"""Log run-loop progress every this many steps."""

FLUSH_THRESHOLD = 8_192
"""Flush step-metric rows to Parquet once this in-memory row count is reached."""

OUTPUT_DIR = "snowflakes"
"""Default directory for rendered images."""
