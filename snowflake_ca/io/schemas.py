"""Parquet schema definitions for simulation artifacts."""

from __future__ import annotations

import pyarrow as pa

STEP_METRICS_SCHEMA_VERSION = 1

STEP_METRICS_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("frozen_cells", pa.int64()),
        ("receptive_cells", pa.int64()),
        ("total_coldness", pa.float64()),
        ("max_coldness", pa.float64()),
        ("crystal_radius", pa.int64()),
    ],
    metadata={"schema_version": str(STEP_METRICS_SCHEMA_VERSION)},
)

STEP_METRIC_NAMES = [field.name for field in STEP_METRICS_SCHEMA if field.name != "step"]
