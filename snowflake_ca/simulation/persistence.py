"""Parquet persistence helpers for the step-metrics stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from snowflake_ca.io.schemas import STEP_METRICS_SCHEMA


def new_metric_columns() -> dict[str, list[int | float]]:
    return {field.name: [] for field in STEP_METRICS_SCHEMA}


def flush_metric_columns(
    metric_columns: dict[str, list[int | float]],
    metrics_log_path: Path,
    metric_writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated metric rows to Parquet and clear in-memory buffers."""
    if not metric_columns["step"]:
        return metric_writer
    table = pa.Table.from_pydict(metric_columns, schema=STEP_METRICS_SCHEMA)
    if metric_writer is None:
        metric_writer = pq.ParquetWriter(metrics_log_path, STEP_METRICS_SCHEMA)
    metric_writer.write_table(table)
    for values in metric_columns.values():
        values.clear()
    return metric_writer
