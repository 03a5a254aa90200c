"""Output paths and Parquet schemas."""

from snowflake_ca.io.paths import snowflake_filename, snowflake_image_path
from snowflake_ca.io.schemas import STEP_METRIC_NAMES, STEP_METRICS_SCHEMA

__all__ = [
    "STEP_METRICS_SCHEMA",
    "STEP_METRIC_NAMES",
    "snowflake_filename",
    "snowflake_image_path",
]
