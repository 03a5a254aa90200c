"""Tests for snowflake_ca.io.paths and io.schemas."""

from __future__ import annotations

from pathlib import Path

from snowflake_ca.config.types import SimulationConfig
from snowflake_ca.io.paths import snowflake_filename, snowflake_image_path
from snowflake_ca.io.schemas import STEP_METRIC_NAMES, STEP_METRICS_SCHEMA

CONFIG = SimulationConfig(
    diffusion=1.0,
    background=0.4,
    accretion=0.001,
    noise_scale=0.01,
    noise_amplitude=0.0,
    steps=10,
    size=16,
)


def test_filename_encodes_parameters() -> None:
    assert snowflake_filename(CONFIG) == "1.0000-0.4000-0.0010-0.0100-0.0000-10-16.png"


def test_image_path_joins_out_dir() -> None:
    path = snowflake_image_path(Path("snowflakes"), CONFIG)
    assert path == Path("snowflakes") / "1.0000-0.4000-0.0010-0.0100-0.0000-10-16.png"


def test_metric_names_exclude_step() -> None:
    assert "step" in STEP_METRICS_SCHEMA.names
    assert "step" not in STEP_METRIC_NAMES
    assert STEP_METRIC_NAMES == STEP_METRICS_SCHEMA.names[1:]
