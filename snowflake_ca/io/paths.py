"""Path construction helpers for simulation outputs."""

from __future__ import annotations

from pathlib import Path

from snowflake_ca.config.types import SimulationConfig


def snowflake_filename(config: SimulationConfig) -> str:
    """Return ``A-B-Y-PP-PM-L-size.png`` with four decimals on the float parameters."""
    return (
        f"{config.diffusion:.4f}-{config.background:.4f}-{config.accretion:.4f}-"
        f"{config.noise_scale:.4f}-{config.noise_amplitude:.4f}-"
        f"{config.steps}-{config.size}.png"
    )


def snowflake_image_path(out_dir: Path, config: SimulationConfig) -> Path:
    """Return path to the rendered image for *config* inside *out_dir*."""
    return out_dir / snowflake_filename(config)
