"""Visualization sub-package: grayscale mapping, hex correction and PNG output."""

from snowflake_ca.viz.render import (
    coldness_to_gray,
    crop_center,
    fill_alpha,
    gray_to_rgba,
    render_snowflake,
    save_snowflake_png,
    shear_horizontal,
)

__all__ = [
    "coldness_to_gray",
    "crop_center",
    "fill_alpha",
    "gray_to_rgba",
    "render_snowflake",
    "save_snowflake_png",
    "shear_horizontal",
]
