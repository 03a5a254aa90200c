"""Turn a finished coldness field into a PNG of a regular hexagon.

The square-array embedding leans the hexagon sideways; a horizontal shear
of -30 degrees straightens it, after which the centre of the widened
canvas is cropped back to a square and any background uncovered by the
shear is made opaque.
"""

from __future__ import annotations

import math
from pathlib import Path

import numpy as np
from matplotlib import image as mpimg
from scipy import ndimage

from snowflake_ca.config.constants import SHEAR_ANGLE_DEG


def coldness_to_gray(coldness: np.ndarray) -> np.ndarray:
    """Map coldness to uint8 intensity, ``clip(c * 255, 0, 255)``, truncating.

    The result is transposed: array index ``i`` runs along the image x axis.
    """
    return np.clip(coldness * 255.0, 0.0, 255.0).astype(np.uint8).T


def gray_to_rgba(gray: np.ndarray) -> np.ndarray:
    rgba = np.empty(gray.shape + (4,), dtype=np.uint8)
    rgba[..., :3] = gray[..., None]
    rgba[..., 3] = 255
    return rgba


def shear_horizontal(rgba: np.ndarray, angle_deg: float) -> np.ndarray:
    """Shear about the image centre, widening the canvas to fit.

    Output width is ``W + int(H * |tan(angle)|)``; pixels with no source
    are transparent black. Sampling is nearest-neighbour.
    """
    height, width = rgba.shape[:2]
    k = math.tan(math.radians(angle_deg))
    extra = int(height * abs(k))
    out_shape = (height, width + extra)
    # output -> input: src_col = col - extra / 2 + k * (row - height / 2)
    matrix = np.array([[1.0, 0.0], [k, 1.0]])
    offset = np.array([0.0, -extra / 2.0 - k * height / 2.0])
    channels = [
        ndimage.affine_transform(
            rgba[..., c],
            matrix,
            offset=offset,
            output_shape=out_shape,
            order=0,
            mode="constant",
            cval=0,
        )
        for c in range(rgba.shape[2])
    ]
    return np.stack(channels, axis=-1).astype(np.uint8)


def crop_center(rgba: np.ndarray, width: int) -> np.ndarray:
    """Keep the central *width* columns."""
    total = rgba.shape[1]
    if width > total:
        raise ValueError(f"crop width {width} exceeds image width {total}")
    start = (total - width) // 2
    return rgba[:, start : start + width].copy()


def fill_alpha(rgba: np.ndarray) -> np.ndarray:
    out = rgba.copy()
    out[..., 3] = 255
    return out


def render_snowflake(coldness: np.ndarray, shear_angle: float = SHEAR_ANGLE_DEG) -> np.ndarray:
    """Return an opaque ``(N, N, 4)`` uint8 image of the coldness field."""
    size = coldness.shape[0]
    rgba = gray_to_rgba(coldness_to_gray(coldness))
    sheared = shear_horizontal(rgba, shear_angle)
    return fill_alpha(crop_center(sheared, size))


def save_snowflake_png(
    coldness: np.ndarray, output_path: Path, shear_angle: float = SHEAR_ANGLE_DEG
) -> Path:
    """Render *coldness* and write it as PNG, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    mpimg.imsave(output_path, render_snowflake(coldness, shear_angle=shear_angle), format="png")
    return output_path
