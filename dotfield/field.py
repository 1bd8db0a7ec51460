"""Density field: radial singularity plus animated domain warp."""

import math

import numpy as np

from .hashing import GOLDEN, mix
from .noise import value_noise
from .params import Params

FPS = 60

# per-frame scroll of the warp pattern
DRIFT_X = 0.013
DRIFT_Y = -0.011


def _clamp01(v: float) -> float:
    return min(max(v, 0.0), 1.0)


def frame_index(t: float) -> int:
    """Nearest frame at 60 fps, rounding halves away from zero."""
    scaled = t * FPS
    return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))


def density_at(params: Params, nx: float, ny: float, frame: int) -> float:
    s = params.field.singularity
    dx = nx - s.cx
    dy = ny - s.cy
    d2 = dx * dx + dy * dy

    radial = _clamp01(s.strength / (1.0 + s.falloff * d2))

    warp = 0.0
    if params.field.warp_amount > 0.0:
        freq = params.field.warp_frequency
        n = value_noise(
            nx * freq + frame * DRIFT_X,
            ny * freq + frame * DRIFT_Y,
            mix(params.seed ^ GOLDEN, frame),
        )
        warp = (n - 0.5) * 2.0 * params.field.warp_amount  # [-amount, amount]

    return _clamp01(radial + warp)


def density_grid(params: Params, frame: int, cols: int, rows: int) -> np.ndarray:
    """
    Evaluate the field at cell centers of a cols x rows grid.
    Row 0 is ny near 0. Returns float32 array of shape (rows, cols).
    """
    if cols <= 0 or rows <= 0:
        raise ValueError("cols and rows must be positive integers")

    out = np.empty((rows, cols), dtype=np.float32)
    for j in range(rows):
        ny = (j + 0.5) / rows
        row = out[j]
        for i in range(cols):
            row[i] = density_at(params, (i + 0.5) / cols, ny, frame)
    return out
