"""Smooth 2D value noise on top of the lattice hash."""

import math

from .hashing import hash01


def _smoothstep(t: float) -> float:
    # Hermite ease curve
    return t * t * (3.0 - 2.0 * t)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def value_noise(x: float, y: float, seed: int) -> float:
    x0 = math.floor(x)
    y0 = math.floor(y)

    sx = _smoothstep(x - x0)
    sy = _smoothstep(y - y0)

    n00 = hash01(x0, y0, seed)
    n10 = hash01(x0 + 1, y0, seed)
    n01 = hash01(x0, y0 + 1, seed)
    n11 = hash01(x0 + 1, y0 + 1, seed)

    ix0 = _lerp(n00, n10, sx)
    ix1 = _lerp(n01, n11, sx)
    return _lerp(ix0, ix1, sy)  # [0,1]
