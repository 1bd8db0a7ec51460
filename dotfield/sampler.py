"""Rejection sampler: turns the density field into an exact-count dot set."""

import logging
import random
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from .field import density_at, frame_index
from .hashing import mix
from .params import Params

log = logging.getLogger(__name__)

MIN_ACCEPT = 0.001
MIN_POW = 0.01
MIN_RADIUS = 0.000001


@dataclass(frozen=True)
class Dot:
    x: float
    y: float
    r: float
    w: float


def generate_dots(params: Params, t: float) -> List[Dot]:
    """
    Sample exactly params.distribution.dot_count dots for time t (seconds).

    The result depends only on (params, round(t * 60)). Each call owns its
    own generator seeded with mix(params.seed, frame), so frames can be
    computed in any order or in parallel.

    There is no iteration cap: the acceptance floor of 0.001 is what keeps
    the loop finite when the density is zero everywhere.
    """
    dist = params.distribution
    count = dist.dot_count
    if count <= 0:
        return []

    frame = frame_index(t)
    rng = random.Random(mix(params.seed, frame))
    exponent = max(dist.density_pow, MIN_POW)
    width = params.canvas.width
    height = params.canvas.height

    dots: List[Dot] = []
    attempts = 0
    while len(dots) < count:
        attempts += 1
        nx = rng.random()
        ny = rng.random()

        if dist.jitter > 0.0:
            jx = rng.uniform(-dist.jitter, dist.jitter)
            jy = rng.uniform(-dist.jitter, dist.jitter)
            nx = min(max(nx + jx, 0.0), 1.0)
            ny = min(max(ny + jy, 0.0), 1.0)

        weight = min(max(density_at(params, nx, ny, frame), 0.0), 1.0)
        accept = max(weight, MIN_ACCEPT) ** exponent
        if rng.random() > accept:
            continue

        if dist.fixed_radius is not None:
            radius = dist.fixed_radius
        else:
            radius = rng.uniform(dist.min_radius, dist.max_radius)
        radius = max(radius, MIN_RADIUS)

        dots.append(Dot(x=nx * width, y=ny * height, r=radius, w=weight))

    log.debug(
        "frame %d: %d dots from %d candidates (seed=%d)",
        frame,
        count,
        attempts,
        params.seed,
    )
    return dots


def dots_to_array(dots: Iterable[Dot]) -> np.ndarray:
    """Stack dots into an (n, 4) float32 array with columns x, y, r, w."""
    rows = [(d.x, d.y, d.r, d.w) for d in dots]
    if not rows:
        return np.zeros((0, 4), dtype=np.float32)
    return np.asarray(rows, dtype=np.float32)
