"""Deterministic dot clouds sampled from a radial singularity field."""

from .cache import FrameCache
from .field import density_at, density_grid, frame_index
from .hashing import hash01, mix
from .noise import value_noise
from .params import Canvas, Distribution, Field, Params, Render, Singularity
from .sampler import Dot, dots_to_array, generate_dots

__all__ = [
    "Canvas",
    "Distribution",
    "Dot",
    "Field",
    "FrameCache",
    "Params",
    "Render",
    "Singularity",
    "density_at",
    "density_grid",
    "dots_to_array",
    "frame_index",
    "generate_dots",
    "hash01",
    "mix",
    "value_noise",
]
