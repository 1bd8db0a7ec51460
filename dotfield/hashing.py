"""Deterministic 64-bit hashing (splitmix-style finalizer)."""

MASK64 = 0xFFFFFFFFFFFFFFFF

GOLDEN = 0x9E3779B97F4A7C15
_M1 = 0xBF58476D1CE4E5B9
_M2 = 0x94D049BB133111EB


def _finalize(z: int) -> int:
    z ^= z >> 30
    z = (z * _M1) & MASK64
    z ^= z >> 27
    z = (z * _M2) & MASK64
    z ^= z >> 31
    return z


def mix(seed: int, i: int) -> int:
    """Combine a seed with an integer index into a new 64-bit seed."""
    # negative indices wrap as two's complement
    z = (seed & MASK64) ^ ((i * GOLDEN) & MASK64)
    return _finalize(z)


def hash01(x: int, y: int, seed: int) -> float:
    """Map an integer lattice point to a float in [0,1)."""
    z = (seed & MASK64) ^ ((x << 32) & MASK64) ^ ((y * GOLDEN) & MASK64)
    z = _finalize(z)
    return ((z >> 8) & 0xFFFFFFFF) / 2**32
