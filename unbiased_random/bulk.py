"""Fill numpy arrays from any ``RandomNumberGenerator``.

Values are drawn one at a time in order, so an array filled from a seeded
generator holds exactly the sequence repeated ``next_*`` calls would have
returned, and the generator is left in the same state.
"""

from __future__ import annotations

import numpy as np

from .sources import RandomNumberGenerator


def uint32_array(
    generator: RandomNumberGenerator,
    size: int,
    min_inclusive: float | None = None,
    max_exclusive: float | None = None,
) -> np.ndarray:
    out = np.empty(size, dtype=np.uint32)
    for k in range(size):
        out[k] = generator.next_uint32(min_inclusive, max_exclusive)
    return out


def int32_array(
    generator: RandomNumberGenerator,
    size: int,
    min_inclusive: float | None = None,
    max_exclusive: float | None = None,
) -> np.ndarray:
    out = np.empty(size, dtype=np.int32)
    for k in range(size):
        out[k] = generator.next_int32(min_inclusive, max_exclusive)
    return out


def fract32_array(
    generator: RandomNumberGenerator,
    size: int,
    min_inclusive: float | None = None,
    max_exclusive: float | None = None,
) -> np.ndarray:
    # float64: a fract32 needs 32 mantissa bits, float32 only has 24.
    out = np.empty(size, dtype=np.float64)
    for k in range(size):
        out[k] = generator.next_fract32(min_inclusive, max_exclusive)
    return out


def histogram(values: np.ndarray, bins: int, lo: float, hi: float) -> np.ndarray:
    """Counts of ``values`` in ``bins`` equal-width buckets over ``[lo, hi)``."""
    counts, _ = np.histogram(values, bins=bins, range=(lo, hi))
    return counts
