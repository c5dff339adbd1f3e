"""Unbiased bounded sampling over 32-bit raw draws.

``unbiased_random_uint32_from_range`` is the only place a raw draw is turned
into a bounded value. The three ranged wrappers validate their bounds, map
the domain onto ``[0, 2**32)``, call it, and map the result back:

  * **fract32**: bounds become grid units (``floor(f * 2**32)``), the
    sampled offset is scaled back by ``2**-32`` and added to the minimum.
  * **int32**: the asymmetric signed domain is shifted up by ``2**31`` so
    the range is one contiguous run of unsigned values, then shifted back.
  * **uint32**: used as-is.

Calling a wrapper with both bounds omitted returns the raw value untouched
and never enters the sampler.

Why rejection instead of modulo: with ``range`` values that are not a power
of two, ``raw % range`` favours the low residues. Masking away the bits above
``range`` keeps each remaining bit uniform, and discarding masked values that
still land at or above ``range`` leaves every accepted value equally likely.
The mask always covers less than twice ``range``, so at least half of all
draws are accepted.
"""

from __future__ import annotations

import math
from typing import Callable

from .assertions import (
    RangeError,
    assert_safe_range_fract32,
    assert_safe_range_int32,
    assert_safe_range_uint32,
)
from .constants import (
    MAX_SAFE_FRACT32_EXCLUSIVE,
    MAX_SAFE_INT32_EXCLUSIVE,
    MAX_SAFE_UINT32_EXCLUSIVE,
    MIN_SAFE_FRACT32_INCLUSIVE,
    MIN_SAFE_INT32_INCLUSIVE,
    MIN_SAFE_UINT32_INCLUSIVE,
    TWO_POW_31,
    TWO_POW_32,
    UINT32_MASK,
)
from .conversions import fract32_to_uint32, to_int32, uint32_to_fract32

RawUint32Fn = Callable[[], int]
RawInt32Fn = Callable[[], int]
RawFract32Fn = Callable[[], float]

# Consecutive rejections this long have probability below 2**-65536 for a
# uniform source; reaching it means the source is broken.
_SANE_DRAW_LIMIT = 1 << 16


def unbiased_random_uint32_from_range(
    range_: int, random_uint32_fn: RawUint32Fn
) -> int:
    """Uniform integer in ``[0, range_)`` drawn from a uniform uint32 source.

    ``range_`` must be in ``[1, 2**32]``. A range of 1 returns 0 without
    calling the source.
    """
    if range_ < 1 or range_ > TWO_POW_32:
        raise RangeError(
            f"Range must be between 1 and {TWO_POW_32}, got {range_}."
        )
    if range_ == 1:
        return 0

    # Smallest 2**n - 1 covering range_ - 1. Subtracting 1 keeps powers of
    # two exclusive: a range of 8 needs 0b111, not 0b1111.
    mask = 0
    temp = range_ - 1
    while temp > 0:
        mask = (mask << 1) | 1
        temp >>= 1
    mask &= UINT32_MASK

    draws = 0
    while True:
        value = random_uint32_fn() & mask
        draws += 1
        if value < range_:
            return value
        assert draws < _SANE_DRAW_LIMIT, (
            f"{draws} consecutive draws rejected for range {range_}; "
            "the raw source is not uniform"
        )


def unbiased_random_fract32(
    min_inclusive: float | None,
    max_exclusive: float | None,
    random_fract32_fn: RawFract32Fn,
) -> float:
    if min_inclusive is None and max_exclusive is None:
        return random_fract32_fn()

    lo = MIN_SAFE_FRACT32_INCLUSIVE if min_inclusive is None else min_inclusive
    hi = MAX_SAFE_FRACT32_EXCLUSIVE if max_exclusive is None else max_exclusive

    assert_safe_range_fract32(lo, hi)

    min_uint32 = fract32_to_uint32(lo)
    if hi == MAX_SAFE_FRACT32_EXCLUSIVE:
        max_uint32 = MAX_SAFE_UINT32_EXCLUSIVE
    else:
        max_uint32 = fract32_to_uint32(hi)
    _check_resolution(min_uint32, max_uint32, lo, hi)

    result = unbiased_random_uint32_from_range(
        max_uint32 - min_uint32,
        lambda: fract32_to_uint32(random_fract32_fn()),
    )
    return lo + uint32_to_fract32(result)


def unbiased_random_int32(
    min_inclusive: float | None,
    max_exclusive: float | None,
    random_int32_fn: RawInt32Fn,
) -> int:
    if min_inclusive is None and max_exclusive is None:
        return random_int32_fn()

    lo = MIN_SAFE_INT32_INCLUSIVE if min_inclusive is None else min_inclusive
    hi = MAX_SAFE_INT32_EXCLUSIVE if max_exclusive is None else max_exclusive

    assert_safe_range_int32(lo, hi)

    range_min = math.floor(lo)
    range_max = math.floor(hi)
    _check_resolution(range_min, range_max, lo, hi)

    # Shift [-2**31, 2**31) onto [0, 2**32) so the range is contiguous in
    # unsigned bits; the offset is undone when remapping the sample.
    result = unbiased_random_uint32_from_range(
        (range_max + TWO_POW_31) - (range_min + TWO_POW_31),
        lambda: random_int32_fn() + TWO_POW_31,
    )
    return to_int32(range_min + result)


def unbiased_random_uint32(
    min_inclusive: float | None,
    max_exclusive: float | None,
    random_uint32_fn: RawUint32Fn,
) -> int:
    if min_inclusive is None and max_exclusive is None:
        return random_uint32_fn()

    lo = MIN_SAFE_UINT32_INCLUSIVE if min_inclusive is None else min_inclusive
    hi = MAX_SAFE_UINT32_EXCLUSIVE if max_exclusive is None else max_exclusive

    assert_safe_range_uint32(lo, hi)

    range_min = math.floor(lo)
    range_max = math.floor(hi)
    _check_resolution(range_min, range_max, lo, hi)

    return range_min + unbiased_random_uint32_from_range(
        range_max - range_min, random_uint32_fn
    )


def _check_resolution(
    range_min: int, range_max: int, lo: float, hi: float
) -> None:
    if range_max <= range_min:
        raise RangeError(
            f"Range [{lo}, {hi}) holds no value at 32-bit resolution."
        )
