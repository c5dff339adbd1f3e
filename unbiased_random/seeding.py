"""Seed validation and derivation.

A seed is a finite number or a string. Numbers and strings take different
mixing paths in most algorithms, so the helpers here answer the questions
those paths ask (is this an int32? what characters does it spell?) in one
place.

Non-finite numbers are rejected rather than hashed as their spelled-out
names.
"""

from __future__ import annotations

import logging
import math
from typing import Union

from .constants import TWO_POW_31, UINT32_MASK
from .conversions import (
    number_to_string,
    to_int32,
    to_uint32,
    utf16_code_units,
)
from .sources import (
    DEFAULT_INSECURE_SOURCE,
    RandomNumberGenerator,
    SecureNumberGenerator,
)

logger = logging.getLogger(__name__)

Seed = Union[int, float, str]


def check_seed(seed: Seed) -> None:
    if isinstance(seed, str):
        return
    if isinstance(seed, bool) or not isinstance(seed, (int, float)):
        raise TypeError(
            f"Seed must be a number or a string, got {type(seed).__name__}"
        )
    if isinstance(seed, float) and not math.isfinite(seed):
        raise ValueError(f"Seed must be a finite number, got {seed!r}")
    if isinstance(seed, int):
        try:
            float(seed)
        except OverflowError:
            raise ValueError(
                "Seed must be a finite number, "
                "got an integer beyond the float range"
            ) from None


def random_seed(entropy: RandomNumberGenerator | None = None) -> int:
    """One uint32 seed from ``entropy``, else the strongest source available."""
    if entropy is not None:
        seed = entropy.next_uint32()
        logger.debug("Drew seed from %s", type(entropy).__name__)
        return seed

    try:
        seed = SecureNumberGenerator().next_uint32()
    except NotImplementedError:
        logger.warning(
            "No secure randomness source available; "
            "falling back to the insecure source for seeding"
        )
        return DEFAULT_INSECURE_SOURCE.next_uint32()
    logger.debug("Drew seed from the secure source")
    return seed


def seed_to_uint32(seed: Seed) -> int:
    """Canonical unsigned 32-bit value for any seed.

    Numbers truncate toward zero and wrap modulo ``2**32``. Strings fold
    their UTF-16 code units through ``h = h * 31 + unit`` with int32
    two's-complement wraparound at each step (Java's ``String.hashCode``),
    and the final int32 is reinterpreted as unsigned.
    """
    check_seed(seed)
    if not isinstance(seed, str):
        return to_uint32(seed)

    result = 0
    for unit in utf16_code_units(seed):
        result = to_int32(result * 31 + unit)
    return result & UINT32_MASK


def is_integral_seed(seed: Seed) -> bool:
    if isinstance(seed, int):
        return True
    return isinstance(seed, float) and seed.is_integer()


def is_int32_seed(seed: Seed) -> bool:
    return (
        is_integral_seed(seed)
        and -TWO_POW_31 <= seed < TWO_POW_31  # type: ignore[operator]
    )


def seed_string(seed: Seed) -> str:
    """The characters a non-int32 seed contributes to string mixing."""
    return seed if isinstance(seed, str) else number_to_string(seed)


def seed_code_units(seed: Seed) -> list[int]:
    return utf16_code_units(seed_string(seed))
