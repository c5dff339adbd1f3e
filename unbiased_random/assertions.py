"""Range validation shared by the ranged wrappers and entropy sources."""

from __future__ import annotations

from .constants import (
    MAX_SAFE_FRACT32_EXCLUSIVE,
    MAX_SAFE_INT32_EXCLUSIVE,
    MAX_SAFE_UINT32_EXCLUSIVE,
    MIN_SAFE_FRACT32_INCLUSIVE,
    MIN_SAFE_INT32_INCLUSIVE,
    MIN_SAFE_UINT32_INCLUSIVE,
)


class RangeError(ValueError):
    """A minimum/maximum pair falls outside its domain or is not ordered."""


def _assert_safe_range(
    min_inclusive: float,
    max_exclusive: float,
    domain_min: float,
    domain_max: float,
) -> None:
    if min_inclusive < domain_min:
        raise RangeError(f"Minimum value must be at least {domain_min}.")
    if max_exclusive > domain_max:
        raise RangeError(f"Maximum value must be less than {domain_max}.")
    if max_exclusive <= min_inclusive:
        raise RangeError(
            "Maximum value must be greater than the given minimum value."
        )


def assert_safe_range_fract32(
    min_inclusive: float, max_exclusive: float
) -> None:
    _assert_safe_range(
        min_inclusive,
        max_exclusive,
        MIN_SAFE_FRACT32_INCLUSIVE,
        MAX_SAFE_FRACT32_EXCLUSIVE,
    )


def assert_safe_range_int32(
    min_inclusive: float, max_exclusive: float
) -> None:
    _assert_safe_range(
        min_inclusive,
        max_exclusive,
        MIN_SAFE_INT32_INCLUSIVE,
        MAX_SAFE_INT32_EXCLUSIVE,
    )


def assert_safe_range_uint32(
    min_inclusive: float, max_exclusive: float
) -> None:
    _assert_safe_range(
        min_inclusive,
        max_exclusive,
        MIN_SAFE_UINT32_INCLUSIVE,
        MAX_SAFE_UINT32_EXCLUSIVE,
    )
