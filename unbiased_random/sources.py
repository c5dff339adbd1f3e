"""Non-deterministic entropy sources.

Two sources hand raw uint32 values to the ranged wrappers:

  * ``SecureNumberGenerator`` reads four bytes from a ``token_bytes``-style
    callable (``secrets.token_bytes`` unless one is injected).
  * ``InsecureNumberGenerator`` scales a ``random()``-style float
    (``random.random`` unless one is injected) onto 32 bits.

Both satisfy ``RandomNumberGenerator``, the same surface the seeded
generators expose, so callers can swap one for another.
"""

from __future__ import annotations

import random
import secrets
from typing import Callable, Protocol

from .conversions import (
    bytes_to_uint32,
    fract32_to_uint32,
    uint32_to_fract32,
    uint32_to_int32,
)
from .unbiased import (
    unbiased_random_fract32,
    unbiased_random_int32,
    unbiased_random_uint32,
)

BoundedUint32Fn = Callable[[int, int], int]


class RandomNumberGenerator(Protocol):
    def next_fract32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> float:
        """32-bit fraction in ``[min_inclusive, max_exclusive)``, default ``[0, 1)``."""
        ...

    def next_int32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> int:
        """Signed 32-bit integer, default range ``[-2**31, 2**31)``."""
        ...

    def next_uint32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> int:
        """Unsigned 32-bit integer, default range ``[0, 2**32)``."""
        ...


class SecureNumberGenerator:
    def __init__(
        self, token_bytes: Callable[[int], bytes] = secrets.token_bytes
    ) -> None:
        self._token_bytes = token_bytes

    def _next_raw_uint32(self) -> int:
        return bytes_to_uint32(self._token_bytes(4))

    def next_fract32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> float:
        return unbiased_random_fract32(
            min_inclusive,
            max_exclusive,
            lambda: uint32_to_fract32(self._next_raw_uint32()),
        )

    def next_int32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> int:
        return unbiased_random_int32(
            min_inclusive,
            max_exclusive,
            lambda: uint32_to_int32(self._next_raw_uint32()),
        )

    def next_uint32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> int:
        return unbiased_random_uint32(
            min_inclusive, max_exclusive, self._next_raw_uint32
        )


class InsecureNumberGenerator:
    def __init__(self, random_fn: Callable[[], float] = random.random) -> None:
        self._random_fn = random_fn

    def _next_raw_uint32(self) -> int:
        return fract32_to_uint32(self._random_fn())

    def next_fract32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> float:
        return unbiased_random_fract32(
            min_inclusive,
            max_exclusive,
            lambda: uint32_to_fract32(self._next_raw_uint32()),
        )

    def next_int32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> int:
        return unbiased_random_int32(
            min_inclusive,
            max_exclusive,
            lambda: uint32_to_int32(self._next_raw_uint32()),
        )

    def next_uint32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> int:
        return unbiased_random_uint32(
            min_inclusive, max_exclusive, self._next_raw_uint32
        )


DEFAULT_INSECURE_SOURCE = InsecureNumberGenerator()


def math_random_uint32(
    min_inclusive: float | None = None, max_exclusive: float | None = None
) -> int:
    """Default ``BoundedUint32Fn`` for the selection helpers."""
    return DEFAULT_INSECURE_SOURCE.next_uint32(min_inclusive, max_exclusive)
