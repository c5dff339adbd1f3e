"""Seeded generator lifecycle.

A seeded generator is a ``SeedAlgorithm`` (how to mix a seed into a state,
how to advance that state, how to copy it) composed into one
``SeededNumberGenerator``, which owns the live state and exposes the ranged
``next_*`` methods. Adding an algorithm means writing one class that
satisfies the protocol; nothing here changes.

Construction, in priority order:

  1. ``state=`` : a state record (or its ``to_dict()`` mapping) from an
     earlier generator of the same algorithm. It is deep-copied and adopted
     verbatim; seed mixing does not run.
  2. ``seed=`` : mixed into a fresh state.
  3. ``seed_fn=`` : called once for the seed.
  4. otherwise ``random_seed(entropy)`` draws one non-deterministically.

Equal seeds give bit-identical sequences forever, and a generator restored
from ``get_state()`` continues exactly where the original was.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Generic, Literal, Protocol, TypeVar

from .conversions import (
    fract32_to_int32,
    fract32_to_uint32,
    int32_to_fract32,
    int32_to_uint32,
    uint32_to_fract32,
    uint32_to_int32,
)
from .seeding import Seed, check_seed, random_seed
from .sources import RandomNumberGenerator
from .unbiased import (
    unbiased_random_fract32,
    unbiased_random_int32,
    unbiased_random_uint32,
)

logger = logging.getLogger(__name__)

S = TypeVar("S")

RawKind = Literal["uint32", "int32", "fract32"]


class SeedAlgorithm(Protocol[S]):
    name: str
    # Representation advance() returns its raw 32 bits in.
    raw: RawKind
    state_type: type[S]

    def seed_to_state(self, seed: Seed) -> S:
        """Initial state for ``seed``. Pure: equal seeds, equal states."""
        ...

    def advance(self, state: S) -> int | float:
        """Mutate ``state`` one step and return 32 raw bits."""
        ...

    def clone_state(self, state: S) -> S:
        """Independent deep copy."""
        ...

    def load_state(self, record: Mapping[str, Any]) -> S:
        """State from a plain ``to_dict()``-shaped mapping."""
        ...


def _raw_converters(
    raw: RawKind,
) -> tuple[Callable[[Any], float], Callable[[Any], int], Callable[[Any], int]]:
    if raw == "fract32":
        return (lambda v: v), fract32_to_int32, fract32_to_uint32
    if raw == "int32":
        return int32_to_fract32, (lambda v: v), int32_to_uint32
    if raw == "uint32":
        return uint32_to_fract32, uint32_to_int32, (lambda v: v)
    raise ValueError(f"Unknown raw representation {raw!r}")


class SeededNumberGenerator(Generic[S]):
    def __init__(
        self,
        algorithm: SeedAlgorithm[S],
        *,
        seed: Seed | None = None,
        seed_fn: Callable[[], Seed] | None = None,
        state: S | Mapping[str, Any] | None = None,
        entropy: RandomNumberGenerator | None = None,
    ) -> None:
        self._algorithm = algorithm
        self._to_fract32, self._to_int32, self._to_uint32 = _raw_converters(
            algorithm.raw
        )

        if state is not None:
            if isinstance(state, Mapping):
                self._state = algorithm.load_state(state)
            elif isinstance(state, algorithm.state_type):
                self._state = algorithm.clone_state(state)
            else:
                raise TypeError(
                    f"{algorithm.name} state must be a "
                    f"{algorithm.state_type.__name__} or a mapping, "
                    f"got {type(state).__name__}"
                )
            logger.debug("Restored %s generator from state", algorithm.name)
            return

        if seed is None:
            seed = seed_fn() if seed_fn is not None else random_seed(entropy)
        check_seed(seed)
        self._state = algorithm.seed_to_state(seed)
        logger.debug("Seeded %s generator", algorithm.name)

    @property
    def algorithm(self) -> SeedAlgorithm[S]:
        return self._algorithm

    def get_state(self) -> S:
        """Deep copy of the current state; a new object on every call."""
        return self._algorithm.clone_state(self._state)

    def _advance(self) -> int | float:
        return self._algorithm.advance(self._state)

    def next_fract32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> float:
        return unbiased_random_fract32(
            min_inclusive,
            max_exclusive,
            lambda: self._to_fract32(self._advance()),
        )

    def next_int32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> int:
        return unbiased_random_int32(
            min_inclusive,
            max_exclusive,
            lambda: self._to_int32(self._advance()),
        )

    def next_uint32(
        self,
        min_inclusive: float | None = None,
        max_exclusive: float | None = None,
    ) -> int:
        return unbiased_random_uint32(
            min_inclusive,
            max_exclusive,
            lambda: self._to_uint32(self._advance()),
        )
