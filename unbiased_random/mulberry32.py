"""Mulberry32, by Tommy Ettinger (2017, public domain).

One 32-bit word of state, stepped by a Weyl increment and finished with two
multiply/xor-shift foldings. Period ~2**32. No warm-up: the seed is
canonicalised with ``seed_to_uint32`` and used directly.

Reference: https://gist.github.com/tommyettinger/46a874533244883189143505d203312c
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .constants import UINT32_MASK
from .seeding import Seed, seed_to_uint32

_INCREMENT = 0x6D2B79F5


def _imul(a: int, b: int) -> int:
    return (a * b) & UINT32_MASK


@dataclass
class Mulberry32State:
    seed: int

    def copy(self) -> Mulberry32State:
        return Mulberry32State(self.seed)

    def to_dict(self) -> dict:
        return {"seed": self.seed}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> Mulberry32State:
        return Mulberry32State(seed=int(d["seed"]) & UINT32_MASK)


class Mulberry32:
    name = "mulberry32"
    raw: Literal["uint32"] = "uint32"
    state_type = Mulberry32State

    def seed_to_state(self, seed: Seed) -> Mulberry32State:
        return Mulberry32State(seed=seed_to_uint32(seed))

    def advance(self, state: Mulberry32State) -> int:
        state.seed = (state.seed + _INCREMENT) & UINT32_MASK
        t = state.seed
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & UINT32_MASK
        return t ^ (t >> 14)

    def clone_state(self, state: Mulberry32State) -> Mulberry32State:
        return state.copy()

    def load_state(self, record: Mapping[str, Any]) -> Mulberry32State:
        return Mulberry32State.from_dict(record)


MULBERRY32 = Mulberry32()
