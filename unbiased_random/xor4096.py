"""Richard Brent's xorgens xor4096, period 2**4128 - 2**32.

A 128-word xorshift buffer combined with a Weyl generator ``w``. For
non-zero int32 seeds the output matches Brent's xorgens 3 C implementation.

Seeding runs in two phases:

  1. **Shuffle**: ``v`` starts at the int32 seed, or at zero with the seed's
     characters (plus a trailing NUL) xor-ed in one per round. 32 warm-up
     rounds of a small xorshift run first; ``w`` is taken from ``v`` after
     them. Every later round advances ``w`` and xors ``v + w`` into the
     buffer, counting runs of zero words. An all-zero buffer gets one word
     forced to ``-1``.
  2. **Warm-up**: 512 buffer advances without touching ``w``.

Reference: http://arxiv.org/pdf/1004.3115v1.pdf
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from .constants import UINT32_MASK
from .conversions import to_uint32, uint32_to_int32
from .seeding import Seed, is_int32_seed, seed_code_units

_SIZE = 128
_WEYL = 0x61C88647
_SHUFFLE_ROUNDS = 32
_WARM_UP = 4 * _SIZE


def _shl(x: int, k: int) -> int:
    return (x << k) & UINT32_MASK


def _step_buffer(X: list[int], i: int) -> int:
    """Advance the xorshift buffer at cursor ``i``; returns the new cursor."""
    v = X[(i + 34) & 127]
    i = (i + 1) & 127
    t = X[i]
    v ^= _shl(v, 13)
    t ^= _shl(t, 17)
    v ^= v >> 15
    t ^= t >> 12
    X[i] = v ^ t
    return i


@dataclass
class Xor4096State:
    X: list[int] = field(default_factory=list)
    i: int = 0
    w: int = 0

    def copy(self) -> Xor4096State:
        return Xor4096State(list(self.X), self.i, self.w)

    def to_dict(self) -> dict:
        return {"X": list(self.X), "i": self.i, "w": self.w}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> Xor4096State:
        return Xor4096State(
            X=[int(v) & UINT32_MASK for v in d["X"]],
            i=int(d["i"]) & (_SIZE - 1),
            w=int(d["w"]) & UINT32_MASK,
        )


class Xor4096:
    name = "xor4096"
    raw: Literal["int32"] = "int32"
    state_type = Xor4096State

    def seed_to_state(self, seed: Seed) -> Xor4096State:
        units: list[int] = []
        if is_int32_seed(seed):
            v = to_uint32(seed)
            limit = _SIZE
        else:
            units = seed_code_units(seed) + [0]
            v = 0
            limit = max(_SIZE, len(units))

        X = [0] * _SIZE
        w = 0
        zeroes = 0
        for j in range(-_SHUFFLE_ROUNDS, limit):
            if units:
                v ^= units[(j + _SHUFFLE_ROUNDS) % len(units)]
            if j == 0:
                w = v
            v ^= _shl(v, 10)
            v ^= v >> 15
            v ^= _shl(v, 4)
            v ^= v >> 13
            if j >= 0:
                w = (w + _WEYL) & UINT32_MASK
                X[j & 127] ^= (v + w) & UINT32_MASK
                zeroes = zeroes + 1 if X[j & 127] == 0 else 0

        if zeroes >= _SIZE:
            X[len(units) & 127] = UINT32_MASK

        i = 127
        for _ in range(_WARM_UP):
            i = _step_buffer(X, i)

        return Xor4096State(X=X, i=i, w=w)

    def advance(self, state: Xor4096State) -> int:
        state.w = (state.w + _WEYL) & UINT32_MASK
        state.i = _step_buffer(state.X, state.i)
        v = state.X[state.i]
        w = state.w
        return uint32_to_int32(v + (w ^ (w >> 16)))

    def clone_state(self, state: Xor4096State) -> Xor4096State:
        return state.copy()

    def load_state(self, record: Mapping[str, Any]) -> Xor4096State:
        return Xor4096State.from_dict(record)


XOR4096 = Xor4096()
