"""Tyche-i, by Samuel Neves and Filipe Araujo.

Four 32-bit words updated by two rounds of interdependent rotate, xor and
subtract steps per output. Period ~2**127.

An integral numeric seed is split across two words: the high part
(``seed / 2**32`` truncated toward zero) in ``a``, the low 32 bits in
``b``. Both come from the exact integer, so seeds past ``2**53`` keep every
bit. Anything else is spelled out and its characters are xor-folded into
``b`` one per advance. Twenty further advances are discarded either way.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .constants import UINT32_MASK
from .conversions import to_uint32, uint32_to_int32
from .seeding import Seed, is_integral_seed, seed_code_units

_WARM_UP = 20


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & UINT32_MASK


@dataclass
class TycheiState:
    a: int
    b: int
    c: int
    d: int

    def copy(self) -> TycheiState:
        return TycheiState(self.a, self.b, self.c, self.d)

    def to_dict(self) -> dict:
        return {"a": self.a, "b": self.b, "c": self.c, "d": self.d}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> TycheiState:
        return TycheiState(
            a=int(d["a"]) & UINT32_MASK,
            b=int(d["b"]) & UINT32_MASK,
            c=int(d["c"]) & UINT32_MASK,
            d=int(d["d"]) & UINT32_MASK,
        )


class Tychei:
    name = "tychei"
    raw: Literal["int32"] = "int32"
    state_type = TycheiState

    def seed_to_state(self, seed: Seed) -> TycheiState:
        state = TycheiState(a=0, b=0, c=2654435769, d=1367130551)

        units: list[int] = []
        if is_integral_seed(seed):
            whole = int(seed)
            high = whole >> 32 if whole >= 0 else -(-whole >> 32)
            state.a = to_uint32(high)
            state.b = to_uint32(whole)
        else:
            units = seed_code_units(seed)

        for unit in units:
            state.b ^= unit
            self.advance(state)
        for _ in range(_WARM_UP):
            self.advance(state)
        return state

    def advance(self, state: TycheiState) -> int:
        a, b, c, d = state.a, state.b, state.c, state.d

        b = _rotl(b, 25) ^ c
        c = (c - d) & UINT32_MASK
        d = _rotl(d, 24) ^ a
        a = (a - b) & UINT32_MASK

        b = _rotl(b, 20) ^ c
        c = (c - d) & UINT32_MASK
        d = ((d << 16) & UINT32_MASK) ^ (c >> 16) ^ a
        a = (a - b) & UINT32_MASK

        state.a, state.b, state.c, state.d = a, b, c, d
        return uint32_to_int32(a)

    def clone_state(self, state: TycheiState) -> TycheiState:
        return state.copy()

    def load_state(self, record: Mapping[str, Any]) -> TycheiState:
        return TycheiState.from_dict(record)


TYCHEI = Tychei()
