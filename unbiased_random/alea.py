"""Alea, by Johannes Baagøe (2010).

A multiply-with-carry generator over three fractional accumulators, period
around 2**116. The recurrence works directly in ``[0, 1)`` fractions at
32-bit granularity, so ``advance`` returns a fract32.

Seeds of any kind are spelled out as a string and hashed through Baagøe's
``Mash`` function. The same ``Mash`` instance is reused for every call, so
its running hash carries from one call to the next.

Reference: https://github.com/nquinlan/better-random-numbers-for-javascript-mirror
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .constants import UINT32_MASK
from .conversions import utf16_code_units
from .seeding import Seed, seed_string

_TWO_POW_NEG_32 = 2.3283064365386963e-10
_MULTIPLIER = 2091639


@dataclass
class AleaState:
    c: int
    s0: float
    s1: float
    s2: float

    def copy(self) -> AleaState:
        return AleaState(self.c, self.s0, self.s1, self.s2)

    def to_dict(self) -> dict:
        return {"c": self.c, "s0": self.s0, "s1": self.s1, "s2": self.s2}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> AleaState:
        return AleaState(
            c=int(d["c"]),
            s0=float(d["s0"]),
            s1=float(d["s1"]),
            s2=float(d["s2"]),
        )


class _Mash:
    def __init__(self) -> None:
        self._n: float = 0xEFC8249D

    def __call__(self, data: str) -> float:
        n = self._n
        for unit in utf16_code_units(data):
            n += unit
            h = 0.02519603282416938 * n
            n = int(h) & UINT32_MASK
            h -= n
            h *= n
            n = int(h) & UINT32_MASK
            h -= n
            n += h * 0x100000000
        self._n = n
        return (int(n) & UINT32_MASK) * _TWO_POW_NEG_32


class Alea:
    name = "alea"
    raw: Literal["fract32"] = "fract32"
    state_type = AleaState

    def seed_to_state(self, seed: Seed) -> AleaState:
        mash = _Mash()
        state = AleaState(c=1, s0=mash(" "), s1=mash(" "), s2=mash(" "))
        text = seed_string(seed)

        state.s0 -= mash(text)
        if state.s0 < 0:
            state.s0 += 1
        state.s1 -= mash(text)
        if state.s1 < 0:
            state.s1 += 1
        state.s2 -= mash(text)
        if state.s2 < 0:
            state.s2 += 1
        return state

    def advance(self, state: AleaState) -> float:
        t = _MULTIPLIER * state.s0 + state.c * _TWO_POW_NEG_32
        state.c = int(t)
        state.s0 = state.s1
        state.s1 = state.s2
        state.s2 = t - state.c
        return state.s2

    def clone_state(self, state: AleaState) -> AleaState:
        return state.copy()

    def load_state(self, record: Mapping[str, Any]) -> AleaState:
        return AleaState.from_dict(record)


ALEA = Alea()
