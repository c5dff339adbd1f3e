"""Marsaglia's xorwow: xorshift plus an additive Weyl sequence.

Five xorshift words and a Weyl counter ``d`` stepped by 362437, giving a
period of 2**192 - 2**32. Seeding follows xor128; once the seed characters
are consumed the Weyl counter is initialised from ``x``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .constants import UINT32_MASK
from .conversions import to_uint32, uint32_to_int32
from .seeding import Seed, is_int32_seed, seed_code_units

_WARM_UP = 64
_WEYL_STEP = 362437


@dataclass
class XorWowState:
    d: int
    v: int
    w: int
    x: int
    y: int
    z: int

    def copy(self) -> XorWowState:
        return XorWowState(self.d, self.v, self.w, self.x, self.y, self.z)

    def to_dict(self) -> dict:
        return {
            "d": self.d,
            "v": self.v,
            "w": self.w,
            "x": self.x,
            "y": self.y,
            "z": self.z,
        }

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> XorWowState:
        return XorWowState(
            **{k: int(d[k]) & UINT32_MASK for k in ("d", "v", "w", "x", "y", "z")}
        )


class XorWow:
    name = "xorwow"
    raw: Literal["int32"] = "int32"
    state_type = XorWowState

    def seed_to_state(self, seed: Seed) -> XorWowState:
        state = XorWowState(d=0, v=0, w=0, x=0, y=0, z=0)

        units: list[int] = []
        if is_int32_seed(seed):
            state.x = to_uint32(seed)
        else:
            units = seed_code_units(seed)

        for unit in units:
            state.x ^= unit
            self.advance(state)
        state.d = ((state.x << 10) & UINT32_MASK) ^ (state.x >> 4)
        for _ in range(_WARM_UP):
            self.advance(state)
        return state

    def advance(self, state: XorWowState) -> int:
        t = state.x ^ (state.x >> 2)
        state.x = state.y
        state.y = state.z
        state.z = state.w
        state.w = state.v
        state.d = (state.d + _WEYL_STEP) & UINT32_MASK
        state.v = (
            state.v
            ^ ((state.v << 4) & UINT32_MASK)
            ^ (t ^ ((t << 1) & UINT32_MASK))
        )
        return uint32_to_int32(state.d + state.v)

    def clone_state(self, state: XorWowState) -> XorWowState:
        return state.copy()

    def load_state(self, record: Mapping[str, Any]) -> XorWowState:
        return XorWowState.from_dict(record)


XORWOW = XorWow()
