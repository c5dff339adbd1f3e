"""Marsaglia's xor128, period 2**128 - 1.

Four words rotate through a classic xorshift recurrence. An int32 seed is
placed in ``x``; any other seed is spelled out and xor-folded into ``x`` one
character per advance, followed by 64 discarded advances.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .constants import UINT32_MASK
from .conversions import to_uint32, uint32_to_int32
from .seeding import Seed, is_int32_seed, seed_code_units

_WARM_UP = 64


@dataclass
class Xor128State:
    w: int
    x: int
    y: int
    z: int

    def copy(self) -> Xor128State:
        return Xor128State(self.w, self.x, self.y, self.z)

    def to_dict(self) -> dict:
        return {"w": self.w, "x": self.x, "y": self.y, "z": self.z}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> Xor128State:
        return Xor128State(
            w=int(d["w"]) & UINT32_MASK,
            x=int(d["x"]) & UINT32_MASK,
            y=int(d["y"]) & UINT32_MASK,
            z=int(d["z"]) & UINT32_MASK,
        )


class Xor128:
    name = "xor128"
    raw: Literal["int32"] = "int32"
    state_type = Xor128State

    def seed_to_state(self, seed: Seed) -> Xor128State:
        state = Xor128State(w=0, x=0, y=0, z=0)

        units: list[int] = []
        if is_int32_seed(seed):
            state.x = to_uint32(seed)
        else:
            units = seed_code_units(seed)

        for unit in units:
            state.x ^= unit
            self.advance(state)
        for _ in range(_WARM_UP):
            self.advance(state)
        return state

    def advance(self, state: Xor128State) -> int:
        t = state.x ^ ((state.x << 11) & UINT32_MASK)
        state.x = state.y
        state.y = state.z
        state.z = state.w
        state.w ^= (state.w >> 19) ^ t ^ (t >> 8)
        return uint32_to_int32(state.w)

    def clone_state(self, state: Xor128State) -> Xor128State:
        return state.copy()

    def load_state(self, record: Mapping[str, Any]) -> Xor128State:
        return Xor128State.from_dict(record)


XOR128 = Xor128()
