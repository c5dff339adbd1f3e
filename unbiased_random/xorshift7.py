"""xorshift7, by François Panneton and Pierre L'ecuyer.

Eight words in a circular buffer with a cursor; each output combines shifted
copies of five buffer slots. Period 2**256 - 1.

An int32 seed fills slot 0. Any other seed is spelled out and folded across
all eight slots. A slot that has not been written yet contributes nothing
to the fold, so seeds of up to seven characters leave the buffer empty and
the non-zero guard repairs it. The buffer is never all zeroes, and 256
advances are discarded after seeding.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from .constants import UINT32_MASK
from .conversions import to_uint32, uint32_to_int32
from .seeding import Seed, is_int32_seed, seed_code_units

_SIZE = 8
_WARM_UP = 256


def _shl(x: int, k: int) -> int:
    return (x << k) & UINT32_MASK


@dataclass
class XorShift7State:
    X: list[int] = field(default_factory=list)
    i: int = 0

    def copy(self) -> XorShift7State:
        return XorShift7State(list(self.X), self.i)

    def to_dict(self) -> dict:
        return {"X": list(self.X), "i": self.i}

    @staticmethod
    def from_dict(d: Mapping[str, Any]) -> XorShift7State:
        return XorShift7State(
            X=[int(v) & UINT32_MASK for v in d["X"]],
            i=int(d["i"]) & (_SIZE - 1),
        )


class XorShift7:
    name = "xorshift7"
    raw: Literal["int32"] = "int32"
    state_type = XorShift7State

    def seed_to_state(self, seed: Seed) -> XorShift7State:
        if is_int32_seed(seed):
            X = [to_uint32(seed)] + [0] * (_SIZE - 1)
        else:
            slots: list[int | None] = [None] * _SIZE
            for j, unit in enumerate(seed_code_units(seed)):
                current = slots[j & 7] or 0
                following = slots[(j + 1) & 7]
                mixed = 0 if following is None else _shl(unit + following, 13)
                slots[j & 7] = _shl(current, 15) ^ mixed
            X = [v or 0 for v in slots]

        if not any(X):
            X[7] = UINT32_MASK

        state = XorShift7State(X=X, i=0)
        for _ in range(_WARM_UP):
            self.advance(state)
        return state

    def advance(self, state: XorShift7State) -> int:
        X, i = state.X, state.i

        t = X[i]
        t ^= t >> 7
        v = t ^ _shl(t, 24)
        t = X[(i + 1) & 7]
        v ^= t ^ (t >> 10)
        t = X[(i + 3) & 7]
        v ^= t ^ (t >> 3)
        t = X[(i + 4) & 7]
        v ^= t ^ _shl(t, 7)
        t = X[(i + 7) & 7]
        t ^= _shl(t, 13)
        v ^= t ^ _shl(t, 9)

        X[i] = v
        state.i = (i + 1) & 7
        return uint32_to_int32(v)

    def clone_state(self, state: XorShift7State) -> XorShift7State:
        return state.copy()

    def load_state(self, record: Mapping[str, Any]) -> XorShift7State:
        return XorShift7State.from_dict(record)


XORSHIFT7 = XorShift7()
