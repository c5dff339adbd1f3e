"""Algorithm registry and generator construction from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .alea import ALEA
from .mulberry32 import MULBERRY32
from .seeded import SeedAlgorithm, SeededNumberGenerator
from .seeding import Seed
from .sources import RandomNumberGenerator
from .tychei import TYCHEI
from .xor128 import XOR128
from .xor4096 import XOR4096
from .xorshift7 import XORSHIFT7
from .xorwow import XORWOW

ALGORITHMS: dict[str, SeedAlgorithm[Any]] = {
    algorithm.name: algorithm
    for algorithm in (
        ALEA,
        MULBERRY32,
        TYCHEI,
        XOR128,
        XORWOW,
        XORSHIFT7,
        XOR4096,
    )
}

DEFAULT_ALGORITHM = ALEA.name


def get_algorithm(name: str) -> SeedAlgorithm[Any]:
    try:
        return ALGORITHMS[name]
    except KeyError:
        available = ", ".join(sorted(ALGORITHMS))
        raise ValueError(
            f"Algorithm {name!r} not found (available: {available})"
        ) from None


@dataclass
class GeneratorConfig:
    algorithm: str = DEFAULT_ALGORITHM
    seed: Seed | None = None
    state: dict | None = None

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        return GeneratorConfig(
            algorithm=d.get("algorithm", DEFAULT_ALGORITHM),
            seed=d.get("seed"),
            state=d.get("state"),
        )

    def to_dict(self) -> dict:
        d: dict = {"algorithm": self.algorithm}
        if self.seed is not None:
            d["seed"] = self.seed
        if self.state is not None:
            d["state"] = self.state
        return d


def create_generator(
    config: GeneratorConfig | str = DEFAULT_ALGORITHM,
    *,
    seed: Seed | None = None,
    seed_fn: Callable[[], Seed] | None = None,
    state: Any = None,
    entropy: RandomNumberGenerator | None = None,
) -> SeededNumberGenerator[Any]:
    """Build a generator by algorithm name or from a ``GeneratorConfig``.

    Keyword arguments override the corresponding config fields.
    """
    if isinstance(config, str):
        config = GeneratorConfig(algorithm=config)
    return SeededNumberGenerator(
        get_algorithm(config.algorithm),
        seed=seed if seed is not None else config.seed,
        seed_fn=seed_fn,
        state=state if state is not None else config.state,
        entropy=entropy,
    )
