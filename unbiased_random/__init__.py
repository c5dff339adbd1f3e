"""Unbiased bounded random numbers from seeded and entropy sources."""

from .assertions import RangeError
from .generators import (
    ALGORITHMS,
    DEFAULT_ALGORITHM,
    GeneratorConfig,
    create_generator,
    get_algorithm,
)
from .seeded import SeedAlgorithm, SeededNumberGenerator
from .sources import (
    InsecureNumberGenerator,
    RandomNumberGenerator,
    SecureNumberGenerator,
)

__all__ = [
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "GeneratorConfig",
    "InsecureNumberGenerator",
    "RandomNumberGenerator",
    "RangeError",
    "SecureNumberGenerator",
    "SeedAlgorithm",
    "SeededNumberGenerator",
    "create_generator",
    "get_algorithm",
]
