"""Save and load seeded generator state as JSON.

The file holds the algorithm's plain state record under ``"state"`` and the
registry name under ``"algorithm"``, so a checkpoint can be resumed without
the caller remembering which algorithm wrote it:

    {"algorithm": "xor128", "state": {"w": ..., "x": ..., "y": ..., "z": ...}}

Used by ``cli.py`` for ``--state-in``/``--state-out``.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .generators import get_algorithm
from .seeded import SeededNumberGenerator

logger = logging.getLogger(__name__)


def state_to_dict(generator: SeededNumberGenerator[Any]) -> dict:
    return {
        "algorithm": generator.algorithm.name,
        "state": generator.get_state().to_dict(),
    }


def state_from_dict(d: dict) -> SeededNumberGenerator[Any]:
    """Rebuild a generator from a ``state_to_dict`` mapping.

    Raises ValueError if the mapping names no known algorithm or lacks a
    state record.
    """
    if "algorithm" not in d or "state" not in d:
        raise ValueError("State data must contain 'algorithm' and 'state' keys")
    algorithm = get_algorithm(d["algorithm"])
    try:
        return SeededNumberGenerator(algorithm, state=d["state"])
    except (KeyError, TypeError) as e:
        raise ValueError(
            f"Malformed {algorithm.name} state record: {e!r}"
        ) from e


def state_to_json(generator: SeededNumberGenerator[Any]) -> str:
    return json.dumps(state_to_dict(generator))


def state_from_json(text: str) -> SeededNumberGenerator[Any]:
    return state_from_dict(json.loads(text))


def save_state(path: str, generator: SeededNumberGenerator[Any]) -> None:
    with open(path, "w") as f:
        json.dump(state_to_dict(generator), f)
    logger.debug("Saved %s state to %s", generator.algorithm.name, path)


def load_state(path: str) -> SeededNumberGenerator[Any]:
    with open(path) as f:
        generator = state_from_dict(json.load(f))
    logger.debug("Loaded %s state from %s", generator.algorithm.name, path)
    return generator
