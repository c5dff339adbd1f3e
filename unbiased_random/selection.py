"""Random selection, sampling and shuffling over sequences and strings.

Every helper takes a ``random_uint32_fn`` with the ``BoundedUint32Fn``
shape ``(min_inclusive, max_exclusive) -> int``. A seeded generator's
``next_uint32`` method fits, which makes any of these reproducible; the
default is the module-level insecure source.

Unique sampling shuffles a copy and takes a prefix, so "unique" means unique
by position: a sequence holding repeated values can still yield repeats.
"""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from .sources import BoundedUint32Fn, math_random_uint32

T = TypeVar("T")


def shuffle_array(
    array: Sequence[T], random_uint32_fn: BoundedUint32Fn = math_random_uint32
) -> list[T]:
    """Fisher-Yates shuffle into a new list; ``array`` is left untouched."""
    result = list(array)
    for i in range(len(result), 0, -1):
        j = random_uint32_fn(0, i)
        result[i - 1], result[j] = result[j], result[i - 1]
    return result


def random_array_index(
    array: Sequence[object],
    random_uint32_fn: BoundedUint32Fn = math_random_uint32,
) -> int:
    return random_uint32_fn(0, len(array))


def random_array_entry(
    array: Sequence[T], random_uint32_fn: BoundedUint32Fn = math_random_uint32
) -> tuple[int, T]:
    index = random_array_index(array, random_uint32_fn)
    return index, array[index]


def random_array_value(
    array: Sequence[T], random_uint32_fn: BoundedUint32Fn = math_random_uint32
) -> T:
    return array[random_array_index(array, random_uint32_fn)]


def _clamp_count(count: float) -> int:
    return max(0, math.floor(count))


def _sample_indices(
    length: int,
    count: float,
    random_uint32_fn: BoundedUint32Fn,
    unique: bool,
) -> list[int]:
    n = _clamp_count(count)
    if unique:
        return shuffle_array(range(length), random_uint32_fn)[:n]
    return [random_uint32_fn(0, length) for _ in range(n)]


def sample_array_indices(
    array: Sequence[object],
    count: float = 1,
    random_uint32_fn: BoundedUint32Fn = math_random_uint32,
    unique: bool = True,
) -> list[int]:
    return _sample_indices(len(array), count, random_uint32_fn, unique)


def sample_array_entries(
    array: Sequence[T],
    count: float = 1,
    random_uint32_fn: BoundedUint32Fn = math_random_uint32,
    unique: bool = True,
) -> list[tuple[int, T]]:
    return [
        (index, array[index])
        for index in _sample_indices(
            len(array), count, random_uint32_fn, unique
        )
    ]


def sample_array_values(
    array: Sequence[T],
    count: float = 1,
    random_uint32_fn: BoundedUint32Fn = math_random_uint32,
    unique: bool = True,
) -> list[T]:
    return [
        array[index]
        for index in _sample_indices(
            len(array), count, random_uint32_fn, unique
        )
    ]


# -- Strings ---------------------------------------------------------


def shuffle_string(
    text: str, random_uint32_fn: BoundedUint32Fn = math_random_uint32
) -> str:
    return "".join(shuffle_array(text, random_uint32_fn))


def random_string_index(
    text: str, random_uint32_fn: BoundedUint32Fn = math_random_uint32
) -> int:
    return random_array_index(text, random_uint32_fn)


def random_string_entry(
    text: str, random_uint32_fn: BoundedUint32Fn = math_random_uint32
) -> tuple[int, str]:
    return random_array_entry(text, random_uint32_fn)


def random_string_value(
    text: str, random_uint32_fn: BoundedUint32Fn = math_random_uint32
) -> str:
    return random_array_value(text, random_uint32_fn)


def sample_string_indices(
    text: str,
    count: float = 1,
    random_uint32_fn: BoundedUint32Fn = math_random_uint32,
    unique: bool = True,
) -> list[int]:
    return sample_array_indices(text, count, random_uint32_fn, unique)


def sample_string_entries(
    text: str,
    count: float = 1,
    random_uint32_fn: BoundedUint32Fn = math_random_uint32,
    unique: bool = True,
) -> list[tuple[int, str]]:
    return sample_array_entries(text, count, random_uint32_fn, unique)


def sample_string_values(
    text: str,
    count: float = 1,
    random_uint32_fn: BoundedUint32Fn = math_random_uint32,
    unique: bool = True,
) -> list[str]:
    return sample_array_values(text, count, random_uint32_fn, unique)
