"""Tests for sequence and string selection helpers."""

from collections import Counter

import pytest

from unbiased_random.generators import create_generator
from unbiased_random.selection import (
    random_array_entry,
    random_array_index,
    random_array_value,
    random_string_entry,
    random_string_index,
    random_string_value,
    sample_array_entries,
    sample_array_indices,
    sample_array_values,
    sample_string_entries,
    sample_string_indices,
    sample_string_values,
    shuffle_array,
    shuffle_string,
)


class RecordingFn:
    """Bounded function that always returns ``pick(lo, hi)``."""

    def __init__(self, pick):
        self.pick = pick
        self.calls = []

    def __call__(self, lo, hi):
        self.calls.append((lo, hi))
        return self.pick(lo, hi)


def _lowest():
    return RecordingFn(lambda lo, hi: lo)


def _highest():
    return RecordingFn(lambda lo, hi: hi - 1)


def _seeded(seed=1):
    return create_generator("xor128", seed=seed).next_uint32


# --- shuffle ---


class TestShuffleArray:
    def test_draw_order(self):
        fn = _lowest()
        assert shuffle_array(["a", "b", "c", "d"], fn) == ["b", "c", "d", "a"]
        assert fn.calls == [(0, 4), (0, 3), (0, 2), (0, 1)]

    def test_highest_draws_leave_order(self):
        assert shuffle_array([1, 2, 3], _highest()) == [1, 2, 3]

    def test_input_untouched(self):
        data = [1, 2, 3, 4]
        shuffle_array(data, _lowest())
        assert data == [1, 2, 3, 4]

    def test_is_a_permutation(self):
        data = list(range(50))
        assert sorted(shuffle_array(data, _seeded())) == data

    def test_reproducible_with_seeded_generator(self):
        data = list(range(20))
        assert shuffle_array(data, _seeded(7)) == shuffle_array(data, _seeded(7))

    def test_empty(self):
        assert shuffle_array([], _lowest()) == []

    def test_default_source(self):
        assert sorted(shuffle_array([3, 1, 2])) == [1, 2, 3]


# --- single picks ---


class TestRandomArray:
    def test_index(self):
        fn = _highest()
        assert random_array_index(["a", "b", "c"], fn) == 2
        assert fn.calls == [(0, 3)]

    def test_entry(self):
        assert random_array_entry(["a", "b", "c"], _lowest()) == (0, "a")

    def test_value(self):
        assert random_array_value(["a", "b", "c"], _highest()) == "c"

    def test_empty_sequence_has_no_index(self):
        with pytest.raises(ValueError):
            random_array_index([], _seeded())

    def test_default_source_covers_all_values(self):
        seen = {random_array_value("xyz") for _ in range(300)}
        assert seen == {"x", "y", "z"}


# --- sampling ---


class TestSampleArray:
    def test_unique_indices_are_distinct(self):
        indices = sample_array_indices(list(range(30)), 10, _seeded())
        assert len(indices) == 10
        assert len(set(indices)) == 10
        assert all(0 <= i < 30 for i in indices)

    def test_unique_count_capped_at_length(self):
        values = sample_array_values(["a", "b", "c"], 10, _seeded())
        assert sorted(values) == ["a", "b", "c"]

    def test_count_is_floored(self):
        assert len(sample_array_indices(list(range(10)), 2.7, _seeded())) == 2

    @pytest.mark.parametrize("count", [0, -3, 0.5])
    def test_non_positive_count(self, count):
        assert sample_array_values([1, 2, 3], count, _seeded()) == []

    def test_default_count_is_one(self):
        assert len(sample_array_values([1, 2, 3], random_uint32_fn=_seeded())) == 1

    def test_non_unique_may_repeat(self):
        fn = _lowest()
        values = sample_array_values(["a", "b"], 5, fn, unique=False)
        assert values == ["a"] * 5
        assert fn.calls == [(0, 2)] * 5

    def test_entries_pair_index_and_value(self):
        data = ["p", "q", "r", "s"]
        for index, value in sample_array_entries(data, 3, _seeded()):
            assert data[index] == value

    def test_unique_means_unique_positions(self):
        values = sample_array_values([1, 1, 1], 3, _seeded())
        assert values == [1, 1, 1]

    def test_roughly_uniform(self):
        gen = create_generator("alea", seed="uniform")
        counts = Counter(
            sample_array_values(range(4), 1, gen.next_uint32)[0]
            for _ in range(4000)
        )
        for value in range(4):
            assert 850 < counts[value] < 1150


# --- strings ---


class TestStrings:
    def test_shuffle_string(self):
        assert shuffle_string("abcd", _lowest()) == "bcda"
        assert sorted(shuffle_string("hello", _seeded())) == sorted("hello")

    def test_random_string_picks(self):
        assert random_string_index("abc", _highest()) == 2
        assert random_string_entry("abc", _lowest()) == (0, "a")
        assert random_string_value("abc", _highest()) == "c"

    def test_sample_string(self):
        assert sample_string_indices("abc", 3, _highest(), unique=False) == [2, 2, 2]
        assert sample_string_values("abc", 2, _lowest(), unique=False) == ["a", "a"]
        entries = sample_string_entries("abcdef", 4, _seeded())
        assert len({i for i, _ in entries}) == 4
        assert all("abcdef"[i] == c for i, c in entries)
