"""Tests for numpy bulk fills, including distribution checks."""

import numpy as np
import pytest

from unbiased_random.bulk import (
    fract32_array,
    histogram,
    int32_array,
    uint32_array,
)
from unbiased_random.conversions import fract_to_fract32
from unbiased_random.generators import ALGORITHMS, create_generator


class TestFill:
    def test_dtypes(self):
        gen = create_generator("xor128", seed=1)
        assert uint32_array(gen, 3).dtype == np.uint32
        assert int32_array(gen, 3).dtype == np.int32
        assert fract32_array(gen, 3).dtype == np.float64

    def test_matches_sequential_draws(self):
        a = create_generator("mulberry32", seed=1)
        b = create_generator("mulberry32", seed=1)
        values = uint32_array(a, 50, 8192, 32768)
        assert values.tolist() == [b.next_uint32(8192, 32768) for _ in range(50)]
        assert a.get_state() == b.get_state()

    def test_int32_full_domain(self):
        gen = create_generator("xorshift7", seed=4)
        assert int32_array(gen, 1)[0] == -1171430091

    def test_fract32_values_stay_on_grid(self):
        gen = create_generator("alea", seed=2)
        values = fract32_array(gen, 100, 0.375, 0.6875)
        assert values.min() >= 0.375
        assert values.max() < 0.6875
        assert all(fract_to_fract32(v) == v for v in values.tolist())

    def test_empty(self):
        gen = create_generator("alea", seed=2)
        assert uint32_array(gen, 0).shape == (0,)


def test_histogram_bins():
    counts = histogram(np.array([0, 1, 1, 2, 3, 3, 3]), 4, 0, 4)
    assert counts.tolist() == [1, 2, 1, 3]


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_uniform_over_small_range(name):
    # Chi-squared with 15 degrees of freedom; 50 is past the 0.99999 quantile.
    gen = create_generator(name, seed="distribution")
    n = 16000
    values = uint32_array(gen, n, 0, 16)
    counts = histogram(values, 16, 0, 16)
    expected = n / 16
    chi2 = float(((counts - expected) ** 2 / expected).sum())
    assert chi2 < 50


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_non_power_of_two_range_has_no_modulo_bias(name):
    # 3 * 2**30 does not divide 2**32; a modulo reduction would put half of
    # all values in the lowest third of the range.
    gen = create_generator(name, seed=99)
    n = 6000
    values = uint32_array(gen, n, 0, 3 * 2**30)
    low = int((values < 2**30).sum())
    assert abs(low - n / 3) < 200


@pytest.mark.parametrize("name", sorted(ALGORITHMS))
def test_fract32_mean(name):
    gen = create_generator(name, seed=5)
    values = fract32_array(gen, 5000)
    assert abs(values.mean() - 0.5) < 0.02
