"""Lifecycle tests shared by every seeded algorithm."""

import pytest

from unbiased_random.constants import TWO_POW_31, TWO_POW_32
from unbiased_random.conversions import fract_to_fract32
from unbiased_random.generators import ALGORITHMS
from unbiased_random.seeded import SeededNumberGenerator

ALL = sorted(ALGORITHMS)


class CountingEntropy:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def next_fract32(self, min_inclusive=None, max_exclusive=None):
        raise AssertionError("unexpected fract32 draw")

    def next_int32(self, min_inclusive=None, max_exclusive=None):
        raise AssertionError("unexpected int32 draw")

    def next_uint32(self, min_inclusive=None, max_exclusive=None):
        self.calls += 1
        return self.value


def _gen(name, **kwargs):
    return SeededNumberGenerator(ALGORITHMS[name], **kwargs)


def _draws(gen, n=20):
    return [gen.next_uint32() for _ in range(n)]


@pytest.mark.parametrize("name", ALL)
class TestLifecycle:
    def test_equal_seeds_give_equal_sequences(self, name):
        for seed in (0, 123, -7, 2.5, 2**40, "start", ""):
            assert _draws(_gen(name, seed=seed)) == _draws(_gen(name, seed=seed))

    def test_different_seeds_diverge(self, name):
        assert _draws(_gen(name, seed=1)) != _draws(_gen(name, seed=2))

    def test_seed_fn_matches_seed(self, name):
        calls = []

        def seed_fn():
            calls.append(1)
            return "start"

        assert _draws(_gen(name, seed_fn=seed_fn)) == _draws(
            _gen(name, seed="start")
        )
        assert calls == [1]

    def test_seed_takes_priority_over_seed_fn(self, name):
        def seed_fn():
            raise AssertionError("seed_fn should not be called")

        gen = _gen(name, seed=5, seed_fn=seed_fn)
        assert _draws(gen) == _draws(_gen(name, seed=5))

    def test_unseeded_uses_injected_entropy(self, name):
        entropy = CountingEntropy(98765)
        gen = _gen(name, entropy=entropy)
        assert entropy.calls == 1
        assert _draws(gen) == _draws(_gen(name, seed=98765))

    def test_unseeded_without_entropy(self, name):
        gen = _gen(name)
        assert 0 <= gen.next_uint32() < TWO_POW_32

    def test_restore_from_state_continues_sequence(self, name):
        gen = _gen(name, seed=123)
        _draws(gen, 7)
        restored = _gen(name, state=gen.get_state())
        assert _draws(restored) == _draws(gen)

    def test_restore_from_dict_continues_sequence(self, name):
        gen = _gen(name, seed="start")
        _draws(gen, 3)
        restored = _gen(name, state=gen.get_state().to_dict())
        assert _draws(restored) == _draws(gen)

    def test_state_takes_priority_over_seed(self, name):
        gen = _gen(name, seed=1)
        restored = _gen(name, seed=2, state=gen.get_state())
        assert _draws(restored) == _draws(gen)

    def test_get_state_returns_new_object(self, name):
        gen = _gen(name, seed=1)
        first = gen.get_state()
        second = gen.get_state()
        assert first is not second
        assert first == second

    def test_state_snapshot_is_independent(self, name):
        gen = _gen(name, seed=1)
        snapshot = gen.get_state()
        before = snapshot.to_dict()
        _draws(gen, 5)
        assert snapshot.to_dict() == before

    def test_passed_state_is_not_adopted_by_reference(self, name):
        source = _gen(name, seed=1)
        state = source.get_state()
        restored = _gen(name, state=state)
        _draws(restored, 5)
        assert state == source.get_state()

    def test_ranges(self, name):
        gen = _gen(name, seed=42)
        for _ in range(200):
            assert 8192 <= gen.next_uint32(8192, 32768) < 32768
            assert -5 <= gen.next_int32(-5, 5) < 5
            f = gen.next_fract32(0.375, 0.6875)
            assert 0.375 <= f < 0.6875
            assert fract_to_fract32(f) == f

    def test_default_domains(self, name):
        gen = _gen(name, seed=42)
        for _ in range(200):
            assert 0 <= gen.next_uint32() < TWO_POW_32
            assert -TWO_POW_31 <= gen.next_int32() < TWO_POW_31
            f = gen.next_fract32()
            assert 0 <= f < 1
            assert fract_to_fract32(f) == f

    @pytest.mark.parametrize("seed", [float("nan"), float("inf")])
    def test_rejects_non_finite_seed(self, name, seed):
        with pytest.raises(ValueError):
            _gen(name, seed=seed)

    def test_rejects_bad_seed_type(self, name):
        with pytest.raises(TypeError):
            _gen(name, seed=b"bytes")


def test_algorithm_property():
    gen = _gen("xor128", seed=1)
    assert gen.algorithm is ALGORITHMS["xor128"]


def test_raw_kinds():
    assert {a.raw for a in ALGORITHMS.values()} == {"uint32", "int32", "fract32"}


# --- construction errors ---


@pytest.mark.parametrize("name", ALL)
@pytest.mark.parametrize("seed", [10**400, -(10**400)])
def test_rejects_integer_seed_beyond_float_range(name, seed):
    with pytest.raises(ValueError, match="finite"):
        _gen(name, seed=seed)


@pytest.mark.parametrize("name", ALL)
@pytest.mark.parametrize("state", [[1, 2, 3, 4], (1, 2), 7])
def test_rejects_state_of_wrong_type(name, state):
    with pytest.raises(TypeError, match=name):
        _gen(name, state=state)


def test_rejects_state_of_another_algorithm():
    other = _gen("xor128", seed=1).get_state()
    with pytest.raises(TypeError, match="Xor128State"):
        _gen("xorwow", state=other)


# --- advance only as needed ---


class CountingAlgorithm:
    """Wraps an algorithm and counts ``advance`` calls.

    With ``script``, ``advance`` replays those raw values instead of
    stepping the real state.
    """

    def __init__(self, inner, script=None):
        self._inner = inner
        self._script = None if script is None else iter(script)
        self.name = inner.name
        self.raw = inner.raw
        self.state_type = inner.state_type
        self.calls = 0

    def seed_to_state(self, seed):
        return self._inner.seed_to_state(seed)

    def advance(self, state):
        self.calls += 1
        if self._script is not None:
            return next(self._script)
        return self._inner.advance(state)

    def clone_state(self, state):
        return self._inner.clone_state(state)

    def load_state(self, record):
        return self._inner.load_state(record)


@pytest.mark.parametrize("name", ALL)
class TestAdvanceCount:
    def _counted(self, name):
        algorithm = CountingAlgorithm(ALGORITHMS[name])
        gen = SeededNumberGenerator(algorithm, seed=1)
        algorithm.calls = 0
        return algorithm, gen

    def test_unbounded_draws_advance_once(self, name):
        algorithm, gen = self._counted(name)
        gen.next_uint32()
        gen.next_int32()
        gen.next_fract32()
        assert algorithm.calls == 3

    def test_one_unit_ranges_do_not_advance(self, name):
        algorithm, gen = self._counted(name)
        assert gen.next_uint32(5, 6) == 5
        assert gen.next_int32(-3, -2) == -3
        assert gen.next_fract32(0.125, 0.125 + 2**-32) == 0.125
        assert algorithm.calls == 0

    def test_power_of_two_range_advances_once(self, name):
        algorithm, gen = self._counted(name)
        for _ in range(20):
            gen.next_uint32(0, 256)
        assert algorithm.calls == 20


def test_rejected_draw_advances_again():
    # Range 24576 masks to 15 bits; 0xFFFF masks to 32767 and is rejected.
    algorithm = CountingAlgorithm(ALGORITHMS["mulberry32"], script=[0xFFFF, 100])
    gen = SeededNumberGenerator(algorithm, seed=1)
    assert gen.next_uint32(8192, 32768) == 8292
    assert algorithm.calls == 2
