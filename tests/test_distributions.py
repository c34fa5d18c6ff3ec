"""Tests for detrand.distributions module."""

from __future__ import annotations

import jax.numpy as jnp
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from detrand.distributions import (
    expected_mean,
    expected_stddev,
    normal_samples,
    rand_normal_dist,
    round_half_away,
    uniform_samples,
)
from detrand.errors import PrngError
from detrand.generators import PcgRandom, PseudoRandom


class ScriptedGenerator:
    """Replays a fixed list of range() results."""

    def __init__(self, values):
        self._values = iter(values)
        self.calls = []

    def range(self, min, max):
        self.calls.append((min, max))
        return next(self._values)


class TestRoundHalfAway:
    """Tests for round_half_away."""

    def test_ties(self):
        assert round_half_away(0.5) == 1
        assert round_half_away(-0.5) == -1
        assert round_half_away(1.5) == 2

    def test_non_ties(self):
        assert round_half_away(2.49) == 2
        assert round_half_away(-2.51) == -3
        assert round_half_away(0.0) == 0


class TestRandNormalDist:
    """Tests for rand_normal_dist."""

    def test_averages_draws(self):
        gen = ScriptedGenerator([1, 2, 3, 4])
        assert rand_normal_dist(gen, 0, 10, 4) == 3  # 2.5 rounds away from zero
        assert gen.calls == [(0, 10)] * 4

    def test_negative_average_rounds_away(self):
        gen = ScriptedGenerator([-1, -2])
        assert rand_normal_dist(gen, -5, 5, 2) == -2

    def test_default_trials(self):
        gen = ScriptedGenerator([0] * 6)
        rand_normal_dist(gen, 0, 1)
        assert len(gen.calls) == 6

    def test_clamps_misbehaving_generator(self):
        assert rand_normal_dist(ScriptedGenerator([50]), 0, 10, 1) == 10
        assert rand_normal_dist(ScriptedGenerator([-50]), 0, 10, 1) == 0

    def test_reversed_bounds_raise(self):
        with pytest.raises(PrngError):
            rand_normal_dist(PcgRandom(1), 10, -10, 4)

    def test_zero_trials_raise(self):
        with pytest.raises(PrngError):
            rand_normal_dist(PcgRandom(1), -10, 10, 0)

    def test_method_shortcuts(self):
        a, b = PcgRandom(77), PcgRandom(77)
        assert a.rand_normal_dist(-120, 120, 20) == rand_normal_dist(b, -120, 120, 20)
        c, d = PseudoRandom(77), PseudoRandom(77)
        assert c.rand_normal_dist(-120, 120) == rand_normal_dist(d, -120, 120)

    def test_deterministic(self):
        a, b = PcgRandom(42), PcgRandom(42)
        s1 = [rand_normal_dist(a, -50, 50, 8) for _ in range(100)]
        s2 = [rand_normal_dist(b, -50, 50, 8) for _ in range(100)]
        assert s1 == s2

    def test_pseudo_random_containment(self):
        pr = PseudoRandom(486179)
        for _ in range(5000):
            assert -120 <= rand_normal_dist(pr, -120, 120, 20) <= 120

    @given(
        seed=st.integers(min_value=0, max_value=2**64 - 1),
        lo=st.integers(min_value=-(2**31), max_value=2**31 - 1),
        width=st.integers(min_value=0, max_value=2**20),
        trials=st.integers(min_value=1, max_value=30),
    )
    @settings(max_examples=50)
    def test_in_range_property(self, seed, lo, width, trials):
        """Property: samples never leave [min, max]."""
        hi = min(lo + width, 2**31 - 1)
        value = rand_normal_dist(PcgRandom(seed), lo, hi, trials)
        assert lo <= value <= hi


class TestMoments:
    """Tests for expected_mean and expected_stddev."""

    def test_mean(self):
        assert expected_mean(-120, 120) == 0.0
        assert expected_mean(0, 9) == 4.5

    def test_stddev(self):
        assert expected_stddev(-120, 120, 20) == pytest.approx(242.0 ** 0.5)

    def test_stddev_shrinks_with_trials(self):
        assert expected_stddev(0, 100, 30) < expected_stddev(0, 100, 3)

    def test_sampled_moments(self):
        samples = normal_samples(PcgRandom(2024), -120, 120, 20, 20000)
        assert abs(float(jnp.mean(samples))) < 0.5
        assert float(jnp.std(samples)) == pytest.approx(expected_stddev(-120, 120, 20), rel=0.03)


class TestSampleArrays:
    """Tests for uniform_samples and normal_samples."""

    def test_uniform_shape_and_dtype(self):
        samples = uniform_samples(PcgRandom(1), -5, 5, 100)
        assert samples.shape == (100,)
        assert samples.dtype == jnp.int32

    def test_uniform_matches_range(self):
        expected = [PcgRandom(8).range(0, 9)]
        samples = uniform_samples(PcgRandom(8), 0, 9, 1)
        assert samples.tolist() == expected

    def test_uniform_covers_interval(self):
        samples = uniform_samples(PcgRandom(5), 0, 9, 2000)
        assert set(samples.tolist()) == set(range(10))

    def test_normal_bounds(self):
        samples = normal_samples(PseudoRandom(11), -30, 30, 6, 500)
        assert int(jnp.min(samples)) >= -30
        assert int(jnp.max(samples)) <= 30

    def test_empty(self):
        assert normal_samples(PcgRandom(1), 0, 1, 2, 0).shape == (0,)
