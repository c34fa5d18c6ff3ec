"""Tests for detrand.clock module."""

from __future__ import annotations

import os

from hypothesis import given, settings
from hypothesis import strategies as st

from detrand.clock import MASK64, entropy_seed, splitmix64, system_clock


class TestSystemClock:
    """Tests for system_clock."""

    def test_nanoseconds(self):
        assert system_clock() > 1_500_000_000 * 10**9

    def test_non_decreasing(self):
        first = system_clock()
        assert system_clock() >= first


class TestSplitmix64:
    """Tests for splitmix64."""

    def test_known_value(self):
        # first output of the reference SplitMix64 stream seeded with 0
        assert splitmix64(0) == 0xE220A8397B1DCDAF

    @given(st.integers(min_value=0, max_value=MASK64))
    @settings(max_examples=50)
    def test_fits_64_bits(self, x):
        assert 0 <= splitmix64(x) <= MASK64


class TestEntropySeed:
    """Tests for entropy_seed."""

    def test_injected_clock_is_deterministic(self):
        assert entropy_seed(lambda: 5, pid=1) == entropy_seed(lambda: 5, pid=1)

    def test_clock_changes_seed(self):
        assert entropy_seed(lambda: 5, pid=1) != entropy_seed(lambda: 6, pid=1)

    def test_pid_changes_seed(self):
        assert entropy_seed(lambda: 5, pid=1) != entropy_seed(lambda: 5, pid=2)

    def test_defaults_to_current_pid(self):
        assert entropy_seed(lambda: 5) == entropy_seed(lambda: 5, pid=os.getpid())

    def test_default_clock(self):
        assert 0 <= entropy_seed() <= MASK64
