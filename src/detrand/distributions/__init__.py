"""Distributions derived from the uniform generators.

Everything here needs only a generator's ``range`` method, so the same
functions work for ``PseudoRandom`` and ``PcgRandom``.
"""

from detrand.distributions.normal import (
    RangeGenerator,
    expected_mean,
    expected_stddev,
    normal_samples,
    rand_normal_dist,
    round_half_away,
    uniform_samples,
)

__all__ = [
    "RangeGenerator",
    "rand_normal_dist",
    "round_half_away",
    "expected_mean",
    "expected_stddev",
    "normal_samples",
    "uniform_samples",
]
