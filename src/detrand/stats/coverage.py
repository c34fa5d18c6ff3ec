"""Empirical-rule checks for approximately normal samples.

For a normal distribution, fixed fractions of the mass lie within
1, 1.5, 2, 2.5 and 3 standard deviations of the mean (68-95-99.7 rule).
Comparing observed fractions against these is a cheap sanity check for
``rand_normal_dist`` output.
"""

from __future__ import annotations

from collections.abc import Sequence

import jax.numpy as jnp
from jax import Array

from detrand.distributions.normal import round_half_away

# Deviations from the mean -> expected fraction of samples within them.
PREDICTION_INTERVALS: dict[float, float] = {
    1.0: 0.68269,
    1.5: 0.86639,
    2.0: 0.95450,
    2.5: 0.98758,
    3.0: 0.99730,
}


def interval_bounds(mean: float, stddev: float, deviations: float) -> tuple[int, int]:
    """Integer bounds ``deviations`` standard deviations around ``mean``.

    Examples:
        >>> interval_bounds(0.0, 15.5563, 1.0)
        (-16, 16)

    """
    return (
        round_half_away(mean - deviations * stddev),
        round_half_away(mean + deviations * stddev),
    )


def interval_mass(samples: Array | Sequence[int], lo: int, hi: int) -> float:
    """Fraction of samples with ``lo <= s < hi``.

    Examples:
        >>> interval_mass([0, 1, 2, 3], 1, 3)
        0.5

    """
    x = jnp.asarray(samples)
    if x.size == 0:
        return 0.0
    inside = jnp.logical_and(x >= lo, x < hi)
    return float(jnp.sum(inside)) / x.size


def empirical_rule_report(
    samples: Array | Sequence[int],
    mean: float,
    stddev: float,
) -> dict[float, float]:
    """Observed mass within each entry of ``PREDICTION_INTERVALS``."""
    x = jnp.asarray(samples)
    report = {}
    for deviations in PREDICTION_INTERVALS:
        lo, hi = interval_bounds(mean, stddev, deviations)
        report[deviations] = interval_mass(x, lo, hi)
    return report


def check_normality(
    samples: Array | Sequence[int],
    mean: float,
    stddev: float,
    tolerance: float = 0.02,
) -> bool:
    """True if every observed interval mass is within ``tolerance`` of its prediction."""
    report = empirical_rule_report(samples, mean, stddev)
    return all(
        abs(report[deviations] - expected) < tolerance
        for deviations, expected in PREDICTION_INTERVALS.items()
    )
