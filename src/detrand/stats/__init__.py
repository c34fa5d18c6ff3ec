"""Statistical checks for generator output.

Cheap distribution-shape tests built on jax.numpy reductions, meant for
validating samplers rather than certifying generators.
"""

from detrand.stats.coverage import (
    PREDICTION_INTERVALS,
    check_normality,
    empirical_rule_report,
    interval_bounds,
    interval_mass,
)

__all__ = [
    "PREDICTION_INTERVALS",
    "interval_bounds",
    "interval_mass",
    "empirical_rule_report",
    "check_normality",
]
