"""Irwin-Hall approximation to the normal distribution.

Summing ``n`` independent uniform draws and dividing by ``n`` gives a
value whose distribution approaches a normal one as ``n`` grows (the
central limit theorem). With a discrete uniform on ``[min, max]``:

    mean     = (min + max) / 2
    variance = ((max - min + 1)**2 - 1) / 12 / n

Only integer ``range`` draws are needed, so the sampler works with any
generator in this package.

References:
    - Irwin-Hall distribution: https://en.wikipedia.org/wiki/Irwin%E2%80%93Hall_distribution
"""

from __future__ import annotations

import math
from typing import Protocol

import jax.numpy as jnp
from jax import Array

from detrand.errors import PrngError


class RangeGenerator(Protocol):
    """Anything that draws integers from a closed interval."""

    def range(self, min: int, max: int) -> int: ...


def round_half_away(x: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Examples:
        >>> round_half_away(2.5), round_half_away(-2.5), round_half_away(-2.4)
        (3, -3, -2)

    """
    return int(x - 0.5) if x < 0 else int(x + 0.5)


def rand_normal_dist(generator: RangeGenerator, min: int, max: int, num_trials: int = 6) -> int:
    """Draw an approximately normal integer from ``[min, max]``.

    Args:
        generator: Source of uniform draws (``PseudoRandom`` or ``PcgRandom``).
        min: Lower bound (inclusive).
        max: Upper bound (inclusive).
        num_trials: Uniform draws averaged per sample. More trials give a
            narrower, more normal-looking distribution.

    Returns:
        Integer in ``[min, max]``.

    Raises:
        PrngError: If ``min > max`` or ``num_trials < 1``.

    Examples:
        >>> from detrand.generators import PcgRandom
        >>> pr = PcgRandom(486179)
        >>> -120 <= rand_normal_dist(pr, -120, 120, 20) <= 120
        True
        >>> rand_normal_dist(pr, 7, 7)
        7

    """
    if max < min:
        raise PrngError(f"invalid range (max < min): min={min}, max={max}")
    if num_trials < 1:
        raise PrngError(f"num_trials must be at least 1, got {num_trials}")

    accum = 0
    for _ in range(num_trials):
        accum += generator.range(min, max)
    value = round_half_away(accum / num_trials)
    if value < min:
        return min
    if value > max:
        return max
    return value


def expected_mean(min: int, max: int) -> float:
    """Mean of ``rand_normal_dist`` over ``[min, max]``."""
    return (min + max) / 2


def expected_stddev(min: int, max: int, num_trials: int) -> float:
    """Standard deviation of ``rand_normal_dist`` over ``[min, max]``.

    Examples:
        >>> round(expected_stddev(-120, 120, 20), 4)
        15.5563

    """
    span = max - min + 1
    return math.sqrt((span * span - 1) / 12 / num_trials)


def uniform_samples(generator: RangeGenerator, min: int, max: int, num_samples: int) -> Array:
    """Collect ``num_samples`` draws of ``generator.range(min, max)``.

    Returns:
        int32 array of shape ``(num_samples,)``.

    """
    return jnp.asarray([generator.range(min, max) for _ in range(num_samples)], dtype=jnp.int32)


def normal_samples(
    generator: RangeGenerator,
    min: int,
    max: int,
    num_trials: int,
    num_samples: int,
) -> Array:
    """Collect ``num_samples`` draws of ``rand_normal_dist``.

    Returns:
        int32 array of shape ``(num_samples,)``.

    Examples:
        >>> from detrand.generators import PcgRandom
        >>> samples = normal_samples(PcgRandom(3), -10, 10, 4, 100)
        >>> samples.shape
        (100,)
        >>> bool((samples >= -10).all() and (samples <= 10).all())
        True

    """
    return jnp.asarray(
        [rand_normal_dist(generator, min, max, num_trials) for _ in range(num_samples)],
        dtype=jnp.int32,
    )
