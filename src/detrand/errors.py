"""Exceptions raised by detrand generators and samplers."""

from __future__ import annotations


class PrngError(ValueError):
    """Invalid request to a generator or sampler.

    Raised immediately, never deferred: a reversed or oversized range,
    a non-positive trial count, a byte target outside its buffer, or a
    malformed generator state. The library never clamps or swaps
    arguments to recover.

    Examples:
        >>> from detrand.generators import PcgRandom
        >>> PcgRandom(1).range(5, 1)
        Traceback (most recent call last):
            ...
        detrand.errors.PrngError: invalid range (max < min): min=5, max=1

    """
