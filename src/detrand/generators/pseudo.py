"""Classic 32-bit linear-congruential generator.

``PseudoRandom`` advances a single 32-bit state with the well-known
``1103515245 * x + 12345`` recurrence and returns 15 bits taken from
the upper half of the state. It is fast and reproducible but has a
short period and weak low bits; use ``PcgRandom`` when quality
matters.

References:
    - ISO C ``rand()`` sample implementation (same constants).
"""

from __future__ import annotations

from detrand.distributions.normal import rand_normal_dist
from detrand.errors import PrngError

MASK32 = 0xFFFFFFFF
MULTIPLIER = 0x41C64E6D
INCREMENT = 0x3039


def _to_int32(x: int) -> int:
    return x - (1 << 32) if x & 0x80000000 else x


class PseudoRandom:
    """Linear-congruential generator with output in ``[0, 32767]``.

    Args:
        seed: Initial state. Wrapped to 32 bits.

    Examples:
        >>> pr = PseudoRandom(814538)
        >>> [hex(pr.next()) for _ in range(3)]
        ['0x2fa', '0x60d5', '0x6c10']

    """

    RANDOM_MAX = 32767
    RANDOM_RANGE = 32767
    # Widest span range() accepts before the modulo mapping becomes
    # visibly uneven. Always below the native RANDOM_RANGE.
    MAX_SPAN = (RANDOM_RANGE + 1) // 10

    def __init__(self, seed: int) -> None:
        self._seed = seed & MASK32

    def __repr__(self) -> str:
        return f"PseudoRandom(seed={self._seed:#010x})"

    @property
    def seed(self) -> int:
        """Current 32-bit state."""
        return self._seed

    def reseed(self, seed: int) -> None:
        """Replace the state, restarting the sequence."""
        self._seed = seed & MASK32

    def next(self) -> int:
        """Advance the state and return the next value in ``[0, 32767]``.

        The state is read back as a signed 32-bit integer and divided by
        65536 with truncation toward zero before the low 15 bits are
        kept, so negative states round up rather than down.
        """
        self._seed = (self._seed * MULTIPLIER + INCREMENT) & MASK32
        signed = _to_int32(self._seed)
        quotient = -(-signed // 65536) if signed < 0 else signed // 65536
        return quotient % (self.RANDOM_RANGE + 1)

    def range(self, min: int, max: int) -> int:
        """Return an integer in the closed interval ``[min, max]``.

        Maps ``next()`` onto the interval by remainder. Spans wider than
        ``MAX_SPAN`` are refused instead of being served with a skewed
        distribution.

        Args:
            min: Lower bound (inclusive).
            max: Upper bound (inclusive).

        Raises:
            PrngError: If ``min > max`` or ``max - min`` exceeds ``MAX_SPAN``.

        Examples:
            >>> pr = PseudoRandom(814538)
            >>> pr.range(0, 9)
            2
            >>> pr.range(2000, 6000)
            Traceback (most recent call last):
                ...
            detrand.errors.PrngError: range too large: max - min = 4000 exceeds 3276

        """
        if max < min:
            raise PrngError(f"invalid range (max < min): min={min}, max={max}")
        span = max - min
        if span > self.MAX_SPAN:
            raise PrngError(f"range too large: max - min = {span} exceeds {self.MAX_SPAN}")
        return self.next() % (span + 1) + min

    def rand_normal_dist(self, min: int, max: int, num_trials: int = 6) -> int:
        """Approximately normal integer in ``[min, max]``.

        See ``detrand.distributions.rand_normal_dist``.
        """
        return rand_normal_dist(self, min, max, num_trials)
