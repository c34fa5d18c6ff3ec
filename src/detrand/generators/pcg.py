"""PCG32 generator (XSH-RR output permutation).

A 64-bit LCG whose state is scrambled by a xorshift and a data-dependent
rotation before output. The rotation amount comes from the top five
state bits, which breaks up the lattice structure of the raw LCG while
keeping the state to two 64-bit words.

References:
    - M. E. O'Neill, "PCG: A Family of Simple Fast Space-Efficient
      Statistically Good Algorithms for Random Number Generation" (2014)
    - Reference C implementation: https://www.pcg-random.org/download.html
"""

from __future__ import annotations

from detrand.clock import Clock, entropy_seed
from detrand.distributions.normal import rand_normal_dist
from detrand.errors import PrngError
from detrand.logging import get_logger

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

logger = get_logger(__name__)


def _to_int32(x: int) -> int:
    x &= MASK32
    return x - (1 << 32) if x & 0x80000000 else x


class PcgRandom:
    """PCG32 generator producing 32-bit unsigned output.

    Args:
        seed: Initial state, wrapped to 64 bits. If None, a seed is
            derived from ``clock`` and the process id.
        sequence: Stream selector. Generators with equal seeds but
            different sequences produce unrelated output.
        clock: Nanosecond time source used only when ``seed`` is None.

    Examples:
        >>> pr = PcgRandom(814538, 998877)
        >>> [hex(pr.next()) for _ in range(2)]
        ['0x48c593f8', '0x54f59f5']

    """

    RANDOM_MIN = -0x80000000
    RANDOM_MAX = 0x7FFFFFFF
    RANDOM_RANGE = MASK32
    DEFAULT_SEQUENCE = 0xDA3E39CB94B95BDB
    MULTIPLIER = 6364136223846793005

    def __init__(
        self,
        seed: int | None = None,
        sequence: int = DEFAULT_SEQUENCE,
        clock: Clock | None = None,
    ) -> None:
        if seed is None:
            seed = entropy_seed(clock)
            logger.debug(
                "seeded from clock",
                extra={"generator": "pcg", "seed": seed, "sequence": sequence},
            )
        self.reseed(seed, sequence)

    def __repr__(self) -> str:
        return f"PcgRandom(state={self._state:#018x}, increment={self._inc:#018x})"

    def reseed(self, seed: int, sequence: int = DEFAULT_SEQUENCE) -> None:
        """Restart the generator with the standard PCG32 seeding procedure."""
        self._state = 0
        self._inc = ((sequence << 1) | 1) & MASK64
        self.next()
        self._state = (self._state + (seed & MASK64)) & MASK64
        self.next()

    def get_state(self) -> tuple[int, int]:
        """Return ``(state, increment)`` for checkpointing the stream."""
        return self._state, self._inc

    def set_state(self, state: tuple[int, int]) -> None:
        """Resume from a pair previously returned by ``get_state``.

        Raises:
            PrngError: If either word is outside 64 bits or the increment is even.

        """
        st, inc = state
        if not (0 <= st <= MASK64 and 0 <= inc <= MASK64):
            raise PrngError(f"invalid PCG state: words must be unsigned 64-bit: {state!r}")
        if not inc & 1:
            raise PrngError(f"invalid PCG state: increment {inc:#x} must be odd")
        self._state, self._inc = st, inc

    def next(self) -> int:
        """Return the next 32-bit output and advance the state."""
        old = self._state
        self._state = (old * self.MULTIPLIER + self._inc) & MASK64
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK32

    def _bounded(self, bound: int) -> int:
        # bound == 0 stands for the full 2**32 span.
        if bound == 0:
            return self.next()
        # 2**32 % bound, computed in 32-bit arithmetic
        threshold = ((-bound) & MASK32) % bound
        while True:
            r = self.next()
            if r >= threshold:
                return r % bound

    def range(self, min: int, max: int) -> int:
        """Return an unbiased integer in the closed interval ``[min, max]``.

        Draws that fall in the short tail left over after the largest
        multiple of the span fits in 32 bits are rejected and redrawn,
        so every value is equally likely. Requesting the full signed
        32-bit span is valid and consumes exactly one draw.

        Args:
            min: Lower bound (inclusive), signed 32-bit.
            max: Upper bound (inclusive), signed 32-bit.

        Raises:
            PrngError: If ``min > max`` or either bound is outside
                ``[RANDOM_MIN, RANDOM_MAX]``.

        Examples:
            >>> pr = PcgRandom(814538, 998877)
            >>> pr.range(PcgRandom.RANDOM_MIN, PcgRandom.RANDOM_MAX)
            -926575624
            >>> 10 <= pr.range(10, 20) <= 20
            True

        """
        if max < min:
            raise PrngError(f"invalid range (max < min): min={min}, max={max}")
        if min < self.RANDOM_MIN or max > self.RANDOM_MAX:
            raise PrngError(
                f"range bounds must be signed 32-bit: min={min}, max={max}"
            )
        bound = (max - min + 1) & MASK32
        return _to_int32(self._bounded(bound) + min)

    def bytes(self, buffer: bytearray | memoryview, count: int, offset: int = 0) -> None:
        """Fill ``buffer[offset:offset + count]`` with pseudo-random bytes.

        Each ``next()`` output supplies four bytes, least significant
        first. Bytes left over from the last draw are dropped, so the
        following call starts on a fresh draw.

        Args:
            buffer: Writable destination.
            count: Number of bytes to write.
            offset: Index of the first byte written.

        Raises:
            PrngError: If the target region does not fit in ``buffer``.

        Examples:
            >>> buf = bytearray(8)
            >>> PcgRandom(1538, 877).bytes(buf, 5, offset=2)
            >>> buf.hex()
            '0000f3798f31ac00'

        """
        if count < 0 or offset < 0 or offset + count > len(buffer):
            raise PrngError(
                f"byte target out of bounds: offset={offset}, count={count}, size={len(buffer)}"
            )
        pos = offset
        end = offset + count
        while pos < end:
            r = self.next()
            for _ in range(min(4, end - pos)):
                buffer[pos] = r & 0xFF
                r >>= 8
                pos += 1

    def random_bytes(self, count: int) -> bytes:
        """Return ``count`` fresh pseudo-random bytes."""
        out = bytearray(count)
        self.bytes(out, count)
        return bytes(out)

    def rand_normal_dist(self, min: int, max: int, num_trials: int = 6) -> int:
        """Approximately normal integer in ``[min, max]``.

        See ``detrand.distributions.rand_normal_dist``.
        """
        return rand_normal_dist(self, min, max, num_trials)
