"""Deterministic uniform generators.

Both generators are plain objects with mutable private state: seed them,
then call ``next``, ``range`` and (for PCG) ``bytes``. Equal seeds always
give equal sequences on every platform. Neither is thread-safe nor
suitable for cryptography.

    PseudoRandom: 32-bit LCG, 15-bit output, narrow ranges only
    PcgRandom: PCG32 XSH-RR, 32-bit output, unbiased ranges, byte streams
"""

from detrand.generators.pcg import PcgRandom
from detrand.generators.pseudo import PseudoRandom

__all__ = [
    "PseudoRandom",
    "PcgRandom",
]
