"""detrand: deterministic pseudo-random generators with reproducible output.

Modules:
    generators: PseudoRandom (32-bit LCG) and PcgRandom (PCG32 XSH-RR)
    distributions: Irwin-Hall normal approximation and batch samplers
    stats: Empirical-rule checks for sampled distributions
    clock: Injectable time source for default seeding
    config: YAML generator configuration
    errors: PrngError
"""

from detrand.distributions import rand_normal_dist
from detrand.errors import PrngError
from detrand.generators import PcgRandom, PseudoRandom

__version__ = "0.1.0"

__all__ = [
    "PseudoRandom",
    "PcgRandom",
    "PrngError",
    "rand_normal_dist",
]
