"""32-bit PCG engine with the RXS-M-SH output permutation.

The state advances with a linear congruential step modulo 2**32 and every
output word is a fixed permutation of the current state. Seeds are immutable;
``next_seed`` returns a new ``BaseSeed``.
"""

from __future__ import annotations

from dataclasses import dataclass

from pcgext.core.generator import Config, make_config
from pcgext.utils.exceptions import ConfigError

UINT32_MASK = 0xFFFFFFFF
MULTIPLIER = 1664525
DEFAULT_INCREMENT = 1013904223
PERMUTATION_MULTIPLIER = 277803737


def uint32(n: int) -> int:
    """Reduce an integer to the unsigned 32-bit range."""
    return n & UINT32_MASK


@dataclass(frozen=True)
class BaseSeed:
    """State of the base engine.

    Attributes:
        state: Current LCG state, an unsigned 32-bit word.
        increment: LCG increment. Odd, and fixed for the life of a stream;
            it selects one of 2**31 possible sequences.
    """

    state: int
    increment: int

    def __post_init__(self) -> None:
        if not 0 <= self.state <= UINT32_MASK:
            raise ConfigError(f"state must be an unsigned 32-bit word, got {self.state}")
        if not 0 <= self.increment <= UINT32_MASK:
            raise ConfigError(
                f"increment must be an unsigned 32-bit word, got {self.increment}"
            )
        if self.increment % 2 == 0:
            raise ConfigError(f"increment must be odd, got {self.increment}")


def next_seed(seed: BaseSeed) -> BaseSeed:
    """Advance the state by one LCG step."""
    return BaseSeed(uint32(seed.state * MULTIPLIER + seed.increment), seed.increment)


def peel(seed: BaseSeed) -> int:
    """Permute the current state into a 32-bit output word."""
    state = seed.state
    word = uint32((state ^ (state >> ((state >> 28) + 4))) * PERMUTATION_MULTIPLIER)
    return (word >> 22) ^ word


def initial_seed(x: int) -> BaseSeed:
    """Derive a seed from a single integer.

    The same ``x`` always yields the same stream. ``x`` is reduced modulo 2**32.
    """
    seeded = next_seed(BaseSeed(0, DEFAULT_INCREMENT))
    return next_seed(BaseSeed(uint32(seeded.state + x), seeded.increment))


CONFIG: Config[BaseSeed] = make_config(next_seed, peel)
