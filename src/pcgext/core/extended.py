"""PCG engine extended with an array of auxiliary 32-bit words.

The base engine advances on every step. The extension array advances, as a
ripple-carry counter, only when the base state passes through zero, which
happens once per base period. Each output is the base output xor-ed with one
extension word chosen pseudo-randomly from the base state. With N extension
words the period is 2**((N + 1) * 32).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pcgext.config.schema import SeedConfig
from pcgext.core import base
from pcgext.core.base import DEFAULT_INCREMENT, UINT32_MASK, BaseSeed, uint32
from pcgext.core.generator import Config, Generator, int_between, make_config, map3, step

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtendedSeed:
    """State of the extended engine.

    Attributes:
        base: Base engine seed, advanced on every step.
        extension: Auxiliary words. The length is fixed for a seed lineage.
    """

    base: BaseSeed
    extension: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of ints; store unsigned words in a tuple.
        if not isinstance(self.extension, tuple) or any(
            not 0 <= word <= UINT32_MASK for word in self.extension
        ):
            object.__setattr__(self, "extension", tuple(uint32(w) for w in self.extension))


def increment_extension(words: tuple[int, ...]) -> tuple[int, ...]:
    """Add ``DEFAULT_INCREMENT`` to a multi-word counter, carrying on wrap to zero."""
    updated = list(words)
    for i, word in enumerate(updated):
        updated[i] = uint32(word + DEFAULT_INCREMENT)
        if updated[i] != 0:
            break
    return tuple(updated)


def next_seed(seed: ExtendedSeed) -> ExtendedSeed:
    """Advance the base engine, and the extension when the base state hits zero."""
    new_base = base.next_seed(seed.base)
    if new_base.state == 0:
        extension = increment_extension(seed.extension)
        logger.debug("Base state wrapped to zero; extension advanced to %s", extension)
        return ExtendedSeed(new_base, extension)
    return ExtendedSeed(new_base, seed.extension)


def peel(seed: ExtendedSeed) -> int:
    """Base output xor one extension word picked from the base state."""
    base_word = base.peel(seed.base)
    if not seed.extension:
        return base_word
    index, _ = step(int_between(base.CONFIG, 0, len(seed.extension) - 1), seed.base)
    return uint32(base_word ^ seed.extension[index])


def initial_seed(seed: int, extension: Iterable[int] = ()) -> ExtendedSeed:
    """Build a seed from an integer and the initial extension words.

    An empty extension gives exactly the base engine's stream.
    """
    return ExtendedSeed(base.initial_seed(seed), tuple(uint32(w) for w in extension))


def seed_from_config(config: SeedConfig) -> ExtendedSeed:
    """Build a seed from a validated ``SeedConfig``."""
    return initial_seed(config.seed, config.extension)


CONFIG: Config[ExtendedSeed] = make_config(next_seed, peel)


def _make_independent_seed(
    extension: tuple[int, ...],
) -> Callable[[int, int, int], ExtendedSeed]:
    def build(state: int, b: int, c: int) -> ExtendedSeed:
        return ExtendedSeed(base.next_seed(BaseSeed(state, (b ^ c) | 1)), extension)

    return build


def _run_independent_seed(seed0: ExtendedSeed) -> tuple[ExtendedSeed, ExtendedSeed]:
    word = int_between(CONFIG, 0, UINT32_MASK)
    return step(map3(_make_independent_seed(seed0.extension), word, word, word), seed0)


independent_seed: Generator[ExtendedSeed] = Generator(_run_independent_seed)
"""Generator of a fresh seed for a separate stream.

Three words ``a``, ``b``, ``c`` are drawn from the current stream. The new
base seed uses ``a`` as its state and ``(b ^ c) | 1`` as its increment and is
advanced once. The extension words are copied from the drawing seed. Stepping
returns the new seed together with the advanced parent seed.

The new stream is statistically decorrelated from its parent but is not
proven independent. In particular the extension array is shared, so only the
base part of the state differs.
"""
