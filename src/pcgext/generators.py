"""Generators bound to the extended engine.

This is the everyday entry point::

    from pcgext import generators as rnd

    seed = rnd.initial_seed(42, [0x9E3779B9, 0x7F4A7C15])
    roll, seed = rnd.step(rnd.int_between(1, 6), seed)

The primitives here are the ``pcgext.core.generator`` ones with the extended
engine's ``Config`` already applied. Combinators are re-exported unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from pcgext.core import generator as _gen
from pcgext.core.extended import CONFIG, ExtendedSeed, independent_seed, initial_seed
from pcgext.core.generator import MAX_INT as MAX_INT
from pcgext.core.generator import MIN_INT as MIN_INT
from pcgext.core.generator import Generator as Generator
from pcgext.core.generator import and_map as and_map
from pcgext.core.generator import and_then as and_then
from pcgext.core.generator import array_of as array_of
from pcgext.core.generator import constant as constant
from pcgext.core.generator import filter as filter  # noqa: A004
from pcgext.core.generator import lazy as lazy
from pcgext.core.generator import list_of as list_of
from pcgext.core.generator import map as map  # noqa: A004
from pcgext.core.generator import map2 as map2
from pcgext.core.generator import map3 as map3
from pcgext.core.generator import map4 as map4
from pcgext.core.generator import map5 as map5
from pcgext.core.generator import maybe as maybe
from pcgext.core.generator import pair as pair
from pcgext.core.generator import step as step

T = TypeVar("T")

__all__ = [
    "MAX_INT",
    "MIN_INT",
    "ExtendedSeed",
    "Generator",
    "and_map",
    "and_then",
    "array_of",
    "boolean",
    "choice",
    "choices",
    "constant",
    "filter",
    "float_between",
    "frequency",
    "independent_seed",
    "initial_seed",
    "int_between",
    "lazy",
    "list_of",
    "map",
    "map2",
    "map3",
    "map4",
    "map5",
    "maybe",
    "one_in",
    "pair",
    "sample",
    "step",
    "uniform",
    "weighted",
]


def int_between(low: int, high: int) -> Generator[int]:
    """Uniform integer in ``[low, high]``."""
    return _gen.int_between(CONFIG, low, high)


def float_between(low: float, high: float) -> Generator[float]:
    """Uniform float in ``[low, high)``."""
    return _gen.float_between(CONFIG, low, high)


def boolean() -> Generator[bool]:
    return _gen.boolean(CONFIG)


def one_in(n: int) -> Generator[bool]:
    """``True`` with probability ``1/n``."""
    return _gen.one_in(CONFIG, n)


def sample(values: Sequence[T]) -> Generator[T | None]:
    return _gen.sample(CONFIG, values)


def uniform(values: Sequence[T]) -> Generator[T]:
    return _gen.uniform(CONFIG, values)


def choice(a: T, b: T) -> Generator[T]:
    return _gen.choice(CONFIG, a, b)


def choices(generators: Sequence[Generator[T]]) -> Generator[T]:
    return _gen.choices(CONFIG, generators)


def frequency(pairs: Sequence[tuple[float, Generator[T]]]) -> Generator[T]:
    """Weighted choice among ``(weight, generator)`` pairs."""
    return _gen.frequency(CONFIG, pairs)


def weighted(pairs: Sequence[tuple[float, T]]) -> Generator[T]:
    """Weighted choice among ``(weight, value)`` pairs."""
    return _gen.weighted(CONFIG, pairs)
