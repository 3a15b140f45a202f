"""Engine-agnostic random generators.

A ``Generator`` describes how to produce a value from a seed. It is a pure
function ``seed -> (value, new_seed)``: evaluating the same generator with the
same seed always gives the same pair, and the input seed is never modified.

Engines plug in through a ``Config``, which bundles the two capabilities the
primitives need: ``next`` (advance a seed) and ``peel`` (read a 32-bit word
from a seed without advancing it). Combinators such as ``map2`` or
``and_then`` never touch the engine directly and work with any ``Config``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import numpy as np
from numpy.typing import NDArray

from pcgext.utils.exceptions import ConfigError

S = TypeVar("S")
T = TypeVar("T")
U = TypeVar("U")

MIN_INT = -2147483648
MAX_INT = 2147483647

_WORD_RANGE = 1 << 32
_WORD_MASK = _WORD_RANGE - 1


@dataclass(frozen=True)
class Config(Generic[S]):
    """Capabilities of a seed type.

    Attributes:
        next: Returns the seed following the given one.
        peel: Returns a 32-bit unsigned word from a seed without advancing it.
    """

    next: Callable[[S], S]
    peel: Callable[[S], int]


def make_config(next: Callable[[S], S], peel: Callable[[S], int]) -> Config[S]:
    """Bind an engine's ``next`` and ``peel`` functions into a ``Config``."""
    return Config(next=next, peel=peel)


class Generator(Generic[T]):
    """Description of how to produce a value of type ``T`` from a seed."""

    __slots__ = ("_run",)

    def __init__(self, run: Callable[[Any], tuple[T, Any]]) -> None:
        self._run = run

    def map(self, func: Callable[[T], U]) -> Generator[U]:
        """Transform every generated value with ``func``."""
        return map(func, self)

    def and_then(self, func: Callable[[T], Generator[U]]) -> Generator[U]:
        """Use a generated value to choose the next generator."""
        return and_then(func, self)

    def filter(self, predicate: Callable[[T], bool]) -> Generator[T]:
        """Keep drawing until ``predicate`` accepts a value."""
        return filter(predicate, self)


def step(generator: Generator[T], seed: S) -> tuple[T, S]:
    """Run a generator, returning the value and the next seed."""
    return generator._run(seed)


# --- Primitives --------------------------------------------------------------


def int_between(config: Config[S], low: int, high: int) -> Generator[int]:
    """Uniform integer in ``[low, high]`` (inclusive on both ends).

    The bounds may be given in either order. The range may hold at most
    2**32 values, which covers ``[MIN_INT, MAX_INT]`` and ``[0, 0xFFFFFFFF]``.

    Raises:
        ConfigError: If the range holds more than 2**32 values.
    """
    lo, hi = (low, high) if low < high else (high, low)
    span = hi - lo + 1
    if span > _WORD_RANGE:
        raise ConfigError(f"Range [{lo}, {hi}] is wider than 2**32 values")

    if (span - 1) & span == 0:
        # Power of two: masking a single word is already unbiased.
        mask = span - 1

        def run_masked(seed: S) -> tuple[int, S]:
            return (config.peel(seed) & mask) + lo, config.next(seed)

        return Generator(run_masked)

    threshold = ((-span) & _WORD_MASK) % span

    def run_rejecting(seed: S) -> tuple[int, S]:
        while True:
            word = config.peel(seed)
            seed = config.next(seed)
            if word >= threshold:
                return word % span + lo, seed

    return Generator(run_rejecting)


def float_between(config: Config[S], low: float, high: float) -> Generator[float]:
    """Uniform float in ``[low, high)`` with 53 bits of precision.

    Two words are consumed: 26 high bits from the first and 27 low bits from
    the second.
    """
    lo, hi = (low, high) if low <= high else (high, low)
    width = hi - lo

    def run(seed0: S) -> tuple[float, S]:
        seed1 = config.next(seed0)
        upper = float(config.peel(seed0) & 0x03FFFFFF)
        lower = float(config.peel(seed1) & 0x07FFFFFF)
        unit = (upper * 134217728.0 + lower) / 9007199254740992.0
        return unit * width + lo, config.next(seed1)

    return Generator(run)


def boolean(config: Config[S]) -> Generator[bool]:
    """``True`` or ``False`` with equal probability."""
    return int_between(config, 0, 1).map(lambda n: n == 1)


def one_in(config: Config[S], n: int) -> Generator[bool]:
    """``True`` with probability ``1/n``."""
    return int_between(config, 1, n).map(lambda k: k == 1)


def sample(config: Config[S], values: Sequence[T]) -> Generator[T | None]:
    """Uniform element of ``values``, or ``None`` if it is empty."""
    if len(values) == 0:
        return constant(None)
    items = tuple(values)
    return int_between(config, 0, len(items) - 1).map(items.__getitem__)


def uniform(config: Config[S], values: Sequence[T]) -> Generator[T]:
    """Uniform element of a non-empty sequence.

    Raises:
        ConfigError: If ``values`` is empty.
    """
    if len(values) == 0:
        raise ConfigError("uniform() requires at least one value")
    items = tuple(values)
    return int_between(config, 0, len(items) - 1).map(items.__getitem__)


def choice(config: Config[S], a: T, b: T) -> Generator[T]:
    """Either ``a`` or ``b`` with equal probability."""
    return boolean(config).map(lambda flag: a if flag else b)


def choices(config: Config[S], generators: Sequence[Generator[T]]) -> Generator[T]:
    """Run one of ``generators``, each picked with equal probability.

    Raises:
        ConfigError: If ``generators`` is empty.
    """
    if not generators:
        raise ConfigError("choices() requires at least one generator")
    options = tuple(generators)
    return int_between(config, 0, len(options) - 1).and_then(options.__getitem__)


def frequency(
    config: Config[S], pairs: Sequence[tuple[float, Generator[T]]]
) -> Generator[T]:
    """Run one generator, picked with probability proportional to its weight.

    Weights are taken as absolute values. A zero total weight always picks
    the first generator.

    Raises:
        ConfigError: If ``pairs`` is empty.
    """
    if not pairs:
        raise ConfigError("frequency() requires at least one (weight, generator) pair")
    options = [(abs(weight), gen) for weight, gen in pairs]
    total = sum(weight for weight, _ in options)

    def pick(n: float) -> Generator[T]:
        for weight, gen in options:
            if n <= weight:
                return gen
            n -= weight
        return options[0][1]

    return float_between(config, 0.0, total).and_then(pick)


def weighted(config: Config[S], pairs: Sequence[tuple[float, T]]) -> Generator[T]:
    """Pick one value with probability proportional to its weight."""
    return frequency(config, [(weight, constant(value)) for weight, value in pairs])


# --- Combinators ---------------------------------------------------------------


def constant(value: T) -> Generator[T]:
    """Always produce ``value`` and leave the seed untouched."""
    return Generator(lambda seed: (value, seed))


def map(func: Callable[[T], U], generator: Generator[T]) -> Generator[U]:  # noqa: A001
    def run(seed: Any) -> tuple[U, Any]:
        value, seed = generator._run(seed)
        return func(value), seed

    return Generator(run)


def map2(
    func: Callable[[Any, Any], U], gen_a: Generator[Any], gen_b: Generator[Any]
) -> Generator[U]:
    def run(seed: Any) -> tuple[U, Any]:
        a, seed = gen_a._run(seed)
        b, seed = gen_b._run(seed)
        return func(a, b), seed

    return Generator(run)


def map3(
    func: Callable[[Any, Any, Any], U],
    gen_a: Generator[Any],
    gen_b: Generator[Any],
    gen_c: Generator[Any],
) -> Generator[U]:
    def run(seed: Any) -> tuple[U, Any]:
        a, seed = gen_a._run(seed)
        b, seed = gen_b._run(seed)
        c, seed = gen_c._run(seed)
        return func(a, b, c), seed

    return Generator(run)


def map4(
    func: Callable[[Any, Any, Any, Any], U],
    gen_a: Generator[Any],
    gen_b: Generator[Any],
    gen_c: Generator[Any],
    gen_d: Generator[Any],
) -> Generator[U]:
    def run(seed: Any) -> tuple[U, Any]:
        a, seed = gen_a._run(seed)
        b, seed = gen_b._run(seed)
        c, seed = gen_c._run(seed)
        d, seed = gen_d._run(seed)
        return func(a, b, c, d), seed

    return Generator(run)


def map5(
    func: Callable[[Any, Any, Any, Any, Any], U],
    gen_a: Generator[Any],
    gen_b: Generator[Any],
    gen_c: Generator[Any],
    gen_d: Generator[Any],
    gen_e: Generator[Any],
) -> Generator[U]:
    def run(seed: Any) -> tuple[U, Any]:
        a, seed = gen_a._run(seed)
        b, seed = gen_b._run(seed)
        c, seed = gen_c._run(seed)
        d, seed = gen_d._run(seed)
        e, seed = gen_e._run(seed)
        return func(a, b, c, d, e), seed

    return Generator(run)


def and_map(generator: Generator[T], func_generator: Generator[Callable[[T], U]]) -> Generator[U]:
    """Apply a generated function to a generated value.

    The function is drawn before the value, so chaining
    ``and_map(gen_c, and_map(gen_b, map(f, gen_a)))`` draws ``a``, ``b``, ``c``
    in order.
    """
    return map2(lambda func, value: func(value), func_generator, generator)


def and_then(func: Callable[[T], Generator[U]], generator: Generator[T]) -> Generator[U]:
    def run(seed: Any) -> tuple[U, Any]:
        value, seed = generator._run(seed)
        return func(value)._run(seed)

    return Generator(run)


def filter(predicate: Callable[[T], bool], generator: Generator[T]) -> Generator[T]:  # noqa: A001
    """Redraw until ``predicate`` holds.

    A predicate that rejects nearly everything makes this loop for a long time.
    """

    def run(seed: Any) -> tuple[T, Any]:
        while True:
            value, seed = generator._run(seed)
            if predicate(value):
                return value, seed

    return Generator(run)


def pair(gen_a: Generator[T], gen_b: Generator[U]) -> Generator[tuple[T, U]]:
    return map2(lambda a, b: (a, b), gen_a, gen_b)


def list_of(n: int, generator: Generator[T]) -> Generator[list[T]]:
    """List of ``n`` values drawn in order (empty when ``n <= 0``)."""

    def run(seed: Any) -> tuple[list[T], Any]:
        values: list[T] = []
        for _ in range(n):
            value, seed = generator._run(seed)
            values.append(value)
        return values, seed

    return Generator(run)


def array_of(n: int, generator: Generator[Any], dtype: Any = None) -> Generator[NDArray[Any]]:
    """Numpy array of ``n`` values drawn in order.

    Args:
        n: Number of draws (an empty array when ``n <= 0``).
        generator: Generator of scalar values.
        dtype: Optional numpy dtype; inferred from the values when omitted.
    """
    return list_of(n, generator).map(lambda values: np.asarray(values, dtype=dtype))


def maybe(gen_flag: Generator[bool], generator: Generator[T]) -> Generator[T | None]:
    """Draw from ``generator`` when ``gen_flag`` is true, else produce ``None``."""
    return and_then(lambda flag: generator if flag else constant(None), gen_flag)


def lazy(thunk: Callable[[], Generator[T]]) -> Generator[T]:
    """Defer building a generator until it runs, for recursive definitions."""
    return Generator(lambda seed: thunk()._run(seed))
