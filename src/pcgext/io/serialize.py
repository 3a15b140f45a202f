"""Serialization of extended seeds to a portable nested-array form.

The portable form is ``[[state, increment], [ext_0, ..., ext_{N-1}]]``. Words
may be written as unsigned or signed 32-bit integers; both decode to the same
unsigned words.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Annotated, Any

from pydantic import Field, Strict, TypeAdapter, ValidationError

from pcgext.core.base import BaseSeed, uint32
from pcgext.core.extended import ExtendedSeed
from pcgext.utils.exceptions import ConfigError, DecodeError

logger = logging.getLogger(__name__)

Word = Annotated[int, Strict(), Field(ge=-(2**31), le=2**32 - 1)]
PortableSeed = tuple[tuple[Word, Word], list[Word]]

_PORTABLE_ADAPTER: TypeAdapter[PortableSeed] = TypeAdapter(PortableSeed)


def to_portable(seed: ExtendedSeed) -> list[Any]:
    """Encode a seed as ``[[state, increment], [extension words...]]``."""
    return [[seed.base.state, seed.base.increment], list(seed.extension)]


def from_portable(data: Any) -> ExtendedSeed:
    """Decode a seed from its portable form.

    Raises:
        DecodeError: If the outer or base arity is not 2, an element is not an
            integer in 32-bit range, or the increment is even.
    """
    try:
        (state, increment), extension = _PORTABLE_ADAPTER.validate_python(data)
    except ValidationError as e:
        logger.debug("Rejected portable seed %r: %s", data, e)
        raise DecodeError(f"Malformed portable seed: {e}") from e

    try:
        base_seed = BaseSeed(uint32(state), uint32(increment))
    except ConfigError as e:
        raise DecodeError(f"Malformed portable seed: {e}") from e
    return ExtendedSeed(base_seed, tuple(uint32(w) for w in extension))


def dump_seed(seed: ExtendedSeed) -> str:
    """Serialize a seed to a compact JSON string."""
    return json.dumps(to_portable(seed), separators=(",", ":"))


def load_seed(json_str: str) -> ExtendedSeed:
    """Deserialize a seed from a JSON string.

    Raises:
        DecodeError: If the text is not JSON or not a portable seed.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Seed is not valid JSON: {e}") from e
    return from_portable(data)


def compute_seed_hash(seed: ExtendedSeed) -> str:
    """Compute a deterministic SHA-256 hash of a seed.

    Uses the canonical JSON of the portable form, so equal seeds always
    produce the same hash.
    """
    return hashlib.sha256(dump_seed(seed).encode()).hexdigest()
