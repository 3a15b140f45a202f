"""Default configuration values for pcgext."""

from __future__ import annotations

from pcgext.config.schema import SeedConfig
from pcgext.utils.exceptions import ConfigError

DEFAULT_SEED = 42
DEFAULT_EXTENSION_SIZE = 0


def extension_for_size(size: int, fill: int = 0) -> list[int]:
    """Build an extension list of ``size`` words, each set to ``fill``."""
    if size < 0:
        raise ConfigError(f"extension size must be non-negative, got {size}")
    return [fill] * size


def default_seed_config() -> SeedConfig:
    """Seed 42 with no extension words (plain base engine behaviour)."""
    return SeedConfig(
        seed=DEFAULT_SEED,
        extension=extension_for_size(DEFAULT_EXTENSION_SIZE),
    )
