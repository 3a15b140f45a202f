"""YAML loader for seed configuration files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pcgext.config.schema import SeedConfig
from pcgext.utils.exceptions import ConfigError


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Absolute or relative path to the YAML file.

    Returns:
        Parsed YAML content (typically a dict or list).

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    with open(path) as f:
        return yaml.safe_load(f)


def load_seed_config(path: Path) -> SeedConfig:
    """Load a ``SeedConfig`` from a YAML file.

    Expected layout::

        seed: 42
        extension: [1, 2, 3]

    Raises:
        ConfigError: If the file content is not a valid seed configuration.
    """
    try:
        return SeedConfig.model_validate(load_yaml(path))
    except ValidationError as e:
        raise ConfigError(f"Invalid seed configuration in {path}: {e}") from e
