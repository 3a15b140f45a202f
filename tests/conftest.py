"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pcgext.core import base, extended
from pcgext.core.base import BaseSeed
from pcgext.core.extended import ExtendedSeed


@pytest.fixture
def base_seed() -> BaseSeed:
    """Base engine seed derived from 42."""
    return base.initial_seed(42)


@pytest.fixture
def seed() -> ExtendedSeed:
    """Extended seed with three extension words."""
    return extended.initial_seed(42, [0x9E3779B9, 0x7F4A7C15, 0x12345678])


@pytest.fixture
def before_zero_state() -> int:
    """Base state whose successor under the default increment is exactly 0."""
    inverse = pow(base.MULTIPLIER, -1, 2**32)
    return (-base.DEFAULT_INCREMENT * inverse) % 2**32
