"""Pydantic v2 configuration models for pcgext."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MAX_EXTENSION_SIZE = 1024


class SeedConfig(BaseModel):
    """Inputs for building an extended seed.

    Each extension word multiplies the period by 2**32. Values outside the
    32-bit range are accepted and reduced modulo 2**32 when the seed is built.
    """

    model_config = ConfigDict(extra="forbid")

    seed: int = Field(description="Integer seed for the base engine")
    extension: list[int] = Field(
        default_factory=list,
        max_length=MAX_EXTENSION_SIZE,
        description="Initial words of the extension array",
    )
