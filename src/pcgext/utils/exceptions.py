"""Custom exceptions for pcgext."""

from __future__ import annotations


class PcgError(Exception):
    """Base exception for pcgext."""


class ConfigError(PcgError, ValueError):
    """Invalid seed or generator configuration."""


class DecodeError(PcgError, ValueError):
    """Malformed portable seed data."""
