"""Errors raised while loading cluster connection settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A connection setting is present but unusable (bad number, unreadable CA bundle)."""


class MissingConfigurationError(ConfigurationError):
    """No way to reach an API server was configured."""
