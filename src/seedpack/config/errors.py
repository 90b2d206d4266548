"""Errors raised while loading remote coordinates and local data roots."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a setting is present but unusable, e.g. an owner containing ``/``."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a setting such as ``SEEDPACK_DATA_ROOTS`` is set but left blank."""
