"""Configuration error definitions."""

from __future__ import annotations

from dumpsizer.errors import DumpSizerError


class ConfigurationError(DumpSizerError):
    """Raised when configuration values are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""
