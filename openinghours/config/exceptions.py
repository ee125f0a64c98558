"""Exceptions relating to loading and validating configuration."""


class ConfigError(ValueError):
    """Represents an error validating the configuration file."""
