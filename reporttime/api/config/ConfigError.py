"""Configuration error."""


class ConfigError(Exception):
    """Raised when the reporttime configuration cannot be read or validated."""
