"""Exceptions raised by the plugin configuration store."""


class ConfigError(Exception):
    """Base class for configuration errors."""


class KeyNotFoundError(ConfigError, KeyError):
    """Raised when a strict lookup hits a key that is not defined."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Config key [{self.key}] does not exist"


class UnsupportedOperationError(ConfigError, NotImplementedError):
    """Raised for operations the store deliberately does not implement."""
