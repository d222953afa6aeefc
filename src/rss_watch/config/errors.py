"""Config-related errors."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised when configuration input is invalid."""


class ScriptNotExecutableError(ConfigError):
    """Raised when a configured script cannot be executed."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"`{path}' is not executable")
