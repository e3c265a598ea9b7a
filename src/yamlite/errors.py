"""Exception types raised inside yamlite."""

from __future__ import annotations


class YamliteError(Exception):
    """Base class for every yamlite error."""


class YamlIOError(YamliteError):
    """Raised when a file cannot be opened, read, or written."""

    def __init__(self, message: str, *, path: str, reason: str) -> None:
        super().__init__(message)
        self.path = path
        self.reason = reason


class MutatorError(YamliteError):
    """Raised when a modify callback declines to return a document."""


class YamlDumpError(YamliteError, ValueError):
    """Raised when dumping fails due to unsupported types."""


class YamlConfigError(YamliteError, ValueError):
    """Raised for invalid dump options."""
