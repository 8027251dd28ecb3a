"""Exception types raised by appres."""

from __future__ import annotations

from pathlib import Path


class AppResError(RuntimeError):
    """Base class for every error raised by appres."""


class DirectoryUnavailable(AppResError):
    """Raised when the platform cannot supply a config, data or executable root."""


class InvalidPath(AppResError, ValueError):
    """Raised when a relative path or app name would escape the resource root."""

    def __init__(self, message: str, *, path: object = None, base: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.base = base


class ResourceIOError(AppResError):
    """Filesystem failure while reading, writing or creating a resource."""

    def __init__(self, operation: str, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to {operation} {path}: {cause.strerror or cause}")
        self.operation = operation
        self.path = path
        self.cause = cause


class EncodeError(AppResError):
    """Raised when a value cannot be represented in the target format."""

    def __init__(self, format: str, message: str) -> None:
        super().__init__(f"Cannot encode value as {format}: {message}")
        self.format = format


class DecodeError(AppResError):
    """Raised when file content is not valid for the format or target shape."""

    def __init__(self, format: str, message: str, *, path: Path | None = None) -> None:
        location = f" in {path}" if path is not None else ""
        super().__init__(f"Invalid {format}{location}: {message}")
        self.format = format
        self.path = path


class ConfigError(AppResError):
    """Raised when configuration files cannot be loaded or validated."""


__all__ = [
    "AppResError",
    "ConfigError",
    "DecodeError",
    "DirectoryUnavailable",
    "EncodeError",
    "InvalidPath",
    "ResourceIOError",
]
