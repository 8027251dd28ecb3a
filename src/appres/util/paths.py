"""Platform directory conventions for config and data roots."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from appres.errors import DirectoryUnavailable


@runtime_checkable
class PlatformRoots(Protocol):
    """Source of the per-user config and data root directories."""

    def config_root(self) -> Path:
        ...

    def data_root(self) -> Path:
        ...


class SystemRoots:
    """Roots following the host OS conventions (XDG, macOS, Windows)."""

    def __init__(self, system: str | None = None) -> None:
        self.system = system or platform.system()

    def config_root(self) -> Path:
        match self.system:
            case "Windows":
                return _windows_root("APPDATA")
            case "Darwin":
                return _home() / "Library" / "Application Support"
            case _:
                return _xdg_root("XDG_CONFIG_HOME", ".config")

    def data_root(self) -> Path:
        match self.system:
            case "Windows":
                return _windows_root("LOCALAPPDATA", "APPDATA")
            case "Darwin":
                return _home() / "Library" / "Application Support"
            case _:
                return _xdg_root("XDG_DATA_HOME", ".local", "share")

    def __repr__(self) -> str:
        return f"SystemRoots(system={self.system!r})"


@dataclass(frozen=True)
class StaticRoots:
    """Fixed config/data roots, used by tests and configuration overrides."""

    config: Path
    data: Path

    def config_root(self) -> Path:
        return Path(self.config).expanduser().resolve()

    def data_root(self) -> Path:
        return Path(self.data).expanduser().resolve()


def executable_dir() -> Path:
    """Return the directory holding the running executable or entry script."""

    if getattr(sys, "frozen", False):
        candidate = sys.executable
    else:
        candidate = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    if not candidate:
        raise DirectoryUnavailable("cannot determine the executable directory")
    return Path(candidate).resolve().parent


def _home() -> Path:
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as exc:
        raise DirectoryUnavailable("cannot determine the home directory") from exc
    if not home.is_absolute():
        raise DirectoryUnavailable(f"home directory {home} is not absolute")
    return home


def _xdg_root(variable: str, *fallback: str) -> Path:
    value = os.environ.get(variable, "")
    # XDG basedir rules: relative values are ignored.
    if value and Path(value).is_absolute():
        return Path(value)
    return _home().joinpath(*fallback)


def _windows_root(*variables: str) -> Path:
    for variable in variables:
        value = os.environ.get(variable)
        if value:
            return Path(value)
    raise DirectoryUnavailable(f"none of {', '.join(variables)} is set")


__all__ = ["PlatformRoots", "StaticRoots", "SystemRoots", "executable_dir"]
