"""Application resource directories with JSON, TOML and YAML file helpers."""

from .config import ResourcesConfig, dump_example_config, load_config
from .errors import (
    AppResError,
    ConfigError,
    DecodeError,
    DirectoryUnavailable,
    EncodeError,
    InvalidPath,
    ResourceIOError,
)
from .resources import ResolutionMode, Resources, resolve
from .util.logging import configure_logging
from .util.paths import PlatformRoots, StaticRoots, SystemRoots, executable_dir

__version__ = "0.1.0"

__all__ = [
    "AppResError",
    "ConfigError",
    "DecodeError",
    "DirectoryUnavailable",
    "EncodeError",
    "InvalidPath",
    "PlatformRoots",
    "ResolutionMode",
    "ResourceIOError",
    "Resources",
    "ResourcesConfig",
    "StaticRoots",
    "SystemRoots",
    "configure_logging",
    "dump_example_config",
    "executable_dir",
    "load_config",
    "resolve",
]
