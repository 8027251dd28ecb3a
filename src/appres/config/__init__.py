"""Configuration models and loaders for appres."""

from appres.errors import ConfigError

from .loader import DEFAULT_CONFIG_PATH, ENV_VARIABLES, dump_example_config, load_config
from .models import ResourcesConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "ENV_VARIABLES",
    "ResourcesConfig",
    "dump_example_config",
    "load_config",
]
