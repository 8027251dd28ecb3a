"""Structured-format adapters for resource files."""

from .base import Codec, FormatAdapter, to_plain
from .json_codec import (
    JSON,
    PRETTY_JSON,
    JsonResourcesMixin,
    load_json_from_bytes,
    load_json_from_str,
    pretty_save_to_json_file,
    save_to_json_file,
)
from .toml_codec import TOML, TomlResourcesMixin, load_toml_from_bytes, load_toml_from_str, save_to_toml_file
from .yaml_codec import YAML, YamlResourcesMixin, load_yaml_from_bytes, load_yaml_from_str, save_to_yaml_file

__all__ = [
    "Codec",
    "FormatAdapter",
    "JSON",
    "JsonResourcesMixin",
    "PRETTY_JSON",
    "TOML",
    "TomlResourcesMixin",
    "YAML",
    "YamlResourcesMixin",
    "load_json_from_bytes",
    "load_json_from_str",
    "load_toml_from_bytes",
    "load_toml_from_str",
    "load_yaml_from_bytes",
    "load_yaml_from_str",
    "pretty_save_to_json_file",
    "save_to_json_file",
    "save_to_toml_file",
    "save_to_yaml_file",
    "to_plain",
]
