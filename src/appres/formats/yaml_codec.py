"""YAML resources (PyYAML safe dumper and loader)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml

from .base import Codec, FormatAdapter, PathLike


def _encode(value: Any) -> str:
    return yaml.safe_dump(value, sort_keys=False, allow_unicode=True)


YAML = FormatAdapter(
    Codec(
        name="yaml",
        extension=".yaml",
        encode=_encode,
        decode=yaml.safe_load,
        encode_errors=(yaml.YAMLError, TypeError, ValueError, RecursionError),
        decode_errors=(yaml.YAMLError,),
    )
)


class YamlResourcesMixin:
    """YAML helpers mixed into :class:`appres.Resources`."""

    def load_from_yaml_file(self, yaml_file: PathLike, shape: Optional[Any] = None) -> Any:
        """Read a YAML file from the resource directory and decode it."""
        return YAML.load(self, yaml_file, shape)

    def save_to_yaml_file(self, yaml_file: PathLike, value: Any) -> Path:
        """Write ``value`` as YAML relative to the resource directory."""
        return YAML.save(self, yaml_file, value)


def load_yaml_from_str(content: str, shape: Optional[Any] = None) -> Any:
    return YAML.loads(content, shape)


def load_yaml_from_bytes(content: bytes, shape: Optional[Any] = None) -> Any:
    return YAML.loads(content, shape)


def save_to_yaml_file(yaml_file: PathLike, value: Any) -> Path:
    return YAML.save_file(yaml_file, value)


__all__ = [
    "YAML",
    "YamlResourcesMixin",
    "load_yaml_from_bytes",
    "load_yaml_from_str",
    "save_to_yaml_file",
]
