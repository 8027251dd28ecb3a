"""JSON resources (standard-library ``json``)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from .base import Codec, FormatAdapter, PathLike


def _reject_non_string_keys(value: Any, active: set[int] | None = None) -> None:
    if not isinstance(value, (dict, list, tuple)):
        return
    active = set() if active is None else active
    if id(value) in active:
        raise ValueError("circular reference")
    active.add(id(value))
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"object key {key!r} is not a string")
            _reject_non_string_keys(item, active)
    else:
        for item in value:
            _reject_non_string_keys(item, active)
    active.discard(id(value))


def _encode(value: Any) -> str:
    _reject_non_string_keys(value)
    return json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))


def _encode_pretty(value: Any) -> str:
    _reject_non_string_keys(value)
    return json.dumps(value, ensure_ascii=False, allow_nan=False, indent=2) + "\n"


JSON = FormatAdapter(Codec(name="json", extension=".json", encode=_encode, decode=json.loads))
PRETTY_JSON = FormatAdapter(Codec(name="json", extension=".json", encode=_encode_pretty, decode=json.loads))


class JsonResourcesMixin:
    """JSON helpers mixed into :class:`appres.Resources`."""

    def load_from_json_file(self, json_file: PathLike, shape: Optional[Any] = None) -> Any:
        """Read a JSON file from the resource directory and decode it.

        Example::

            resources = Resources.config_relative("projectile")
            config = resources.load_from_json_file("config.json", shape=Config)
        """
        return JSON.load(self, json_file, shape)

    def save_to_json_file(self, json_file: PathLike, value: Any) -> Path:
        """Write ``value`` as compact JSON relative to the resource directory."""
        return JSON.save(self, json_file, value)

    def pretty_save_to_json_file(self, json_file: PathLike, value: Any) -> Path:
        """Write ``value`` as indented JSON relative to the resource directory."""
        return PRETTY_JSON.save(self, json_file, value)


def load_json_from_str(content: str, shape: Optional[Any] = None) -> Any:
    """Decode a JSON string, optionally validating it into ``shape``."""
    return JSON.loads(content, shape)


def load_json_from_bytes(content: bytes, shape: Optional[Any] = None) -> Any:
    """Decode UTF-8 JSON bytes, optionally validating it into ``shape``."""
    return JSON.loads(content, shape)


def save_to_json_file(json_file: PathLike, value: Any) -> Path:
    """Write ``value`` as JSON to ``json_file``, creating the parent directory."""
    return JSON.save_file(json_file, value)


def pretty_save_to_json_file(json_file: PathLike, value: Any) -> Path:
    """Write ``value`` as indented JSON to ``json_file``, creating the parent directory."""
    return PRETTY_JSON.save_file(json_file, value)


__all__ = [
    "JSON",
    "JsonResourcesMixin",
    "PRETTY_JSON",
    "load_json_from_bytes",
    "load_json_from_str",
    "pretty_save_to_json_file",
    "save_to_json_file",
]
