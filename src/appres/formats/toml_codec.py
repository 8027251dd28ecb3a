"""TOML resources.

Parsing uses ``tomllib`` (``tomli`` before Python 3.11); writing uses
``tomli-w``, its companion writer. Values are checked up front so that
anything TOML cannot hold fails with a clear path to the offending item.
"""

from __future__ import annotations

from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Mapping, Optional

import tomli_w

from .base import Codec, FormatAdapter, PathLike

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for earlier interpreters
    import tomli as tomllib  # type: ignore[assignment]

_SCALARS = (str, bool, int, float, datetime, date, time)


def _check_value(value: Any, where: str, active: set[int]) -> None:
    if isinstance(value, _SCALARS):
        return
    if value is None:
        raise TypeError(f"{where}: TOML has no null value")
    if not isinstance(value, (Mapping, list, tuple)):
        raise TypeError(f"{where}: unsupported type {type(value).__name__}")
    if id(value) in active:
        raise TypeError(f"{where}: circular reference")
    active.add(id(value))
    if isinstance(value, Mapping):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{where}: table key {key!r} is not a string")
            _check_value(item, f"{where}.{key}", active)
    else:
        for index, item in enumerate(value):
            _check_value(item, f"{where}[{index}]", active)
    active.discard(id(value))


def _encode(value: Any) -> str:
    if not isinstance(value, Mapping):
        raise TypeError(f"top-level value must be a table, got {type(value).__name__}")
    _check_value(value, "root", set())
    return tomli_w.dumps(dict(value))


TOML = FormatAdapter(
    Codec(
        name="toml",
        extension=".toml",
        encode=_encode,
        decode=tomllib.loads,
        decode_errors=(tomllib.TOMLDecodeError,),
    )
)


class TomlResourcesMixin:
    """TOML helpers mixed into :class:`appres.Resources`."""

    def load_from_toml_file(self, toml_file: PathLike, shape: Optional[Any] = None) -> Any:
        """Read a TOML file from the resource directory and decode it."""
        return TOML.load(self, toml_file, shape)

    def save_to_toml_file(self, toml_file: PathLike, value: Any) -> Path:
        """Write a table as TOML relative to the resource directory."""
        return TOML.save(self, toml_file, value)


def load_toml_from_str(content: str, shape: Optional[Any] = None) -> Any:
    return TOML.loads(content, shape)


def load_toml_from_bytes(content: bytes, shape: Optional[Any] = None) -> Any:
    return TOML.loads(content, shape)


def save_to_toml_file(toml_file: PathLike, value: Any) -> Path:
    """Write a table as TOML to ``toml_file``, creating the parent directory."""
    return TOML.save_file(toml_file, value)


__all__ = [
    "TOML",
    "TomlResourcesMixin",
    "load_toml_from_bytes",
    "load_toml_from_str",
    "save_to_toml_file",
]
