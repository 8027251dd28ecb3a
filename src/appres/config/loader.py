"""Config loading entry points for appres."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from appres.errors import ConfigError, DecodeError
from appres.formats import PRETTY_JSON, TOML, YAML, FormatAdapter

from .models import ResourcesConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "default.yaml"

ENV_VARIABLES: Mapping[str, str] = {
    "APPRES_APP_NAME": "app_name",
    "APPRES_MODE": "mode",
    "APPRES_CONFIG_ROOT": "config_root",
    "APPRES_DATA_ROOT": "data_root",
}

FORMATS_BY_SUFFIX: Mapping[str, FormatAdapter] = {
    **{adapter.codec.extension: adapter for adapter in (YAML, TOML, PRETTY_JSON)},
    ".yml": YAML,
}


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> ResourcesConfig:
    """Load the resources configuration applying environment and overrides."""

    default_data = _expect_mapping(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)

    if path:
        config_data = _expect_mapping(_read_structured_file(Path(path)), Path(path))
    else:
        config_data = {}

    merged: dict[str, Any] = _deep_merge(default_data, config_data)
    merged = _deep_merge(merged, _environment_overrides())

    if overrides:
        merged = _deep_merge(merged, overrides)

    try:
        return ResourcesConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid appres configuration: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest`` in the format its suffix names."""

    adapter = _format_for(dest)
    defaults = _read_structured_file(DEFAULT_CONFIG_PATH)
    example = {"app_name": "example", **defaults}
    if adapter is TOML:
        example = {key: value for key, value in example.items() if value is not None}
    adapter.save_file(dest, example)


def _format_for(path: Path) -> FormatAdapter:
    try:
        return FORMATS_BY_SUFFIX[path.suffix.lower()]
    except KeyError:
        raise ConfigError(f"Unsupported config format for {path}") from None


def _environment_overrides() -> dict[str, Any]:
    result: dict[str, Any] = {}
    for variable, key in ENV_VARIABLES.items():
        value = os.getenv(variable)
        if value:
            result[key] = value.strip()
    return result


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    adapter = _format_for(path)
    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    try:
        content = path.read_bytes()
    except OSError as exc:
        raise ConfigError(f"Config file {path} cannot be read: {exc}") from exc

    try:
        return adapter.loads(content, path=path)
    except DecodeError as exc:
        raise ConfigError(f"Config file {path} is malformed: {exc}") from exc


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_VARIABLES",
    "load_config",
    "dump_example_config",
]
