"""Pydantic models describing appres configuration."""

from __future__ import annotations

import codecs
from pathlib import Path, PurePath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from appres.resources import ResolutionMode


class ResourcesConfig(BaseModel):
    """Where an application's resource directory lives and how files are read."""

    model_config = ConfigDict(extra="forbid")

    app_name: str = Field(min_length=1)
    mode: ResolutionMode = ResolutionMode.CONFIG
    subdirectory: Optional[Path] = None
    config_root: Optional[Path] = None
    data_root: Optional[Path] = None
    encoding: str = "utf-8"
    log_path: Optional[Path] = None

    @field_validator("app_name")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if len(PurePath(value).parts) != 1 or "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError("app_name must be a single path segment")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding {value!r}") from exc
        return value


__all__ = ["ResourcesConfig"]
