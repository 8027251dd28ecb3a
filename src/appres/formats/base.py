"""Generic serialization adapter shared by the JSON, TOML and YAML formats."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, TypeAdapter, ValidationError

from appres.errors import DecodeError, EncodeError, ResourceIOError

if TYPE_CHECKING:
    from appres.resources import Resources

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


@dataclass(frozen=True)
class Codec:
    """Paired text encoder/decoder for one structured format."""

    name: str
    extension: str
    encode: Callable[[Any], str]
    decode: Callable[[str], Any]
    encode_errors: tuple[type[Exception], ...] = (TypeError, ValueError, RecursionError)
    decode_errors: tuple[type[Exception], ...] = (ValueError, RecursionError)


def to_plain(value: Any) -> Any:
    """Dump pydantic models to plain data; leave everything else untouched."""

    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


class FormatAdapter:
    """Sequences path resolution, file IO and a codec for one format."""

    def __init__(self, codec: Codec) -> None:
        self.codec = codec

    @property
    def name(self) -> str:
        return self.codec.name

    def dumps(self, value: Any) -> str:
        """Encode ``value`` to text, raising :class:`EncodeError` on failure."""

        try:
            return self.codec.encode(to_plain(value))
        except self.codec.encode_errors as exc:
            raise EncodeError(self.codec.name, str(exc)) from exc

    def loads(self, text: str | bytes, shape: Optional[Any] = None, *, path: Path | None = None) -> Any:
        """Decode ``text`` and optionally validate it into ``shape``."""

        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodeError(self.codec.name, str(exc), path=path) from exc
        try:
            data = self.codec.decode(text)
        except self.codec.decode_errors as exc:
            raise DecodeError(self.codec.name, str(exc), path=path) from exc
        if shape is None:
            return data
        try:
            return TypeAdapter(shape).validate_python(data)
        except ValidationError as exc:
            raise DecodeError(self.codec.name, str(exc), path=path) from exc

    def save(self, resources: "Resources", relative_path: PathLike, value: Any) -> Path:
        """Encode ``value`` and write it below ``resources``, overwriting."""

        target = resources.file_path(relative_path)
        text = self.dumps(value)
        logger.debug("Saving %s to %s", self.codec.name, target)
        return resources.save_to_file(relative_path, text)

    def load(self, resources: "Resources", relative_path: PathLike, shape: Optional[Any] = None) -> Any:
        """Read ``relative_path`` below ``resources`` and decode it."""

        target = resources.file_path(relative_path)
        text = resources.load_from_file(relative_path)
        logger.debug("Loaded %s from %s", self.codec.name, target)
        return self.loads(text, shape, path=target)

    def save_file(self, path: PathLike, value: Any, *, encoding: str = "utf-8") -> Path:
        """Encode ``value`` into ``path`` directly, creating its parent directory."""

        text = self.dumps(value)
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ResourceIOError("mkdir", target.parent, exc) from exc
        try:
            target.write_text(text, encoding=encoding)
        except OSError as exc:
            raise ResourceIOError("write", target, exc) from exc
        logger.debug("Saved %s to %s", self.codec.name, target)
        return target


__all__ = ["Codec", "FormatAdapter", "PathLike", "to_plain"]
