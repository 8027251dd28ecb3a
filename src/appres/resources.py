"""Resource directory handle and application-directory resolution."""

from __future__ import annotations

import enum
import logging
import os
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Optional

from appres.errors import DecodeError, InvalidPath, ResourceIOError
from appres.formats.base import PathLike
from appres.formats.json_codec import JsonResourcesMixin
from appres.formats.toml_codec import TomlResourcesMixin
from appres.formats.yaml_codec import YamlResourcesMixin
from appres.util.logging import configure_logging
from appres.util.paths import PlatformRoots, StaticRoots, SystemRoots, executable_dir

if TYPE_CHECKING:
    from appres.config import ResourcesConfig

logger = logging.getLogger(__name__)


class ResolutionMode(str, enum.Enum):
    """Which platform root an application directory hangs off."""

    CONFIG = "config"
    DATA = "data"


class Resources(JsonResourcesMixin, TomlResourcesMixin, YamlResourcesMixin):
    """Read/write access to files below one application resource directory.

    The handle is immutable; every call is computed from ``base_directory``.
    Relative paths that would leave the directory raise :class:`InvalidPath`.
    """

    def __init__(self, path: PathLike, *, encoding: str = "utf-8") -> None:
        if not os.fspath(path):
            raise InvalidPath("resource directory must not be empty", path=path)
        self._base = Path(os.path.abspath(os.fspath(path)))
        self._encoding = encoding

    @property
    def base_directory(self) -> Path:
        return self._base

    @property
    def encoding(self) -> str:
        return self._encoding

    def __repr__(self) -> str:
        return f"Resources({str(self._base)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resources):
            return NotImplemented
        return self._base == other._base and self._encoding == other._encoding

    def __hash__(self) -> int:
        return hash((self._base, self._encoding))

    @classmethod
    def config_relative(cls, app_name: str, *, roots: PlatformRoots | None = None) -> "Resources":
        """Handle for ``<config root>/<app_name>``."""
        return resolve(app_name, ResolutionMode.CONFIG, roots=roots)

    @classmethod
    def data_relative(cls, app_name: str, *, roots: PlatformRoots | None = None) -> "Resources":
        """Handle for ``<data root>/<app_name>``."""
        return resolve(app_name, ResolutionMode.DATA, roots=roots)

    @classmethod
    def relative_to_executable(cls) -> "Resources":
        """Handle for the directory holding the running executable."""
        return cls(executable_dir())

    @classmethod
    def dir_relative_to_executable(cls, directory: PathLike) -> "Resources":
        """Handle for ``directory`` next to the running executable."""
        base = cls(executable_dir())
        return cls(base.file_path(directory))

    @classmethod
    def from_config(cls, config: "ResourcesConfig") -> "Resources":
        """Build a handle from a validated :class:`ResourcesConfig`.

        When ``log_path`` is set, the ``appres`` logger also writes to that file.
        """

        if config.log_path is not None:
            configure_logging(log_path=config.log_path)
        override = config.config_root if config.mode is ResolutionMode.CONFIG else config.data_root
        roots: PlatformRoots = SystemRoots() if override is None else StaticRoots(config=override, data=override)
        handle = resolve(config.app_name, config.mode, roots=roots, encoding=config.encoding)
        if config.subdirectory is not None:
            handle = cls(handle.file_path(config.subdirectory), encoding=config.encoding)
        return handle

    def file_path(self, relative_path: PathLike) -> Path:
        """Return the absolute path of ``relative_path`` without touching the disk."""

        raw = os.fspath(relative_path)
        if PurePath(raw).anchor:
            raise InvalidPath(f"{raw!r} is not a relative path", path=relative_path, base=self._base)
        joined = Path(os.path.normpath(self._base / raw))
        if joined != self._base and self._base not in joined.parents:
            raise InvalidPath(
                f"{raw!r} escapes the resource directory {self._base}",
                path=relative_path,
                base=self._base,
            )
        return joined

    def has_file(self, relative_path: PathLike) -> bool:
        """True when ``relative_path`` is an existing regular file."""
        try:
            return self.file_path(relative_path).is_file()
        except (OSError, InvalidPath):
            return False

    def has_dir(self, relative_path: PathLike) -> bool:
        """True when ``relative_path`` is an existing directory."""
        try:
            return self.file_path(relative_path).is_dir()
        except (OSError, InvalidPath):
            return False

    def ensure_dir(self, relative_path: Optional[PathLike] = None) -> Path:
        """Create the resource directory, or a subdirectory of it, with parents."""

        target = self._base if relative_path is None else self.file_path(relative_path)
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ResourceIOError("mkdir", target, exc) from exc
        return target

    def load_from_file(self, relative_path: PathLike) -> str:
        """Return the text content of ``relative_path``."""

        data = self.load_bytes_from_file(relative_path)
        try:
            return data.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise DecodeError("text", str(exc), path=self.file_path(relative_path)) from exc

    def load_bytes_from_file(self, relative_path: PathLike) -> bytes:
        target = self.file_path(relative_path)
        try:
            return target.read_bytes()
        except OSError as exc:
            raise ResourceIOError("read", target, exc) from exc

    def save_to_file(self, relative_path: PathLike, content: str | bytes) -> Path:
        """Write ``content`` to ``relative_path``, overwriting any existing file.

        The resource directory itself is created when missing; nested
        subdirectories are not, call :meth:`ensure_dir` for those.
        """

        target = self.file_path(relative_path)
        payload = content.encode(self._encoding) if isinstance(content, str) else bytes(content)
        self.ensure_dir()
        try:
            target.write_bytes(payload)
        except OSError as exc:
            raise ResourceIOError("write", target, exc) from exc
        logger.debug("Wrote %d bytes to %s", len(payload), target)
        return target


def resolve(
    app_name: str,
    mode: ResolutionMode | str,
    *,
    roots: PlatformRoots | None = None,
    encoding: str = "utf-8",
) -> Resources:
    """Resolve the resource directory of ``app_name`` under the config or data root.

    Nothing is created on disk. Raises :class:`DirectoryUnavailable` when the
    platform root cannot be determined.
    """

    _validate_app_name(app_name)
    mode = ResolutionMode(mode)
    roots = roots if roots is not None else SystemRoots()
    root = roots.config_root() if mode is ResolutionMode.CONFIG else roots.data_root()
    base = Path(root) / app_name
    logger.debug("Resolved %s directory for %s: %s", mode.value, app_name, base)
    return Resources(base, encoding=encoding)


def _validate_app_name(app_name: str) -> None:
    if not isinstance(app_name, str) or not app_name:
        raise InvalidPath("app name must be a non-empty string", path=app_name)
    if "/" in app_name or "\\" in app_name or os.sep in app_name:
        raise InvalidPath(f"app name {app_name!r} must be a single path segment", path=app_name)
    if app_name in {".", ".."} or "\x00" in app_name:
        raise InvalidPath(f"app name {app_name!r} is not a valid directory name", path=app_name)


__all__ = ["ResolutionMode", "Resources", "resolve"]
