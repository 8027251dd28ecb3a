from __future__ import annotations

from pathlib import Path

from appres import Resources, StaticRoots, resolve

APP_NAME = "projectile"


def fake_roots(tmpdir: str | Path) -> StaticRoots:
    """Config and data roots living under a temporary directory."""

    base = Path(tmpdir)
    return StaticRoots(config=base / "config", data=base / "data")


def resources_in(tmpdir: str | Path, *, app_name: str = APP_NAME, mode: str = "config") -> Resources:
    """Resolve ``app_name`` against fake roots below ``tmpdir``."""

    return resolve(app_name, mode, roots=fake_roots(tmpdir))
