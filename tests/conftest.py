"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return path


def write_package(
    root: Path,
    subdir: str,
    name: str,
    dependencies: dict[str, Any] | None = None,
    lock: bool = True,
) -> Path:
    """Write a package.json and, unless ``lock`` is False, a package-lock.json."""
    pkg_dir = root / subdir
    write_json(pkg_dir / "package.json", {"name": name, "version": "1.0.0"})
    if lock:
        lock_data: dict[str, Any] = {"name": name, "lockfileVersion": 1, "requires": True}
        if dependencies is not None:
            lock_data["dependencies"] = dependencies
        write_json(pkg_dir / "package-lock.json", lock_data)
    return pkg_dir


@pytest.fixture
def monorepo(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory that writes a lerna monorepo under ``tmp_path``."""

    def _make(packages: list[str] | None = None) -> Path:
        lerna: dict[str, Any] = {"version": "independent"}
        if packages is not None:
            lerna["packages"] = packages
        write_json(tmp_path / "lerna.json", lerna)
        write_json(tmp_path / "package.json", {"name": "root", "private": True})
        return tmp_path

    return _make
