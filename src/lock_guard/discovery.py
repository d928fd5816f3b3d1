"""Monorepo root and workspace package discovery.

Supports the three common ways a JavaScript monorepo declares its packages:
``lerna.json``, ``workspaces`` in the root ``package.json`` and
``pnpm-workspace.yaml``. Lerna wins when present.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from .models import PackageDescriptor, Workspace
from .settings import DEFAULT_LOCK_FILE, ConfigError


EXCLUDES = {"node_modules", ".git"}
DEFAULT_LERNA_PACKAGES = ["packages/*"]

LERNA_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "packages": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "useWorkspaces": {"type": "boolean"},
    },
}


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc


def _package_json_workspaces(root: Path) -> list[str] | None:
    path = root / "package.json"
    if not path.is_file():
        return None
    data = _load_json(path)
    if not isinstance(data, dict):
        return None
    workspaces = data.get("workspaces")
    # Yarn also accepts {"packages": [...], "nohoist": [...]}
    if isinstance(workspaces, dict):
        workspaces = workspaces.get("packages")
    if workspaces is None:
        return None
    if not isinstance(workspaces, list) or not all(isinstance(w, str) for w in workspaces):
        raise ConfigError(f"'workspaces' in {path} must be an array of strings")
    return workspaces


def _pnpm_workspace_packages(root: Path) -> list[str] | None:
    path = root / "pnpm-workspace.yaml"
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    packages = data.get("packages") if isinstance(data, dict) else None
    if packages is None:
        return []
    if not isinstance(packages, list) or not all(isinstance(p, str) for p in packages):
        raise ConfigError(f"'packages' in {path} must be a list of strings")
    return packages


def _is_workspace_root(path: Path) -> bool:
    if (path / "pnpm-workspace.yaml").is_file():
        return True
    return _package_json_workspaces(path) is not None


def find_workspace_root(start: Path) -> Path:
    """Return the monorepo root for ``start``.

    The nearest ancestor holding ``lerna.json`` is preferred; otherwise the
    nearest one declaring workspaces in ``package.json`` or
    ``pnpm-workspace.yaml``.
    """
    start = start.resolve()
    candidates = [start, *start.parents]

    for candidate in candidates:
        if (candidate / "lerna.json").is_file():
            return candidate

    for candidate in candidates:
        if _is_workspace_root(candidate):
            return candidate

    raise ConfigError(f"No lerna.json or workspace configuration found from {start}")


def load_package_globs(root: Path) -> list[str]:
    """Return the package globs declared by the workspace configuration."""
    lerna_path = root / "lerna.json"
    if lerna_path.is_file():
        data = _load_json(lerna_path)
        validator = Draft202012Validator(LERNA_SCHEMA)
        errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
        if errors:
            messages = "; ".join(
                f"{'/'.join(str(p) for p in e.path) or '<root>'}: {e.message}" for e in errors
            )
            raise ConfigError(f"Invalid {lerna_path}: {messages}")
        if not data.get("useWorkspaces"):
            return list(data.get("packages") or DEFAULT_LERNA_PACKAGES)
        workspaces = _package_json_workspaces(root)
        if workspaces is None:
            raise ConfigError(f"{lerna_path} sets useWorkspaces but package.json has none")
        return workspaces

    workspaces = _package_json_workspaces(root)
    if workspaces is not None:
        return workspaces

    packages = _pnpm_workspace_packages(root)
    if packages is not None:
        return packages

    raise ConfigError(f"No workspace configuration found in {root}")


def _expand(root: Path, pattern: str) -> list[Path]:
    pattern = pattern.strip().rstrip("/")
    if pattern.startswith("./"):
        pattern = pattern[2:]
    if not pattern:
        return []

    def should_skip(p: Path) -> bool:
        parts = set(p.relative_to(root).parts)
        return any(ex in parts for ex in EXCLUDES)

    return sorted(p for p in root.glob(pattern) if p.is_dir() and not should_skip(p))


def discover_packages(start: Path, lock_file: str = DEFAULT_LOCK_FILE) -> Workspace:
    """Enumerate workspace packages in declaration order.

    Within one glob matches are sorted by path, so the result is stable across
    runs. ``!``-prefixed globs exclude what they match.
    """
    root = find_workspace_root(start)
    globs = load_package_globs(root)

    excluded: set[Path] = set()
    for pattern in globs:
        if pattern.startswith("!"):
            excluded.update(_expand(root, pattern[1:]))

    seen: set[Path] = set()
    packages: list[PackageDescriptor] = []
    for pattern in globs:
        if pattern.startswith("!"):
            continue
        for location in _expand(root, pattern):
            if location in seen or location in excluded:
                continue
            if not (location / "package.json").is_file():
                continue
            seen.add(location)
            packages.append(
                PackageDescriptor(
                    location=location,
                    lock_file=(location / lock_file).relative_to(root),
                )
            )

    return Workspace(root=root, packages=tuple(packages))
