"""Parse npm package-lock.json and find pinned internal packages."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from ..models import CheckResult


class LockfileError(RuntimeError):
    """Base error for failures while reading a lock file."""


class LockfileNotFoundError(LockfileError):
    """Raised when a package has no lock file on disk."""


class LockfileParseError(LockfileError):
    """Raised when a lock file is not a JSON object."""


def read_lock_file(path: Path) -> dict[str, Any]:
    """Return the parsed lock file document."""
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise LockfileNotFoundError(f"Lock file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise LockfileParseError(f"Lock file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise LockfileError(f"Failed to read lock file {path}: {exc}") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise LockfileParseError(f"Invalid JSON in lock file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise LockfileParseError(f"Lock file {path} must contain a JSON object")

    return data


def find_violations(data: dict[str, Any], prefix: str) -> list[str]:
    """Return dependency names starting with ``prefix``, in lock file order.

    Only the keys of the npm v1 ``dependencies`` tree are consulted.
    """
    deps = data.get("dependencies") or {}
    if not isinstance(deps, dict):
        raise LockfileParseError("'dependencies' must be a JSON object")
    return [name for name in deps if name.startswith(prefix)]


async def check_lock_file(root: Path, lock_file: Path, prefix: str) -> CheckResult:
    """Read one lock file off the event loop and collect its violations."""
    data = await asyncio.to_thread(read_lock_file, root / lock_file)
    try:
        violations = find_violations(data, prefix)
    except LockfileParseError as exc:
        raise LockfileParseError(f"Invalid lock file {lock_file}: {exc}") from exc
    return CheckResult.from_iterable(lock_file, violations)
