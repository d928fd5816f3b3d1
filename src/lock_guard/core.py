"""Core check entrypoints.

Nothing here prints or exits; the CLI owns process-level behaviour so the
sweep can be reused from other tooling and tests.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from .discovery import discover_packages
from .models import CheckResult, Workspace
from .parsers.package_lock import check_lock_file
from .settings import Settings


async def check_package_locks(workspace: Workspace, settings: Settings) -> list[CheckResult]:
    """Check every lock file in the workspace concurrently.

    All reads are started together and awaited at a single gather point. The
    first read or parse failure propagates; there is no partial result.

    Returns: results with at least one violation, in package order.
    """
    results = await asyncio.gather(
        *(
            check_lock_file(workspace.root, lock_file, settings.internal_prefix)
            for lock_file in workspace.lock_files
        )
    )
    return [result for result in results if result.has_violations]


async def check_repository(start: Path, settings: Settings) -> list[CheckResult]:
    """Discover the workspace containing ``start`` and check its lock files."""
    workspace = discover_packages(start, lock_file=settings.lock_file)
    return await check_package_locks(workspace, settings)
