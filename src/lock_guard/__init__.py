"""lock-guard core package.

Checks that a monorepo's package-lock files do not pin the monorepo's own
packages. The check is callable from the ``check-package-locks`` CLI and from
other tooling through :mod:`lock_guard.core`.
"""

__all__ = [
    "cli",
    "core",
]
