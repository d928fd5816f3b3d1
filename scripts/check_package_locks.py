#!/usr/bin/env python3
"""Local CLI entrypoint to run the package-lock check from a checkout.

Usage:
  python scripts/check_package_locks.py

Runs against the current working directory, the same as the installed
``check-package-locks`` command.
"""

from __future__ import annotations

from lock_guard.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
