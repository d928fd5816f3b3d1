"""Verify that local monorepo packages are excluded from package-lock files.

Internal packages are linked from the workspace, so a lock file that pins one
of them was generated against the registry and must be regenerated.

Exit codes: 0 when clean, 1 when violations were reported, 2 on any error.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .core import check_repository
from .parsers.package_lock import LockfileError
from .report import aggregate
from .settings import ConfigError, load_settings
from .summary import render_report

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="check-package-locks",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    return parser.parse_args(argv)


def run(cwd: Path) -> int:
    settings = load_settings()
    results = asyncio.run(check_repository(cwd, settings))
    report = aggregate(results)
    if not report["hasViolations"]:
        return EXIT_OK

    print(render_report(report, settings.fix_command), end="", file=sys.stderr)
    return EXIT_VIOLATIONS


def main(argv: list[str] | None = None) -> int:
    parse_args(argv)
    try:
        return run(Path.cwd())
    except (ConfigError, LockfileError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except Exception as exc:
        print(repr(exc), file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
