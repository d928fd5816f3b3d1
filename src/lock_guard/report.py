"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from typing import Any

from .models import CheckResult


def aggregate(results: list[CheckResult]) -> dict[str, Any]:
    """Aggregate per-lock-file results into a single report.

    Results without violations are dropped; the rest keep their order.
    """
    bad = [result for result in results if result.has_violations]

    report: dict[str, Any] = {
        "hasViolations": bool(bad),
        "packages": [result.to_dict() for result in bad],
    }

    return report
