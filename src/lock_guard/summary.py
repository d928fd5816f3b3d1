"""Human-readable rendering of a violations report for stderr."""

from __future__ import annotations

from typing import Any

from .settings import DEFAULT_FIX_COMMAND


def render_report(report: dict[str, Any], fix_command: str = DEFAULT_FIX_COMMAND) -> str:
    """Return the operator-facing text; empty when there is nothing to report."""
    packages = report.get("packages") or []
    if not packages:
        return ""

    lines = ["", "Invalid package-lock entries found!", ""]
    for pkg in packages:
        lines.append(f"  {pkg.get('lockFile', '')}")
        for name in pkg.get("violations") or []:
            lines.append(f"    -> {name}")

    lines.append("")
    lines.append("Run the following command to fix the problems:")
    lines.append("")
    lines.append(f"  $ {fix_command}")
    lines.append("")

    return "\n".join(lines) + "\n"
