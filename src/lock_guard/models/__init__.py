"""Data models for the package-lock check."""

from __future__ import annotations

from .check_result import CheckResult
from .package_descriptor import PackageDescriptor, Workspace

__all__ = [
    "CheckResult",
    "PackageDescriptor",
    "Workspace",
]
