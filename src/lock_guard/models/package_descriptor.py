"""Workspace package models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PackageDescriptor:
    """A single workspace package and where its lock file lives."""

    location: Path
    lock_file: Path

    def __post_init__(self) -> None:
        if not self.location.is_absolute():
            raise ValueError("Package location must be an absolute path")
        if self.lock_file.is_absolute():
            raise ValueError("Lock file path must be relative to the repository root")


@dataclass(frozen=True)
class Workspace:
    """Repository root and its packages, in enumeration order."""

    root: Path
    packages: tuple[PackageDescriptor, ...]

    @property
    def lock_files(self) -> list[Path]:
        return [package.lock_file for package in self.packages]
