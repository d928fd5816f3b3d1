"""Per-lock-file check result."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from collections.abc import Iterable


@dataclass(frozen=True)
class CheckResult:
    """Internal dependencies found in one lock file."""

    lock_file: Path
    violations: tuple[str, ...]

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)

    def to_dict(self) -> dict[str, object]:
        return {
            "lockFile": self.lock_file.as_posix(),
            "violations": list(self.violations),
        }

    @classmethod
    def from_iterable(cls, lock_file: Path, violations: Iterable[str]) -> CheckResult:
        return cls(lock_file=lock_file, violations=tuple(violations))
