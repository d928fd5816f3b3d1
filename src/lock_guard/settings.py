"""Runtime settings for the package-lock check.

Values are read from environment variables so CI jobs can tune the check
without flags. Every setting has a default matching the monorepo layout the
check was written for.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from collections.abc import Mapping


INTERNAL_PREFIX_ENV_VAR = "LOCK_GUARD_INTERNAL_PREFIX"
LOCK_FILE_ENV_VAR = "LOCK_GUARD_LOCK_FILE"
FIX_COMMAND_ENV_VAR = "LOCK_GUARD_FIX_COMMAND"

DEFAULT_INTERNAL_PREFIX = "@loopback/"
DEFAULT_LOCK_FILE = "package-lock.json"
DEFAULT_FIX_COMMAND = "npm run update-package-locks"


class ConfigError(RuntimeError):
    """Raised when the settings or the workspace layout cannot be resolved."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    internal_prefix: str = DEFAULT_INTERNAL_PREFIX
    lock_file: str = DEFAULT_LOCK_FILE
    fix_command: str = DEFAULT_FIX_COMMAND

    def __post_init__(self) -> None:
        if not self.internal_prefix:
            raise ConfigError("Internal package prefix must be non-empty")
        if not self.lock_file or "/" in self.lock_file or "\\" in self.lock_file:
            raise ConfigError(f"Invalid lock file name: {self.lock_file!r}")
        if not self.fix_command:
            raise ConfigError("Fix command must be non-empty")


def _read(env: Mapping[str, str], name: str, default: str) -> str:
    value = env.get(name)
    if value is None:
        return default
    return value.strip()


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Build settings from the environment.

    Args:
        env: Optional mapping to read instead of ``os.environ``.

    Raises:
        ConfigError: If a variable is set to an unusable value.
    """
    if env is None:
        env = os.environ

    return Settings(
        internal_prefix=_read(env, INTERNAL_PREFIX_ENV_VAR, DEFAULT_INTERNAL_PREFIX),
        lock_file=_read(env, LOCK_FILE_ENV_VAR, DEFAULT_LOCK_FILE),
        fix_command=_read(env, FIX_COMMAND_ENV_VAR, DEFAULT_FIX_COMMAND),
    )
