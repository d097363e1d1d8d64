"""Exceptions raised at the burnttoast CLI boundary."""

from __future__ import annotations

import builtins
from typing import Tuple


class ConfigError(Exception):
    """Raised when the JSON config cannot be loaded or fails validation."""


class UserInputError(Exception):
    """Raised when CLI arguments are missing or inconsistent."""


class BurntToastRuntimeError(builtins.RuntimeError):
    """Raised when a PowerShell process cannot be started."""


class PowerShellNotFoundError(BurntToastRuntimeError):
    """Raised when the configured PowerShell executable is not on the search path."""

    def __init__(self, executable: str | None) -> None:
        self.executable = executable or "powershell"
        super().__init__(f"PowerShell executable not found: {self.executable}")


_ERROR_PREFIXES: Tuple[Tuple[type[BaseException], str], ...] = (
    (ConfigError, "Config error"),
    (UserInputError, "Input error"),
    (BurntToastRuntimeError, "Runtime error"),
)


def format_error(exc: BaseException) -> str:
    """Return a one-line message for stderr, prefixed by error kind."""
    message = str(exc).strip() or exc.__class__.__name__
    for exc_type, prefix in _ERROR_PREFIXES:
        if isinstance(exc, exc_type):
            return f"{prefix}: {message}"
    return f"Unexpected error: {message}"


__all__ = [
    "BurntToastRuntimeError",
    "ConfigError",
    "PowerShellNotFoundError",
    "UserInputError",
    "format_error",
]
