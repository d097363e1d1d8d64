"""Run PowerShell expressions as a best-effort external process."""

from __future__ import annotations

import logging
import subprocess

DEFAULT_EXECUTABLE = "powershell"
logger = logging.getLogger(__name__)


class PowerShellRunner:
    """Spawn a PowerShell interpreter for a single command string."""

    def __init__(self, executable: str = DEFAULT_EXECUTABLE, *, verbose: bool = False) -> None:
        self.executable = executable
        self.verbose = verbose

    def build_argv(self, command: str) -> list[str]:
        return [self.executable, "-NoProfile", "-NonInteractive", "-Command", command]

    def run(self, command: str) -> None:
        """Run the command and wait for the interpreter to exit.

        Output is discarded and the exit status is only logged; a failing
        notification is not reported back to the caller.
        """
        if self.verbose:
            logger.info("Running PowerShell command: %s", command)
        result = subprocess.run(
            self.build_argv(command),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        if result.returncode != 0:
            logger.debug("%s exited with status %s.", self.executable, result.returncode)


def run_powershell(
    command: str, *, executable: str = DEFAULT_EXECUTABLE, verbose: bool = False
) -> None:
    """Run a command with a one-off :class:`PowerShellRunner`."""
    PowerShellRunner(executable, verbose=verbose).run(command)


__all__ = ["DEFAULT_EXECUTABLE", "PowerShellRunner", "run_powershell"]
