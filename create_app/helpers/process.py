"""Process execution for external commands (git)."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

# Shell convention for "command not found"
_COMMAND_NOT_FOUND = 127
# Shell convention for "found but cannot execute"
_COMMAND_NOT_EXECUTABLE = 126


@dataclass(frozen=True)
class ProcessResult:
    """Captured result of a finished process.

    Attributes:
        output: stdout followed by stderr.
        returncode: Process exit code.
    """

    output: str
    returncode: int


class Executor(Protocol):
    """Callable that runs ``command args...`` and returns its result."""

    def __call__(
        self,
        command: str,
        args: Sequence[str],
        cwd: Path | None = None,
    ) -> ProcessResult:
        ...


def run_process(
    command: str,
    args: Sequence[str],
    cwd: Path | None = None,
) -> ProcessResult:
    """Run a command to completion and capture its output.

    Args:
        command: Executable name (looked up on PATH).
        args: Arguments passed to the executable.
        cwd: Working directory, defaults to the current one.

    Returns:
        ProcessResult with combined output. A missing executable is
        reported as exit code 127 and one that cannot be started (e.g. no
        execute permission) as 126, instead of raising.
    """
    try:
        result = subprocess.run(
            [command, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        return ProcessResult(
            output=f"Command not found: {command}",
            returncode=_COMMAND_NOT_FOUND,
        )
    except OSError as exc:
        return ProcessResult(
            output=f"Cannot execute {command}: {exc.strerror or exc}",
            returncode=_COMMAND_NOT_EXECUTABLE,
        )

    output = "\n".join(
        part.strip() for part in (result.stdout, result.stderr) if part.strip()
    )
    return ProcessResult(output=output, returncode=result.returncode)
