"""Running short-lived external commands."""

import subprocess
from dataclasses import dataclass
from typing import List, Optional

from shell_ps1.exceptions import ProbeError


@dataclass
class ProcessResult:
    """Outcome of an external command."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0


def run_exec(argv: List[str], timeout: Optional[float] = None) -> ProcessResult:
    """
    Exec-style subprocess wrapper:
    - No shell=True
    - Optional timeout
    - Captures stdout/stderr

    Raises:
        ProbeError: if the command cannot be started, times out or is
            given a timeout the platform cannot wait for
    """
    if not argv or not isinstance(argv, list) or not isinstance(argv[0], str):
        raise ValueError("argv must be a non-empty list of strings")

    try:
        completed = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise ProbeError(argv[0], f"process timeout after {timeout}s") from e
    except (OSError, subprocess.SubprocessError, ValueError, OverflowError) as e:
        raise ProbeError(argv[0], str(e)) from e

    return ProcessResult(
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        stderr=completed.stderr.decode("utf-8", errors="replace"),
        exit_code=completed.returncode,
    )
