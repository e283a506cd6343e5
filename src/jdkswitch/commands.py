"""Command execution seam.

Every external process the core talks to (version probes, registry
queries and mutations, executable resolution, the environment-change
broadcast) goes through a ``CommandRunner``. Production code uses
``SubprocessRunner``; tests inject a runner with canned results so Probe,
Resolver and Store logic can be exercised without a real OS environment.

Runners raise ``OSError`` when a process cannot be spawned at all. A
process that starts and exits non-zero is not an error at this layer; the
caller inspects ``CommandResult.returncode``.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one finished process.

    Attributes:
        returncode: Process exit status.
        stdout: Captured standard output, decoded.
        stderr: Captured standard error, decoded.
    """

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr (``java -version`` writes to stderr)."""
        if self.stdout and self.stderr:
            return f"{self.stdout}\n{self.stderr}"
        return self.stdout or self.stderr


class CommandRunner(ABC):
    """Runs an external command to completion and captures its output."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> CommandResult:
        """Run ``args`` and wait for it to exit.

        Raises:
            OSError: The process could not be started.
        """


class SubprocessRunner(CommandRunner):
    """``CommandRunner`` backed by ``subprocess.run``.

    No timeout is applied: a hung child blocks the calling worker.
    """

    def __init__(self, encoding: str | None = None) -> None:
        self._encoding = encoding

    def run(self, args: Sequence[str]) -> CommandResult:
        argv = [str(a) for a in args]
        logger.debug("Running %s", argv)
        completed = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            encoding=self._encoding,
            errors="replace",
            check=False,
        )
        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
