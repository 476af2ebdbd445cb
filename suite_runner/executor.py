"""Execution of a single test case as a child process."""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from suite_runner.config import RunnerConfig
from suite_runner.models.catalog import TestCase
from suite_runner.models.result import TestResult
from suite_runner.reporting import (
    log_case_error,
    log_case_exited,
    log_case_start,
    log_case_timed_out,
)

log = logging.getLogger(__name__)


class LaunchFailedError(Exception):
    """Raised when a test case's child process could not be started."""

    def __init__(self, case: TestCase, detail: str) -> None:
        super().__init__(detail)
        self.case = case
        self.detail = detail


@dataclass(frozen=True, kw_only=True)
class Exited:
    """The child ran and terminated with a return code."""

    code: int


@dataclass(frozen=True, kw_only=True)
class LaunchError:
    """The child could not be started."""

    detail: str


@dataclass(frozen=True, kw_only=True)
class TimedOut:
    """The child was killed after exceeding the timeout."""

    timeout: float


ProcessOutcome: TypeAlias = Exited | LaunchError | TimedOut


async def spawn(
    command: Sequence[str], cwd: Path, timeout: float | None = None
) -> ProcessOutcome:
    """Start a child with inherited standard streams and await its exit.

    Args:
        command: Program and arguments
        cwd: Working directory for the child
        timeout: Seconds to wait before killing the child (None waits forever)

    Returns:
        The settled outcome of the child process

    """
    try:
        process = await asyncio.create_subprocess_exec(*command, cwd=cwd)
    except OSError as e:
        return LaunchError(detail=str(e))

    try:
        returncode = await asyncio.wait_for(process.wait(), timeout)
    except TimeoutError:
        log.debug("Killing pid %d after %ss", process.pid, timeout)
        await _kill(process)
        return TimedOut(timeout=timeout or 0.0)
    except asyncio.CancelledError:
        log.debug("Killing pid %d on cancellation", process.pid)
        await _kill(process)
        raise

    return Exited(code=returncode)


async def _kill(process: asyncio.subprocess.Process) -> None:
    if process.returncode is None:
        process.kill()
    await process.wait()


@dataclass(frozen=True, kw_only=True)
class CaseExecutor:
    """Runs one test case at a time using the configured launchers."""

    config: RunnerConfig

    def command_for(self, case: TestCase) -> Sequence[str]:
        launcher = (
            self.config.shell_command
            if case.kind == "shell"
            else self.config.runtime_command
        )
        return [launcher, str(self.config.base_dir / case.file)]

    async def run_case(self, case: TestCase) -> TestResult:
        """Run a test case to completion and narrate its outcome.

        Returns:
            The result; ``passed`` is true iff the child exited with 0

        Raises:
            LaunchFailedError: If the artifact is missing or the launcher
                could not be started

        """
        log_case_start(log, case)

        loop = asyncio.get_running_loop()
        started = loop.time()
        outcome = await self._launch(case)
        duration = loop.time() - started

        match outcome:
            case Exited(code=code):
                log_case_exited(log, case, code)
                log.debug("%s finished in %.2fs", case.name, duration)
                return TestResult(
                    name=case.name,
                    passed=code == 0,
                    exit_code=code,
                    duration=duration,
                )
            case TimedOut(timeout=timeout):
                log_case_timed_out(log, case, timeout)
                return TestResult(
                    name=case.name,
                    passed=False,
                    error=f"timed out after {timeout:g}s",
                    duration=duration,
                )
            case LaunchError(detail=detail):
                log_case_error(log, case, detail)
                raise LaunchFailedError(case, detail)

    async def _launch(self, case: TestCase) -> ProcessOutcome:
        path = self.config.base_dir / case.file
        if not path.is_file():
            return LaunchError(detail=f"Test file not found: {path}")

        command = self.command_for(case)
        log.debug("Spawning %s (cwd=%s)", " ".join(command), self.config.base_dir)
        return await spawn(command, self.config.base_dir, self.config.timeout)
