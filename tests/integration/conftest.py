"""Fixtures for integration tests that spawn real child processes."""

import sys
from pathlib import Path
from typing import Protocol

import pytest

from suite_runner.config import RunnerConfig


class WriteScriptFn(Protocol):
    """Protocol for script creation function."""

    def __call__(self, name: str, body: str) -> Path:
        """Write a test artifact into the base directory and return its path."""


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Directory holding the test artifacts."""
    directory = tmp_path / "tests"
    directory.mkdir()
    return directory.resolve()


@pytest.fixture
def write_script(base_dir: Path) -> WriteScriptFn:
    """Return a function to write test artifacts."""

    def _write(name: str, body: str) -> Path:
        path = base_dir / name
        path.write_text(body)
        return path

    return _write


@pytest.fixture
def config(base_dir: Path) -> RunnerConfig:
    """Run runtime artifacts with this interpreter and shell ones with sh."""
    return RunnerConfig(
        base_dir=base_dir,
        runtime_command=sys.executable,
        shell_command="sh",
    )
