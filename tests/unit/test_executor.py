"""Tests for CaseExecutor with the process layer patched out."""

import logging
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from suite_runner.config import RunnerConfig
from suite_runner.executor import (
    CaseExecutor,
    Exited,
    LaunchError,
    LaunchFailedError,
    TimedOut,
)
from suite_runner.models.catalog import TestCase


@pytest.fixture
def executor(tmp_path: Path) -> CaseExecutor:
    (tmp_path / "test-humidity-fix.js").write_text("")
    (tmp_path / "test-model-display.sh").write_text("")
    return CaseExecutor(config=RunnerConfig(base_dir=tmp_path, timeout=5))


@pytest.fixture
def runtime_case() -> TestCase:
    return TestCase(
        name="Humidity Fix Test",
        description="Clamps humidity",
        file="test-humidity-fix.js",
    )


@pytest.fixture
def shell_case() -> TestCase:
    return TestCase(
        name="Model Display Test",
        description="Model names",
        file="test-model-display.sh",
        kind="shell",
    )


class TestCommandFor:
    """Tests for launcher selection."""

    def test_runtime_case_uses_runtime_launcher(
        self, executor: CaseExecutor, runtime_case: TestCase, tmp_path: Path
    ) -> None:
        """Runtime cases are passed to the runtime as its sole argument."""
        assert executor.command_for(runtime_case) == [
            "node",
            str(tmp_path / "test-humidity-fix.js"),
        ]

    def test_shell_case_uses_shell_launcher(
        self, executor: CaseExecutor, shell_case: TestCase, tmp_path: Path
    ) -> None:
        """Shell cases are passed to the shell interpreter."""
        assert executor.command_for(shell_case) == [
            "bash",
            str(tmp_path / "test-model-display.sh"),
        ]

    def test_uses_configured_launchers(self, tmp_path: Path) -> None:
        """Launchers come from configuration."""
        executor = CaseExecutor(
            config=RunnerConfig(
                base_dir=tmp_path, runtime_command="deno", shell_command="zsh"
            )
        )

        assert executor.command_for(TestCase(name="a", file="a.js"))[0] == "deno"
        assert (
            executor.command_for(TestCase(name="b", file="b.sh", kind="shell"))[0]
            == "zsh"
        )


class TestRunCase:
    """Tests for CaseExecutor.run_case."""

    async def test_zero_exit_passes(
        self,
        executor: CaseExecutor,
        runtime_case: TestCase,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Exit code 0 yields a passing result."""
        with (
            patch(
                "suite_runner.executor.spawn",
                new_callable=AsyncMock,
                return_value=Exited(code=0),
            ) as mock_spawn,
            caplog.at_level(logging.INFO),
        ):
            result = await executor.run_case(runtime_case)

        assert result.passed is True
        assert result.exit_code == 0
        assert result.error is None
        mock_spawn.assert_called_once_with(
            ["node", str(tmp_path / "test-humidity-fix.js")], tmp_path, 5
        )
        assert "🔬 Running: Humidity Fix Test" in caplog.text
        assert "📝 Description: Clamps humidity" in caplog.text
        assert "📄 File: test-humidity-fix.js" in caplog.text
        assert "✅ Humidity Fix Test - PASSED" in caplog.text

    @pytest.mark.parametrize("code", [1, 2, 127, 255])
    async def test_nonzero_exit_fails(
        self,
        executor: CaseExecutor,
        runtime_case: TestCase,
        code: int,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Any non-zero exit code yields a failing result with the code."""
        with (
            patch(
                "suite_runner.executor.spawn",
                new_callable=AsyncMock,
                return_value=Exited(code=code),
            ),
            caplog.at_level(logging.INFO),
        ):
            result = await executor.run_case(runtime_case)

        assert result.passed is False
        assert result.exit_code == code
        assert result.error is None
        assert f"❌ Humidity Fix Test - FAILED (exit code: {code})" in caplog.text

    async def test_launch_error_is_raised(
        self,
        executor: CaseExecutor,
        shell_case: TestCase,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Spawn failures propagate as LaunchFailedError."""
        with (
            patch(
                "suite_runner.executor.spawn",
                new_callable=AsyncMock,
                return_value=LaunchError(detail="No such file: 'bash'"),
            ),
            caplog.at_level(logging.INFO),
            pytest.raises(LaunchFailedError) as exc_info,
        ):
            await executor.run_case(shell_case)

        assert exc_info.value.case == shell_case
        assert exc_info.value.detail == "No such file: 'bash'"
        assert "❌ Model Display Test - ERROR: No such file: 'bash'" in caplog.text

    async def test_timeout_fails_with_error(
        self,
        executor: CaseExecutor,
        runtime_case: TestCase,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A killed child yields a failing result carrying the timeout."""
        with (
            patch(
                "suite_runner.executor.spawn",
                new_callable=AsyncMock,
                return_value=TimedOut(timeout=5),
            ),
            caplog.at_level(logging.INFO),
        ):
            result = await executor.run_case(runtime_case)

        assert result.passed is False
        assert result.exit_code is None
        assert result.error == "timed out after 5s"
        assert "TIMED OUT after 5s" in caplog.text

    async def test_missing_artifact_never_spawns(self, tmp_path: Path) -> None:
        """A missing test file is a launch failure and nothing is spawned."""
        executor = CaseExecutor(config=RunnerConfig(base_dir=tmp_path))

        with (
            patch("suite_runner.executor.spawn", new_callable=AsyncMock) as mock_spawn,
            pytest.raises(LaunchFailedError, match="Test file not found"),
        ):
            await executor.run_case(TestCase(name="Gone", file="gone.js"))

        mock_spawn.assert_not_called()
