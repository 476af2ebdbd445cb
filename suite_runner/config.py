"""Configuration for the suite runner."""

from pathlib import Path

from pydantic import Field

from suite_runner.models.base import Model


class RunnerConfig(Model):
    """Configuration shared by every test case launch."""

    base_dir: Path = Field(
        ..., description="Directory holding test artifacts; child working dir"
    )
    runtime_command: str = Field(
        default="node", description="Launcher for runtime test artifacts"
    )
    shell_command: str = Field(
        default="bash", description="Launcher for shell test artifacts"
    )
    # None waits for each child indefinitely
    timeout: float | None = Field(
        default=None, gt=0, description="Per-case timeout in seconds"
    )
