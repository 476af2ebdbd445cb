"""Models for the declared catalog of test cases."""

from collections.abc import Sequence
from typing import Literal

from pydantic import Field

from suite_runner.models.base import Model

ExecutionKind = Literal["runtime", "shell"]


class TestNotFoundError(Exception):
    """Raised when a lookup token matches no test case."""

    __test__ = False

    def __init__(self, token: str, available: Sequence[tuple[str, str]]) -> None:
        super().__init__(f"Test not found: {token}")
        self.token = token
        self.available = available


class TestCase(Model):
    """Single declared test backed by an executable artifact."""

    __test__ = False

    name: str = Field(..., description="Human-readable test name")
    description: str = Field(default="", description="What the test checks")
    file: str = Field(..., description="Artifact path relative to the base dir")
    kind: ExecutionKind = Field(
        default="runtime",
        description="Launcher: general-purpose runtime or shell interpreter",
    )


class Catalog(Model):
    """Ordered, immutable set of test cases."""

    title: str = Field(default="Test Suite", description="Banner shown at startup")
    cases: Sequence[TestCase] = Field(
        default_factory=list, description="Test cases in execution order"
    )
    coverage: Sequence[str] = Field(
        default_factory=list, description="Coverage notes printed after a suite run"
    )

    def available(self) -> Sequence[tuple[str, str]]:
        """Return ``(file, name)`` pairs in catalog order."""
        return [(case.file, case.name) for case in self.cases]

    def find(self, token: str) -> TestCase:
        """Resolve a user token to a single test case.

        Tiers are tried in order across the whole catalog, and the first
        case matching the earliest tier wins:

        1. ``file`` equals the token
        2. ``name`` contains the token, case-insensitively
        3. ``file`` contains the token

        Raises:
            TestNotFoundError: If no case matches any tier

        """
        folded = token.casefold()
        tiers = (
            lambda case: case.file == token,
            lambda case: folded in case.name.casefold(),
            lambda case: token in case.file,
        )
        for matches in tiers:
            for case in self.cases:
                if matches(case):
                    return case

        raise TestNotFoundError(token, self.available())
