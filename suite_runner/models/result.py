"""Models for test execution results."""

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Result of a single test case execution.

    ``error`` is only set when the child never reported an exit code of its
    own, i.e. it could not be launched or was killed on timeout.
    """

    __test__ = False

    name: str
    passed: bool
    exit_code: int | None = None
    error: str | None = None
    duration: float = 0.0


@dataclass(frozen=True, kw_only=True)
class SuiteSummary:
    """Aggregate of every result collected during one suite run."""

    results: Sequence[TestResult]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed_count(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed_count(self) -> int:
        return self.total - self.passed_count

    @property
    def percentage(self) -> int:
        """Share of passing tests, rounded half up to a whole percent."""
        if not self.total:
            return 0
        return math.floor(self.passed_count * 100 / self.total + 0.5)

    @property
    def all_passed(self) -> bool:
        return self.failed_count == 0
