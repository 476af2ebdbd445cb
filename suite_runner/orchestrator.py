"""Test orchestrator for running a catalog of test cases sequentially."""

import logging
from dataclasses import dataclass

from suite_runner.executor import CaseExecutor, LaunchFailedError
from suite_runner.models.catalog import Catalog, TestCase
from suite_runner.models.result import SuiteSummary, TestResult
from suite_runner.reporting import log_suite_summary

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestOrchestrator:
    """Orchestrates test case execution over an injected catalog."""

    __test__ = False

    catalog: Catalog
    executor: CaseExecutor

    async def run_suite(self) -> SuiteSummary:
        """Run every test case in catalog order, one at a time.

        A case that fails or cannot be launched never stops the remaining
        cases from running.

        Returns:
            Summary holding one result per catalog entry, in catalog order

        """
        log.info("🚀 Starting test suite execution...")
        log.info("")

        results: list[TestResult] = []
        for case in self.catalog.cases:
            results.append(await self._run_isolated(case))

        summary = SuiteSummary(results=results)
        log_suite_summary(log, summary, self.catalog.coverage)
        return summary

    async def run_single(self, token: str) -> TestResult:
        """Resolve a token against the catalog and run only the matched case.

        Raises:
            TestNotFoundError: If the token matches no test case
            LaunchFailedError: If the matched case could not be launched

        """
        case = self.catalog.find(token)
        log.info("🎯 Running specific test: %s", case.name)
        log.info("")
        return await self.executor.run_case(case)

    async def _run_isolated(self, case: TestCase) -> TestResult:
        try:
            return await self.executor.run_case(case)
        except LaunchFailedError as e:
            log.debug("Recording launch failure for %s", case.name, exc_info=e)
            return TestResult(name=case.name, passed=False, error=e.detail)
