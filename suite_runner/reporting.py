"""Console narration for suite and test case runs."""

import logging
from collections.abc import Sequence

from suite_runner.models.catalog import Catalog, TestCase
from suite_runner.models.result import SuiteSummary

RULE = "─" * 50

STATUS_MARKERS = {
    True: "✅ PASS",
    False: "❌ FAIL",
}


def log_banner(log: logging.Logger, title: str) -> None:
    """Log the suite title underlined to its own width."""
    heading = f"🧪 {title}"
    log.info(heading)
    log.info("=" * len(heading))
    log.info("")


def log_case_start(log: logging.Logger, case: TestCase) -> None:
    log.info("🔬 Running: %s", case.name)
    log.info("📝 Description: %s", case.description)
    log.info("📄 File: %s", case.file)
    log.info(RULE)


def log_case_exited(log: logging.Logger, case: TestCase, exit_code: int) -> None:
    log.info(RULE)
    if exit_code == 0:
        log.info("✅ %s - PASSED", case.name)
    else:
        log.info("❌ %s - FAILED (exit code: %d)", case.name, exit_code)
    log.info("")


def log_case_timed_out(log: logging.Logger, case: TestCase, timeout: float) -> None:
    log.info(RULE)
    log.info("❌ %s - TIMED OUT after %gs", case.name, timeout)
    log.info("")


def log_case_error(log: logging.Logger, case: TestCase, detail: str) -> None:
    log.error("❌ %s - ERROR: %s", case.name, detail)
    log.info("")


def log_suite_summary(
    log: logging.Logger, summary: SuiteSummary, coverage: Sequence[str] = ()
) -> None:
    """Log per-test status lines, aggregate counts and coverage notes."""
    log.info("📊 Test Suite Summary")
    log.info("=" * 20)

    for result in summary.results:
        log.info("%s - %s", STATUS_MARKERS[result.passed], result.name)
        if result.error:
            log.info("  Error: %s", result.error)

    log.info("")
    log.info(
        "📈 Results: %d/%d tests passed (%d%%)",
        summary.passed_count,
        summary.total,
        summary.percentage,
    )

    if summary.all_passed:
        log.info("🎉 All tests passed!")
    else:
        log.info("⚠️  Some tests failed. Please review the implementation.")

    if coverage:
        log.info("")
        log.info("🔧 Test Coverage:")
        log.info("=" * 16)
        for note in coverage:
            log.info("✅ %s", note)


def log_not_found(log: logging.Logger, token: str, catalog: Catalog) -> None:
    """Log the unmatched token and every available test."""
    log.error("❌ Test not found: %s", token)
    log.info("")
    log_available(log, catalog)


def log_available(log: logging.Logger, catalog: Catalog) -> None:
    log.info("Available tests:")
    for file, name in catalog.available():
        log.info("  - %s (%s)", file, name)
