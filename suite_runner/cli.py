"""CLI entry point for the sequential test suite runner."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from suite_runner.catalog import CatalogError, default_catalog, load_catalog
from suite_runner.config import RunnerConfig
from suite_runner.executor import CaseExecutor, LaunchFailedError
from suite_runner.models.catalog import Catalog, TestNotFoundError
from suite_runner.orchestrator import TestOrchestrator
from suite_runner.reporting import log_available, log_banner, log_not_found

DEFAULT_BASE_DIR = Path("tests")


async def run(catalog: Catalog, config: RunnerConfig, token: str | None = None) -> int:
    """Run the whole catalog, or the single case matching ``token``.

    Returns:
        0 when every requested test passed, 1 otherwise

    """
    log = logging.getLogger("suite_runner")
    log_banner(log, catalog.title)

    orchestrator = TestOrchestrator(
        catalog=catalog, executor=CaseExecutor(config=config)
    )

    if token is None:
        summary = await orchestrator.run_suite()
        return 0 if summary.all_passed else 1

    try:
        result = await orchestrator.run_single(token)
    except TestNotFoundError:
        log_not_found(log, token, catalog)
        return 1
    except LaunchFailedError:
        return 1

    return 0 if result.passed else 1


def resolve_base_dir(base_dir: Path | None, catalog_path: Path | None) -> Path:
    """Pick the artifact directory, anchored to an absolute path."""
    if base_dir is None:
        base_dir = catalog_path.parent if catalog_path else DEFAULT_BASE_DIR
    return base_dir.resolve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the test suite sequentially, or a single matching test"
    )
    parser.add_argument(
        "test",
        nargs="?",
        help="Run only the test whose file or name matches this token",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="JSON catalog file to use instead of the built-in one",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        help="Directory holding the test files (default: catalog dir or ./tests)",
    )
    parser.add_argument(
        "--runtime",
        default="node",
        help="Launcher for runtime tests (default: node)",
    )
    parser.add_argument(
        "--shell",
        default="bash",
        help="Launcher for shell tests (default: bash)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Kill a test and mark it failed after this many seconds",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available tests and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main() -> None:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stdout,
    )

    try:
        catalog = load_catalog(args.catalog) if args.catalog else default_catalog()
    except CatalogError as e:
        parser.error(str(e))

    if args.list:
        log_available(logging.getLogger("suite_runner"), catalog)
        sys.exit(0)

    try:
        config = RunnerConfig(
            base_dir=resolve_base_dir(args.base_dir, args.catalog),
            runtime_command=args.runtime,
            shell_command=args.shell,
            timeout=args.timeout,
        )
    except ValidationError as e:
        parser.error(str(e))

    exit_code = asyncio.run(run(catalog, config, args.test))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
