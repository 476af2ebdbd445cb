"""Built-in catalog and loading of catalogs from JSON files."""

import logging
from pathlib import Path

from pydantic import ValidationError

from suite_runner.models.catalog import Catalog, TestCase

log = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or validated."""


def default_catalog() -> Catalog:
    """Return the built-in Dreo HM311S plugin test catalog."""
    return Catalog(
        title="Dreo HM311S Homebridge Plugin Test Suite",
        cases=[
            TestCase(
                name="Humidity Fix Test",
                description=(
                    "Tests humidity range clamping and validation for HM311S "
                    "(fixes 90% bug)"
                ),
                file="test-humidity-fix.js",
                kind="runtime",
            ),
            TestCase(
                name="HomeKit Display Test",
                description=(
                    "Tests HomeKit characteristic display mapping (0-100% range)"
                ),
                file="test-homekit-display.js",
                kind="runtime",
            ),
            TestCase(
                name="Humidifier Display Test",
                description=(
                    "Tests service name display in HomeKit "
                    "(Humidifier vs Humidifier-Dehumidifier)"
                ),
                file="test-humidifier-display.js",
                kind="runtime",
            ),
            TestCase(
                name="Model Display Test",
                description="Tests model name display (DR-HM311S vs DR-HHM001S)",
                file="test-model-display.sh",
                kind="shell",
            ),
        ],
        coverage=[
            "Humidity validation (30-90% range, edge cases)",
            "HomeKit display accuracy (percentage mapping)",
            "Service type display (humidifier-only)",
            "Model name display (DR-HM311S vs DR-HHM001S)",
        ],
    )


def load_catalog(path: Path) -> Catalog:
    """Load a catalog from a JSON file.

    Args:
        path: Path to a JSON document with ``cases`` and optional ``coverage``

    Returns:
        The validated catalog

    Raises:
        CatalogError: If the file is missing, unreadable or invalid

    """
    log.debug("Loading catalog from %s", path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    try:
        catalog = Catalog.model_validate_json(raw)
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e

    log.debug("Loaded %d test case(s) from %s", len(catalog.cases), path)
    return catalog
