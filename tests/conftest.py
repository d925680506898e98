"""Global test fixtures for locale_codes."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from locale_codes.catalog import Catalog
from tests.factories import (
    make_countries,
    make_currencies,
    make_languages,
    make_regions,
    make_scripts,
)

# ============================================================================
# CATALOG FIXTURES
# ============================================================================


@pytest.fixture
def catalog() -> Catalog:
    """Isolated catalog over synthetic records."""
    return Catalog.from_records(
        languages=make_languages(),
        countries=make_countries(),
        currencies=make_currencies(),
        scripts=make_scripts(),
        regions=make_regions(),
    )


@pytest.fixture
def packaged_catalog() -> Catalog:
    """Catalog over the packaged dataset."""
    return Catalog.open()


@pytest.fixture(autouse=True)
def reset_default_catalog() -> Iterator[None]:
    """Never leak the process-wide catalog between tests."""
    Catalog.reset()
    yield
    Catalog.reset()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo structlog configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()
