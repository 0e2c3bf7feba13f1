"""
Root pytest configuration.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers",
        "critical: Tests that must never fail - wire-format compatibility",
    )
    config.addinivalue_line(
        "markers",
        "security: Security-critical tests (signing, credentials)",
    )
    config.addinivalue_line(
        "markers",
        "property: Property-based tests (may be slow)",
    )


@pytest.fixture(autouse=True)
def reset_diagnostics_cache() -> Generator[None, None, None]:
    """Reset the diagnostics cache and writer around each test.

    The diagnostics module caches `internal_logging_enabled` at first access,
    so tests would otherwise inherit state from each other.
    """
    import imgsign.core.diagnostics as diag

    diag._internal_logging_enabled = None
    diag.set_writer_for_tests(None)
    yield
    diag._internal_logging_enabled = None
    diag.set_writer_for_tests(None)
