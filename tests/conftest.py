"""Shared test fixtures for pathnames.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from pathnames.engine.engine import PathEngine
from pathnames.syntaxes.unix import create_unix_engine
from pathnames.syntaxes.windows import create_windows_engine


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "pathnames"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def unix() -> PathEngine:
    """A fresh Unix reference engine."""
    return create_unix_engine()


@pytest.fixture()
def windows() -> PathEngine:
    """A fresh Windows engine."""
    return create_windows_engine()
