"""
Pytest configuration and shared fixtures for the googmodule tests.

The parser builds its LALR tables on construction, so one Parser is shared per
session; drivers and hosts are cheap and created per test.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from googmodule.frontend.parser import Parser
from googmodule.analysis.module_system.manifest import ModulesManifest


# =============================================================================
# Session-scoped fixtures
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """Parser shared across all tests; parse() resets its per-call state."""
    return Parser()


@pytest.fixture(scope="class")
def parser(session_parser):
    return session_parser


# =============================================================================
# Function-scoped fixtures
# =============================================================================

@pytest.fixture
def manifest():
    """Fresh manifest per test."""
    return ModulesManifest()


@pytest.fixture
def stub_host():
    from tests.test_utils import StubHost
    return StubHost()


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Plain diagnostics regardless of the terminal running the tests."""
    monkeypatch.setenv("NO_COLOR", "1")


def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
