"""
Pytest configuration and shared fixtures for backend tests.

WHAT: Centralized test configuration with markers
WHY: Enable test organization, filtering, and shared test utilities
HOW: Define pytest markers, fixtures, and test helpers
"""

import os
import tempfile
from pathlib import Path

# Keep log output out of the working tree; must run before mandi is imported
os.environ.setdefault("LOG_FILE", str(Path(tempfile.gettempdir()) / "mandi-tests" / "app.log"))
os.environ.setdefault("DEFAULT_LANGUAGE", "hi")

import pytest

from mandi.agents.bargain_bot import AIBargainBot, reset_engine


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (isolated component tests)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (multiple components)"
    )


@pytest.fixture(autouse=True)
def reset_engine_singleton():
    """
    Reset engine singleton before each test.

    WHAT: Clear session table between tests
    WHY: Prevent test pollution and ensure clean state
    HOW: Call reset_engine() before and after each test
    """
    reset_engine()
    yield
    reset_engine()


@pytest.fixture
def engine():
    """English-speaking engine so assertions can read the replies."""
    return AIBargainBot(language="en")


@pytest.fixture
def hindi_engine():
    """Engine on the default fallback language."""
    return AIBargainBot(language="hi")
