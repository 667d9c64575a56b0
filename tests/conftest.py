# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Shared fixtures for all tests.
# =============================================================================

import pytest

from bridge import Engine, prefix, suffix, uppercase
from bridge.config import get_settings


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_strings():
    """Inputs covering empty, whitespace, digits and non-ASCII text."""
    return ["", "hello", "  spaces  ", "123", "émoji 🎉", "\n\t"]


@pytest.fixture
def sample_transforms():
    """Three distinct transforms for composition laws."""
    return prefix("a-"), suffix("-b"), uppercase


@pytest.fixture
def greeting_plan():
    """Plan equivalent to compose(prefix("hello-"), suffix("-world"))."""
    return [
        {"op": "prefix", "params": {"pre": "hello-"}},
        {"op": "suffix", "params": {"suf": "-world"}},
    ]


@pytest.fixture
def engine():
    return Engine()


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear BRIDGE_* variables and the settings cache around a test."""
    for var in ("BRIDGE_NAME", "BRIDGE_VERSION", "DEBUG", "LOG_LEVEL", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
