"""Pytest configuration and shared fixtures for klaw-try tests."""

import pytest

from klaw_try import _config
from klaw_try.interrupt import interrupted


@pytest.fixture(autouse=True)
def reset_state(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default configuration and a clear interrupt flag."""
    monkeypatch.delenv('KLAW_TRY_LOG_LEVEL', raising=False)
    _config._config = None
    interrupted()
    yield
    _config._config = None
    interrupted()


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from klaw_try import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from klaw_try import Failure

    return Failure(ValueError('test error'))
