"""Pytest configuration and shared fixtures for sumkit tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from sumkit import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from sumkit import Nothing

    return Nothing()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from sumkit import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from sumkit import Err

    return Err('test error')


@pytest.fixture
def sample_failure():
    """Sample Failure wrapping a ValueError."""
    from sumkit import Failure

    return Failure(ValueError('test error'))


@pytest.fixture
def never_called():
    """A callable that fails the test if it is ever invoked."""

    def _never(*args, **kwargs):
        pytest.fail(f'callable should not have been invoked with {args!r} {kwargs!r}')

    return _never


@pytest.fixture
def reset_config(monkeypatch):
    """Start the test with sumkit uninitialized."""
    from sumkit import _config

    monkeypatch.setattr(_config, '_config', None)
