"""Pytest configuration and shared fixtures for remote-result tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from remote_result import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from remote_result import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_loading():
    """Sample Loading value for testing."""
    from remote_result import Loading

    return Loading()


@pytest.fixture
def sample_not_asked():
    """Sample NotAsked value for testing."""
    from remote_result import NotAsked

    return NotAsked()


@pytest.fixture(params=['ok', 'err', 'loading', 'not-asked'])
def any_outcome(request):
    """One outcome of each variant."""
    from remote_result import Err, Loading, NotAsked, Ok

    return {
        'ok': Ok(1),
        'err': Err('e'),
        'loading': Loading(),
        'not-asked': NotAsked(),
    }[request.param]
