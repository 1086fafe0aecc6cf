"""Unit tests for handle_redis_connection_error decorator.

Test coverage includes:
    1. Normal function execution
       - Ensures the wrapped method executes and returns its result.
    2. Connection error handling
       - Ensures Redis connection and timeout errors are converted into DataStoreError.
       - Ensures other Redis errors propagate untouched.
    3. Function metadata preservation
       - Confirms functools.wraps preserves the original function's name and docstring.
"""

from unittest.mock import MagicMock

import pytest
import redis

from vidproxy.dao.redis.helpers import handle_redis_connection_error
from vidproxy.dao.exceptions import DataStoreError


class DummyDAO:
    def __init__(self):
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {'host': 'localhost', 'port': 6379, 'db': 0}

    @handle_redis_connection_error
    def ping(self):
        """Ping Redis."""
        return self.redis.ping()


# -------------------------------
# 1. Normal execution
# -------------------------------


def test_decorator_allows_normal_execution():
    dao = DummyDAO()
    dao.redis.ping.return_value = 'PONG'
    assert dao.ping() == 'PONG'


# -------------------------------
# 2. Connection error handling
# -------------------------------


@pytest.mark.parametrize(
    'error',
    [
        redis.exceptions.ConnectionError('Connection refused'),
        redis.exceptions.TimeoutError('Timeout reading from socket'),
    ],
)
def test_decorator_transforms_connectivity_errors(error):
    """Ensure connectivity errors are re-raised as DataStoreError."""
    dao = DummyDAO()
    dao.redis.ping.side_effect = error

    with pytest.raises(DataStoreError, match="Can't connect to Redis at localhost:6379/0.") as exc_info:
        dao.ping()
    assert exc_info.value.__cause__ is error


def test_decorator_does_not_swallow_other_redis_errors():
    dao = DummyDAO()
    dao.redis.ping.side_effect = redis.exceptions.ResponseError('WRONGTYPE')

    with pytest.raises(redis.exceptions.ResponseError):
        dao.ping()


# -------------------------------
# 3. Metadata preservation
# -------------------------------


def test_decorator_preserves_metadata():
    assert DummyDAO.ping.__name__ == 'ping'
    assert DummyDAO.ping.__doc__ == 'Ping Redis.'
