"""Unit tests for the handle_redis_errors decorator.

Test coverage includes:
    1. Normal function execution
    2. Connection/timeout error handling
    3. Rejected command handling
    4. Function metadata preservation
"""

from unittest.mock import MagicMock

import pytest
import redis

from kvshortener.dao.redis.helpers import handle_redis_errors
from kvshortener.dao.exceptions import DataStoreError


class DummyDAO:
    def __init__(self, error: Exception | None = None):
        self.redis = MagicMock()
        self.redis.connection_pool.connection_kwargs = {'host': 'redis.test', 'port': 6379, 'db': 0}
        self.error = error

    @handle_redis_errors
    def fetch(self):
        """Fetch something from Redis."""
        if self.error is not None:
            raise self.error
        return 'OK'


def test_decorator_allows_normal_execution():
    assert DummyDAO().fetch() == 'OK'


@pytest.mark.parametrize('error', [redis.exceptions.ConnectionError('refused'), redis.exceptions.TimeoutError('timeout')])
def test_decorator_converts_connectivity_errors(error):
    with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
        DummyDAO(error).fetch()


def test_decorator_converts_rejected_commands():
    with pytest.raises(DataStoreError, match='Redis at redis.test:6379/0 rejected the command.'):
        DummyDAO(redis.exceptions.ResponseError('OOM command not allowed')).fetch()


def test_decorator_leaves_other_errors_alone():
    with pytest.raises(ValueError):
        DummyDAO(ValueError('not a redis error')).fetch()


def test_decorator_preserves_metadata():
    assert DummyDAO.fetch.__name__ == 'fetch'
    assert DummyDAO.fetch.__doc__ == 'Fetch something from Redis.'
