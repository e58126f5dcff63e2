import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from kvshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def redis_location(client: redis.Redis) -> str:
    """Describe a Redis client's target as <host>:<port>/<db> for error messages"""
    info = client.connection_pool.connection_kwargs
    return f'{info.get("host")}:{info.get("port")}/{info.get("db")}'


def handle_redis_errors[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis errors into DataStoreError

    Connectivity issues (connection refused, socket timeouts) and rejected commands
    (READONLY replicas, OOM, etc.) are all backend failures from the caller's perspective.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on Redis failures.

    Example:
        >>> @handle_redis_errors
        ... def get(self, shortcode):
        ...     return self.redis.get(shortcode)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {redis_location(self.redis)} rejected the command.') from e

    return wrapper
