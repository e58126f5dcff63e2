"""Redis mixin providing shared client initialization and connectivity checks.

Responsibilities:
    - Initialize Redis client (or accept an injected one)
    - Healthcheck Redis client

Classes:
    - RedisClientMixin: Base mixin to inject Redis key management, client setup & healthcheck.

Example:
    Typical usage with a DAO implementation:

        >>> class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
        ...     pass
        ...
        >>> dao = ShortURLRedisDAO(prefix='kvshortener:prod')
        >>> dao._healthcheck()
        True
"""

from typing import Optional

import redis

from kvshortener.dao.redis.redis_key_schema import RedisKeySchema
from kvshortener.dao.redis.helpers import redis_location
from kvshortener.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Mixin Redis client setup and health check for Redis-backed DAOs.

    Attributes:
        redis (redis.Redis):
            Active Redis client instance used by subclasses.

        keys (RedisKeySchema):
            Helper class for generating namespaced Redis key names.

    Methods:
        _healthcheck(raise_error: bool = True) -> bool:
            Ping Redis to verify connectivity.
            Optionally raise a DataStoreError if unreachable.
    """

    def __init__(
        self,
        redis_host: Optional[str] = 'localhost',
        redis_port: Optional[int] = 6379,
        redis_db: Optional[int] = 0,
        redis_decode_responses: Optional[bool] = True,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_socket_timeout: Optional[float] = None,
        redis_socket_connect_timeout: Optional[float] = None,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
        healthcheck: bool = True,
    ):
        """Initialize a Redis-based DAO

        Either use an existing Redis client instance or create one from the
        Redis connection parameters. Pooling, retries and TLS are left to the
        redis-py client.

        Args:
            redis_host (Optional[str]):
                Hostname of the Redis server. Defaults to 'localhost'.

            redis_port (Optional[int]):
                Redis server port. Defaults to 6379.

            redis_db (Optional[int]):
                Redis database index. Defaults to 0.

            redis_decode_responses (Optional[bool]):
                If True, decodes Redis responses. Defaults to True.

            redis_username (Optional[str]):
                Username for Redis authentication (if required).

            redis_password (Optional[str]):
                Password for Redis authentication (if required).

            redis_socket_timeout (Optional[float]):
                Seconds to wait for a command reply before timing out.
                None waits indefinitely.

            redis_socket_connect_timeout (Optional[float]):
                Seconds to wait for a connection before timing out.

            redis_client (Optional[redis.Redis]):
                Pre-initialized Redis client. If None, a new client is created.

            prefix (Optional[str]):
                Namespace prefix for all Redis keys, e.g. 'app:env'.

            healthcheck (bool):
                If True, PING Redis during initialization. Defaults to True.

        Raises:
            DataStoreError:
                If Redis healthcheck fails (connectivity issues).
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=redis_decode_responses,
                username=redis_username,
                password=redis_password,
                socket_timeout=redis_socket_timeout,
                socket_connect_timeout=redis_socket_connect_timeout,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)

        if healthcheck:
            self._healthcheck()

    def _healthcheck(self, raise_error: bool = True) -> bool:
        """PING Redis to healthcheck connectivity

        Args:
            raise_error (bool):
                If True, raises DataStoreError on failure. Defaults to True.

        Returns:
            bool:
                True if Redis is reachable, False otherwise (only if raise_error=False).

        Raises:
            DataStoreError:
                If Redis connection cannot be established and raise_error=True.
        """
        try:
            self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            if raise_error:
                raise DataStoreError(
                    f"Can't connect to Redis at {redis_location(self.redis)}. Check the provided configuration parameters."
                ) from e
            return False
        else:
            return True
