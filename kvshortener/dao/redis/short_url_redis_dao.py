"""Data Access Object (DAO) implementation for managing short URL mappings in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO.

Responsibilities:
    - Save short key mappings with an optional TTL (SET ... EX);
    - Retrieve short key mappings together with their remaining TTL;
    - Raise appropriate DAO exceptions for missing keys and Redis failures.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving URLRecord in a Redis datastore.

Example:
    >>> from kvshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix='kvshortener:dev')
    >>> dao.save('kPpCoVygmnp', 'https://example.com', ttl=3600)
    <ShortURLRedisDAO>

    >>> record = dao.get('kPpCoVygmnp')
    >>> record.target
    'https://example.com'
    >>> record.expires_at
    <datetime>
"""

from datetime import datetime, timedelta, UTC

from beartype import beartype

from kvshortener.models import URLRecord
from kvshortener.constants import TTL
from kvshortener.dao.base import ShortURLBaseDAO
from kvshortener.dao.redis.mixins import RedisClientMixin
from kvshortener.dao.redis.helpers import handle_redis_errors
from kvshortener.dao.exceptions import ShortURLNotFoundError
from kvshortener.utils.helpers import ttl_seconds


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    Each mapping is a plain Redis string: <prefix>:urls:<shortcode> -> <target url>.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        save(shortcode: str, target: str, ttl: int | timedelta = 0, **kwargs) -> ShortURLRedisDAO:
            Create or overwrite a short key mapping.
            Raises DataStoreError on Redis failures.

        get(shortcode: str, **kwargs) -> URLRecord:
            Retrieve a short key mapping and its expiry.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on Redis failures.

    Example:
        >>> dao = ShortURLRedisDAO(redis_host='localhost', prefix='kvshortener:test')
        >>> dao.save('kPpCoVygmnp', 'https://example.com')
        <ShortURLRedisDAO>
        >>> dao.get('kPpCoVygmnp').target
        'https://example.com'
    """

    @handle_redis_errors
    @beartype
    def save(self, shortcode: str, target: str, ttl: int | timedelta = TTL.NO_EXPIRY, **kwargs) -> 'ShortURLRedisDAO':
        """Save a short key mapping into Redis

        A plain SET overwrites any previous mapping for the same short key.

        Args:
            shortcode (str):
                Short key identifying the mapping.
            target (str):
                Original URL the short key resolves to.
            ttl (int | timedelta):
                Time-to-live. 0 stores the key without expiry.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLRedisDAO: self (for method chaining)

        Raises:
            ValueError:
                If ttl is negative.
            DataStoreError:
                If Redis is unreachable or rejects the write.

        Example:
            >>> dao.save('kPpCoVygmnp', 'https://example.com', ttl=60)
            <ShortURLRedisDAO>
        """
        seconds = ttl_seconds(ttl)
        self.redis.set(self.keys.url_key(shortcode), target, ex=seconds or None)
        return self

    @handle_redis_errors
    @beartype
    def get(self, shortcode: str, **kwargs) -> URLRecord:
        """Retrieve a stored short key mapping

        Fetches both the original URL and its remaining TTL in a single
        Redis transaction, so both values describe the same key state.

        Args:
            shortcode (str):
                Short key of the mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLRecord:
                The stored mapping. expires_at is None for keys without expiry.

        Raises:
            ShortURLNotFoundError:
                If the short key does not exist in Redis.
            DataStoreError:
                If Redis is unreachable or rejects the read.

        Example:
            >>> dao.get('kPpCoVygmnp')
            URLRecord(shortcode='kPpCoVygmnp', target='https://example.com', expires_at=None)
        """
        url_key = self.keys.url_key(shortcode)

        with self.redis.pipeline(transaction=True) as pipe:
            pipe.get(url_key)
            pipe.ttl(url_key)
            target, ttl = pipe.execute()

        if target is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        # TTL replies -1 for keys without expiry
        expires_at = datetime.now(UTC) + timedelta(seconds=ttl) if ttl is not None and ttl > 0 else None
        return URLRecord(shortcode=shortcode, target=target, expires_at=expires_at)
