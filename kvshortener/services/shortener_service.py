"""Shortener service: derive short keys for URLs and resolve them back

The service orchestrates the key derivation (kvshortener.utils.keygen) and a
key-value store implementing ShortURLBaseDAO. It keeps no state besides the
store handle, so a single instance can serve concurrent callers.

Responsibilities:
    - shorten(): derive the short key of a URL and save the mapping;
    - resolve(): look up the original URL of a short key;
    - translate DAO exceptions into the service error taxonomy
      (ShortKeyNotFoundError, StoreUnavailableError, SaveFailedError).

Example:
    >>> from kvshortener.dao import ShortURLMemoryDAO
    >>> from kvshortener.services import ShortenerService

    >>> service = ShortenerService(ShortURLMemoryDAO(), base_url='https://sho.rt')
    >>> shortcode = service.shorten('https://example.com')
    >>> shortcode
    'kPpCoVygmnp'
    >>> service.resolve(shortcode)
    'https://example.com'
    >>> service.short_url(shortcode)
    'https://sho.rt/kPpCoVygmnp'
"""

import logging
from datetime import timedelta

from kvshortener.types import AppConfig
from kvshortener.constants import TTL, Backend
from kvshortener.dao.base import ShortURLBaseDAO
from kvshortener.dao.memory import ShortURLMemoryDAO
from kvshortener.dao.redis import ShortURLRedisDAO
from kvshortener.dao.exceptions import ShortURLNotFoundError, DataStoreError
from kvshortener.exceptions import (
    ShortKeyNotFoundError,
    StoreUnavailableError,
    SaveFailedError,
    BadConfigurationError,
)
from kvshortener.utils.keygen import derive_shortkey
from kvshortener.utils.helpers import get_short_url


logger = logging.getLogger(__name__)


class ShortenerService:
    """Map long URLs to short keys and back.

    Attributes:
        dao (ShortURLBaseDAO):
            Store holding short key mappings. Set at construction, read-only afterwards.
        base_url (str | None):
            Public base URL used to build fully-qualified short URLs.

    NOTE:
        - Two URLs whose hashes collide share one short key. The later
          shorten() overwrites the earlier mapping; no disambiguation is done.
        - No retries happen here. Retry/backoff belongs to the store client or the caller.
    """

    __slots__ = ('_dao', '_base_url')

    def __init__(self, dao: ShortURLBaseDAO, base_url: str | None = None):
        self._dao = dao
        self._base_url = base_url

    @property
    def dao(self) -> ShortURLBaseDAO:
        return self._dao

    @property
    def base_url(self) -> str | None:
        return self._base_url

    @classmethod
    def from_config(cls, config: AppConfig, prefix: str | None = None, base_url: str | None = None) -> 'ShortenerService':
        """Build a service backed by the store described in a configuration section

        Args:
            config (dict):
                {<backend>: <backend settings>}, as returned by load_config().
            prefix (str | None):
                Key namespace prefix, e.g. 'kvshortener:prod'.
            base_url (str | None):
                Public base URL of the shortener.

        Returns:
            ShortenerService: service wired to a ShortURLRedisDAO or ShortURLMemoryDAO.

        Raises:
            BadConfigurationError:
                If the configuration doesn't name exactly one supported backend.
            DataStoreError:
                If the Redis healthcheck fails.

        Example:
            >>> ShortenerService.from_config({'redis': {'host': 'localhost', 'port': 6379, 'db': 0}}, prefix='app:dev')
            <ShortenerService>
        """
        if len(config) != 1:
            raise BadConfigurationError(f'Expected exactly one backend configuration (given: {sorted(config)}).')

        backend, settings = next(iter(config.items()))
        match backend:
            case Backend.REDIS:
                redis_config = {f'redis_{k}': v for k, v in (settings or {}).items()}
                dao = ShortURLRedisDAO(**redis_config, prefix=prefix)
            case Backend.MEMORY:
                dao = ShortURLMemoryDAO()
            case _:
                raise BadConfigurationError(f"Unsupported backend '{backend}' (supported: {', '.join(Backend)}).")

        logger.debug('Built shortener service.', extra={'backend': backend, 'prefix': prefix})
        return cls(dao, base_url=base_url)

    def shorten(self, url: str, ttl: int | timedelta = TTL.NO_EXPIRY, **kwargs) -> str:
        """Derive the short key of a URL and save the mapping

        Shortening the same URL again returns the same key and rewrites the
        same record.

        Args:
            url (str):
                Original URL. Validation is the caller's responsibility.
            ttl (int | timedelta):
                Time-to-live of the mapping. 0 (default) means no expiry.
            **kwargs:
                Forwarded unchanged to the store.

        Returns:
            str: the short key.

        Raises:
            SaveFailedError:
                If the store fails to persist the mapping.
            ValueError:
                If ttl is negative.
        """
        shortcode = derive_shortkey(url)

        try:
            self._dao.save(shortcode, url, ttl=ttl, **kwargs)
        except DataStoreError as e:
            logger.exception('Failed to save short key mapping.', extra={'shortcode': shortcode})
            raise SaveFailedError(f"Failed to save short URL with code '{shortcode}'.") from e

        logger.debug('Shortened URL.', extra={'shortcode': shortcode, 'ttl': str(ttl)})
        return shortcode

    def resolve(self, shortcode: str, **kwargs) -> str:
        """Look up the original URL of a short key

        Args:
            shortcode (str):
                Short key returned by shorten().
            **kwargs:
                Forwarded unchanged to the store.

        Returns:
            str: the original URL.

        Raises:
            ShortKeyNotFoundError:
                If the store holds no mapping for the short key.
            StoreUnavailableError:
                If the store fails to serve the lookup.
        """
        try:
            record = self._dao.get(shortcode, **kwargs)
        except ShortURLNotFoundError as e:
            logger.info('Short key not found.', extra={'shortcode': shortcode})
            raise ShortKeyNotFoundError(f"Short URL with code '{shortcode}' not found.") from e
        except DataStoreError as e:
            logger.exception('Store unavailable while resolving short key.', extra={'shortcode': shortcode})
            raise StoreUnavailableError(f"Can't resolve short URL with code '{shortcode}': store unavailable.") from e

        logger.debug('Resolved short key.', extra={'shortcode': shortcode})
        return record.target

    def short_url(self, shortcode: str) -> str:
        """Return the fully-qualified short URL of a short key

        Raises:
            BadConfigurationError: If the service was built without a base URL.
        """
        if self._base_url is None:
            raise BadConfigurationError('Short URLs require a base URL.')
        return get_short_url(shortcode, self._base_url)

    def __repr__(self) -> str:
        return f'<{type(self).__name__} dao={type(self._dao).__name__}>'
