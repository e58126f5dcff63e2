"""Abstract base class for short URL data access objects (DAOs).

This class establishes the narrow store contract the shortener service relies on,
regardless of the underlying key-value backend (e.g., Redis, in-memory dict).

Responsibilities:
    - Provide an interface for saving and retrieving short key mappings.
    - Standardize error handling across multiple data store implementations:
      a missing key is a ShortURLNotFoundError, any backend failure is a DataStoreError.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from kvshortener.dao import ShortURLRedisDAO

        >>> dao = ShortURLRedisDAO(...)
        >>> dao.save('kPpCoVygmnp', 'https://example.com')

        >>> retrieved = dao.get('kPpCoVygmnp')
        >>> print(retrieved.target)
        https://example.com

        >>> print(retrieved.expires_at)
        None
"""

from abc import ABC, abstractmethod

from kvshortener.models import URLRecord
from kvshortener.types import TTLValue
from kvshortener.constants import TTL


class ShortURLBaseDAO(ABC):
    """Interface for short URL data access objects (DAOs).

    Methods:
        save(shortcode: str, target: str, ttl: TTLValue = 0, **kwargs) -> ShortURLBaseDAO:
            Save (create or overwrite) a short key mapping in the data store.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> URLRecord:
            Retrieve a short key mapping from the data store.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLRedisDAO or
        ShortURLMemoryDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - Saving an existing short key overwrites it (last write wins).
          Short keys are derived deterministically, so concurrent writers for
          the same URL produce identical records.
        - Expiry is owned by the data store. The DAO does not provide an
          interface to manually delete entries.
    """

    @abstractmethod
    def save(self, shortcode: str, target: str, ttl: TTLValue = TTL.NO_EXPIRY, **kwargs) -> 'ShortURLBaseDAO':
        """Save a short key mapping into the data store.

        Args:
            shortcode (str):
                Short key identifying the mapping.

            target (str):
                Original URL the short key resolves to.

            ttl (int | timedelta):
                Time-to-live in seconds or as a timedelta. 0 means no expiry.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ValueError:
                If ttl is negative.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> URLRecord:
        """Retrieve a short key mapping from the data store.

        Args:
            shortcode (str):
                Short key of the mapping to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLRecord: the stored mapping.

        Raises:
            ShortURLNotFoundError:
                If no mapping with the given short key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
