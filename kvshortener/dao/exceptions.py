"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a short key has no record in the data store.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from kvshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'kPpCoVygmnp' not found.")
    Traceback (most recent call last):
        ...
    kvshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'kPpCoVygmnp' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a short key has no record in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, rejected writes, OOM, etc.
    """

    pass
