"""Helper utilities shared across the shortener.

Functions:
    get_short_url(shortcode, base_url) -> str
        Get string representation of short URL for a given shortcode
    ttl_seconds(ttl) -> int
        Normalize a TTL (seconds or timedelta) into whole seconds
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
"""

import os
import math
import functools
from datetime import timedelta
from collections.abc import Callable

from kvshortener.exceptions import MissingEnvironmentVariableError


def get_short_url(shortcode: str, base_url: str) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_url (str): public base URL of the shortener, e.g. 'https://sho.rt'

    Returns:
        str: short url string representation

    Example:
        >>> get_short_url('kPpCoVygmnp', 'https://sho.rt/')
        'https://sho.rt/kPpCoVygmnp'
    """
    return f'{base_url.rstrip("/")}/{shortcode}'


def ttl_seconds(ttl: int | timedelta) -> int:
    """Normalize a TTL into whole seconds

    Sub-second remainders are rounded up so a positive TTL never collapses
    into 0 (which means "no expiry").

    Args:
        ttl (int | timedelta): TTL in seconds or as a timedelta.

    Returns:
        int: TTL in seconds, 0 for no expiry.

    Raises:
        TypeError: If ttl is a bool.
        ValueError: If ttl is negative.

    Example:
        >>> ttl_seconds(timedelta(minutes=1, milliseconds=1))
        61
    """
    if isinstance(ttl, bool):
        raise TypeError(f'TTL must be of type integer or timedelta (given type: {type(ttl)}).')
    seconds = math.ceil(ttl.total_seconds()) if isinstance(ttl, timedelta) else ttl
    if seconds < 0:
        raise ValueError(f'TTL must be a non-negative duration (given value: {ttl}).')
    return seconds


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator
