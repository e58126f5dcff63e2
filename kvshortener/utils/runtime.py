import os

from kvshortener.constants import ENV


def running_locally() -> bool:
    """Check if the shortener runs outside any deployed environment

    Returns:
        bool: True if APP_ENV is 'local' (or unset), False otherwise.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> running_locally()
        False
    """
    return os.getenv(ENV.App.APP_ENV, 'local').lower() == 'local'
