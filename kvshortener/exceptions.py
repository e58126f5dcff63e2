class KVShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:kvshortener_error'


class ShortKeyNotFoundError(KVShortenerError):
    """Raised when a short key has no URL mapped to it."""

    error_code = 'shortener:short_key_not_found'


class StoreUnavailableError(KVShortenerError):
    """Raised when the key-value store can't serve a lookup (connectivity, timeout, etc.)."""

    error_code = 'shortener:store_unavailable'


class SaveFailedError(KVShortenerError):
    """Raised when the key-value store fails to persist a short key mapping."""

    error_code = 'shortener:save_failed'


class ConfigurationError(KVShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
