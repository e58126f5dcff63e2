from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Records saved with this TTL never expire
    NO_EXPIRY = 0


class Backend(StrEnum):
    """Supported key-value store backends."""

    REDIS = 'redis'
    MEMORY = 'memory'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOG_LEVEL = 'LOG_LEVEL'
        BASE_URL = 'BASE_URL'
        BACKEND = 'KVSHORTENER_BACKEND'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'

    class Redis(StrEnum):
        # Only read when running locally (APP_ENV=local)
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105


# Default configuration section read by load_config()
DEFAULT_CONFIG_SECTION = 'shortener'
