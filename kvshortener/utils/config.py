"""Utility functions for application configuration management.

Deployed shorteners read their store configuration from **AWS AppConfig**.
Each environment (`APP_ENV`) has a dedicated AppConfig *Environment* within
the AppConfig *Application* identified by `APP_NAME`. The configuration is a
JSON document with this structure:

    {
        "build": 12,
        "active_backend": "redis",
        "configs": {
            "shortener": {
                "redis": {"host": "...", "port": 6379, "db": 0},
                "memory": {}
            }
        }
    }

`load_config()` returns only the active backend's section for the requested
config section, e.g. `{"redis": {"host": "...", "port": 6379, "db": 0}}`.

When running locally (`APP_ENV=local`), the same structure is built from
environment variables instead, so no AWS access is needed:

    KVSHORTENER_BACKEND   - 'redis' (default) or 'memory'
    REDIS_HOST            - defaults to 'localhost'
    REDIS_PORT            - defaults to 6379
    REDIS_DB              - defaults to 0
    REDIS_USERNAME        - optional
    REDIS_PASSWORD        - optional

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the key namespace prefix for DAOs, or None if `APP_NAME` is not set.

    load_config(section: str) -> dict
        Load the active backend configuration for a config section.

Example:
    >>> from kvshortener.utils.config import load_config
    >>> config = load_config('shortener')
    >>> config['redis']['host']
    'localhost'
"""

import os
import json
import logging
import functools
from collections.abc import Callable

import boto3

from kvshortener.types import AppConfig
from kvshortener.constants import ENV, Backend, DEFAULT_CONFIG_SECTION
from kvshortener.exceptions import BadConfigurationError
from kvshortener.utils.helpers import require_environment
from kvshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'kvshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'kvshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be an integer (given value: {value}).") from e


def _local_backend_config() -> AppConfig:
    backend = os.getenv(ENV.App.BACKEND, Backend.REDIS).lower()

    if backend == Backend.MEMORY:
        return {Backend.MEMORY.value: {}}
    if backend != Backend.REDIS:
        raise BadConfigurationError(f"Unsupported backend '{backend}' (supported: {', '.join(Backend)}).")

    redis_config = {
        'host': os.getenv(ENV.Redis.HOST, 'localhost'),
        'port': _int_env(ENV.Redis.PORT, 6379),
        'db': _int_env(ENV.Redis.DB, 0),
    }
    if os.getenv(ENV.Redis.USERNAME):
        redis_config['username'] = os.environ[ENV.Redis.USERNAME]
    if os.getenv(ENV.Redis.PASSWORD):
        redis_config['password'] = os.environ[ENV.Redis.PASSWORD]
    return {Backend.REDIS.value: redis_config}


def _load_local_config(func: Callable[[str], AppConfig]) -> Callable[[str], AppConfig]:
    """Decorator: build the configuration from environment variables when running locally

    Behavior:
        - If the application is running locally, read the backend settings from
          KVSHORTENER_BACKEND and the REDIS_* environment variables.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).
    """

    @functools.wraps(func)
    def wrapper(section: str = DEFAULT_CONFIG_SECTION, *args, **kwargs) -> AppConfig:
        if not running_locally():
            return func(section, *args, **kwargs)

        config = _local_backend_config()
        logger.debug('Loaded configuration from environment.', extra={'section': section, 'backend': next(iter(config))})
        return config

    return wrapper


@_load_local_config
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(section: str = DEFAULT_CONFIG_SECTION) -> AppConfig:
    """Load the active backend configuration for a config section from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        section (str):
            Name of the config section (e.g., "shortener").

    Returns:
        dict: {<active backend>: <backend settings>}

    Raises:
        MissingEnvironmentVariableError:
            If any AppConfig identifier is missing.
        BadConfigurationError:
            If the document is not valid JSON or lacks the requested section.
        botocore.exceptions.ClientError:
            If AppConfig rejects the request.

    Example:
        >>> load_config('shortener')
        {'redis': {'host': 'redis.internal', 'port': 6379, 'db': 0}}
    """
    logger.debug('Trying to load configuration from AWS AppConfig.', extra={'section': section})

    appconfig = boto3.client('appconfigdata')

    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()

    try:
        document = json.loads(content.decode('utf-8'))
        backend = document['active_backend']
        data = {backend: document['configs'][section][backend]}
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise BadConfigurationError('AppConfig document is not valid JSON.') from e
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f'AppConfig document is malformed for section {section!r}.') from e

    logger.debug('Loaded configuration from AWS AppConfig.', extra={'section': section, 'build': document.get('build')})
    return data
