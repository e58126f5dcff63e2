from kvshortener.utils.config import app_env, app_name, app_prefix, load_config
from kvshortener.utils.helpers import get_short_url, ttl_seconds, require_environment
from kvshortener.utils.keygen import derive_shortkey, encode_base62
from kvshortener.utils.logging import initialize_logging


__all__ = [
    'derive_shortkey',
    'encode_base62',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'get_short_url',
    'ttl_seconds',
    'require_environment',
    'initialize_logging',
]
