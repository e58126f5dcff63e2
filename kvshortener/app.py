"""Composition root: wire logging, configuration and the shortener service together

Example:
    >>> from kvshortener.app import create_service
    >>> service = create_service()
    >>> service.shorten('https://example.com')
    'kPpCoVygmnp'
"""

import os
import logging

from kvshortener.constants import ENV, DEFAULT_CONFIG_SECTION
from kvshortener.services import ShortenerService
from kvshortener.utils import initialize_logging, load_config, app_prefix


logger = logging.getLogger(__name__)


def create_service(section: str = DEFAULT_CONFIG_SECTION) -> ShortenerService:
    """Build a ShortenerService from the environment's configuration

    Args:
        section (str): configuration section to load. Defaults to 'shortener'.

    Returns:
        ShortenerService: service backed by the configured store.
    """
    initialize_logging()
    config = load_config(section)
    service = ShortenerService.from_config(config, prefix=app_prefix(), base_url=os.getenv(ENV.App.BASE_URL))
    logger.info('Shortener service ready.', extra={'section': section, 'prefix': app_prefix()})
    return service
