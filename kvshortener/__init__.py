from kvshortener.services import ShortenerService
from kvshortener.models import URLRecord
from kvshortener.utils.keygen import derive_shortkey


__all__ = [
    'ShortenerService',
    'URLRecord',
    'derive_shortkey',
]
