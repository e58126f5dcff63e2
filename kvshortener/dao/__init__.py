from kvshortener.dao.base import ShortURLBaseDAO
from kvshortener.dao.memory import ShortURLMemoryDAO
from kvshortener.dao.redis import ShortURLRedisDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
    'ShortURLRedisDAO',
]
