from kvshortener.dao.redis.redis_key_schema import RedisKeySchema
from kvshortener.dao.redis.short_url_redis_dao import ShortURLRedisDAO
from kvshortener.dao.redis.mixins import RedisClientMixin


__all__ = [
    'RedisKeySchema',
    'ShortURLRedisDAO',
    'RedisClientMixin',
]
