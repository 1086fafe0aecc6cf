from vidproxy.dao.redis.redis_key_schema import RedisKeySchema
from vidproxy.dao.redis.mixins import RedisClientMixin
from vidproxy.dao.redis.token_redis_dao import TokenRedisDAO
from vidproxy.dao.redis.short_link_redis_dao import ShortLinkRedisDAO
from vidproxy.dao.redis.video_link_redis_dao import VideoLinkRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'TokenRedisDAO',
    'ShortLinkRedisDAO',
    'VideoLinkRedisDAO',
]
