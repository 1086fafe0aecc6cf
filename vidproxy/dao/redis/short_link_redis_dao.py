"""Data Access Object (DAO) implementation for managing short links in Redis

Classes:
    ShortLinkRedisDAO:
        DAO for storing and retrieving ShortLinkModel in a Redis datastore.

Example:
    >>> dao = ShortLinkRedisDAO(prefix="vidproxy:dev")
    >>> dao.insert(ShortLinkModel(shortcode="Gh71WPTa", target="https://host/video?token=abc"))
    <ShortLinkRedisDAO>
    >>> dao.get("Gh71WPTa").target
    'https://host/video?token=abc'
"""

from beartype import beartype

from vidproxy.models import ShortLinkModel
from vidproxy.dao.base import ShortLinkBaseDAO
from vidproxy.dao.redis.mixins import RedisClientMixin
from vidproxy.dao.redis.helpers import handle_redis_connection_error
from vidproxy.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    """Redis-based Data Access Object (DAO) for shortcode -> target mappings

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkRedisDAO:
            Insert a short link mapping (SET NX, no expiry).
            Raises ShortLinkAlreadyExistsError when the shortcode is already taken.
            Raises DataStoreError on connectivity issues with Redis.

        get(shortcode: str, **kwargs) -> ShortLinkModel:
            Retrieve a short link mapping by shortcode.
            Raises ShortLinkNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        # NOTE: SET NX makes the uniqueness check and the write one atomic command.
        #       A plain EXISTS + SET would let two concurrent requests drawing the
        #       same shortcode both pass the check:
        #
        #       (request 1): EXISTS <app>:short:<shortcode>   => 0
        #       (request 2): EXISTS <app>:short:<shortcode>   => 0
        #       (request 1): SET <app>:short:<shortcode> <target 1>
        #       (request 2): SET <app>:short:<shortcode> <target 2>
        #                    => request 1's short link now redirects to <target 2>
        short_link_key = self.keys.short_link_key(short_link.shortcode)
        if not self.redis.set(short_link_key, short_link.target, nx=True):
            raise ShortLinkAlreadyExistsError(f"Short link with code '{short_link.shortcode}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortLinkModel:
        target = self.redis.get(self.keys.short_link_key(shortcode))
        if target is None:
            raise ShortLinkNotFoundError(f"Short link with code '{shortcode}' not found.")
        return ShortLinkModel(shortcode=shortcode, target=target)
