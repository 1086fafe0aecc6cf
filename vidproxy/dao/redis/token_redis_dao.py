"""Data Access Object (DAO) implementation for managing video tokens in Redis

This module provides a Redis-based implementation of TokenBaseDAO.

Responsibilities:
    - Insert tokens without ever rebinding an existing token to another URL;
    - Resolve tokens back to their origin URLs;
    - Provide defensive error handling and raise appropriate DAO exceptions.

Classes:
    TokenRedisDAO:
        DAO for storing and retrieving TokenModel in a Redis datastore.

Example:
    >>> from vidproxy.models import TokenModel
    >>> from vidproxy.dao.redis import TokenRedisDAO

    >>> dao = TokenRedisDAO(prefix="vidproxy:dev")
    >>> dao.insert(TokenModel(token="3f2a9c41d07b4e5a", target="https://example.com/a.mp4"))
    <TokenRedisDAO>

    >>> dao.get("3f2a9c41d07b4e5a").target
    'https://example.com/a.mp4'
"""

from beartype import beartype

from vidproxy.models import TokenModel
from vidproxy.dao.base import TokenBaseDAO
from vidproxy.dao.redis.mixins import RedisClientMixin
from vidproxy.dao.redis.helpers import handle_redis_connection_error
from vidproxy.dao.exceptions import TokenAlreadyExistsError, TokenNotFoundError


class TokenRedisDAO(RedisClientMixin, TokenBaseDAO):
    """Redis-based Data Access Object (DAO) for token -> origin URL mappings

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(token: TokenModel, **kwargs) -> TokenRedisDAO:
            Insert a token mapping (SET NX, no expiry).
            Raises TokenAlreadyExistsError when the token is already taken.
            Raises DataStoreError on connectivity issues with Redis.

        get(token: str, **kwargs) -> TokenModel:
            Retrieve a token mapping.
            Raises TokenNotFoundError when the token doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, token: TokenModel, **kwargs) -> 'TokenRedisDAO':
        """Insert a token mapping into Redis

        NOTE: existence check and write are a single SET NX command, so two
              concurrent requests which happen to draw the same token can't
              both succeed. The loser gets TokenAlreadyExistsError.

        Args:
            token (TokenModel):
                TokenModel instance representing the token mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            TokenRedisDAO: self (for method chaining)

        Raises:
            TokenAlreadyExistsError:
                If the token is already bound to an origin URL.
            DataStoreError:
                If a Redis connection issue occurs.
        """
        video_token_key = self.keys.video_token_key(token.token)
        if not self.redis.set(video_token_key, token.target, nx=True):
            raise TokenAlreadyExistsError(f"Token '{token.token}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, token: str, **kwargs) -> TokenModel:
        """Retrieve a stored token mapping

        Args:
            token (str):
                The opaque token.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            TokenModel:
                The retrieved TokenModel instance if found.

        Raises:
            TokenNotFoundError:
                If the token does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        target = self.redis.get(self.keys.video_token_key(token))
        if target is None:
            raise TokenNotFoundError(f"Token '{token}' not found.")
        return TokenModel(token=token, target=target)
