"""Token registry: issues opaque video tokens and resolves them back to origin URLs.

Classes:
    TokenRegistry:
        Issue a random token for an https:// origin URL and persist the mapping.
        Resolve a token, treating unknown tokens as forbidden.

Example:
    >>> registry = TokenRegistry(TokenRedisDAO(...))
    >>> token = registry.issue('https://example.com/a.mp4')
    >>> registry.resolve(token)
    'https://example.com/a.mp4'
    >>> registry.resolve('doesnotexist')
    ForbiddenError: Forbidden: invalid token
"""

import logging

from vidproxy.constants import Defaults
from vidproxy.models import TokenModel
from vidproxy.dao.base import TokenBaseDAO
from vidproxy.dao.exceptions import TokenAlreadyExistsError, TokenNotFoundError
from vidproxy.exceptions import ForbiddenError
from vidproxy.utils.helpers import require_https
from vidproxy.utils.shortener import generate_token


logger = logging.getLogger(__name__)


class TokenRegistry:
    def __init__(self, dao: TokenBaseDAO, token_length: int = Defaults.TOKEN_LENGTH, max_attempts: int = Defaults.MAX_ATTEMPTS):
        self.dao = dao
        self.token_length = token_length
        self.max_attempts = max_attempts

    def issue(self, origin_url: str | None) -> str:
        """Issue a new token for an origin URL

        The URL is validated before the data store is touched. Tokens are
        inserted with insert-if-absent semantics and regenerated on collision.

        Args:
            origin_url (str | None): origin URL, must start with https://

        Returns:
            str: the newly issued token

        Raises:
            ValidationError: if origin_url is missing or not https://
            TokenAlreadyExistsError: if every attempt collided with an existing token
            DataStoreError: on data store connectivity issues
        """
        origin_url = require_https(origin_url, 'src')

        for attempt in range(1, self.max_attempts + 1):
            token = generate_token(self.token_length)
            try:
                self.dao.insert(TokenModel(token=token, target=origin_url))
            except TokenAlreadyExistsError:
                logger.warning('Token collision. Regenerating token.', extra={'attempt': attempt})
                if attempt == self.max_attempts:
                    raise
            else:
                return token

    def resolve(self, token: str | None) -> str:
        """Resolve a token to its origin URL

        Missing and unknown tokens are both reported as ForbiddenError, so a
        caller can't tell a never-issued token from a malformed one.

        Raises:
            ForbiddenError: if the token is missing or unknown
            DataStoreError: on data store connectivity issues
        """
        if not token:
            raise ForbiddenError('Forbidden: missing token')
        try:
            return self.dao.get(token).target
        except TokenNotFoundError as e:
            raise ForbiddenError('Forbidden: invalid token') from e
