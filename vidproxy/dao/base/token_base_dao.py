"""Abstract base class for video token data access objects (DAOs).

This class establishes a consistent contract for all token DAO implementations,
regardless of the underlying storage mechanism (e.g., Redis, Deno KV, DynamoDB).

Responsibilities:
    - Provide an interface for inserting and retrieving TokenModel objects.
    - Standardize error handling across multiple data store implementations.
    - Guarantee an issued token is never rebound to another origin URL.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from vidproxy.models import TokenModel
        >>> from vidproxy.dao.redis import TokenRedisDAO

        >>> dao = TokenRedisDAO(...)

        >>> token = TokenModel(token="3f2a9c41d07b4e5a", target="https://example.com/a.mp4")
        >>> dao.insert(token)

        >>> dao.get("3f2a9c41d07b4e5a").target
        'https://example.com/a.mp4'
"""

from abc import ABC, abstractmethod

from vidproxy.models import TokenModel


class TokenBaseDAO(ABC):
    """Interface for video token data access objects (DAOs).

    Methods:
        insert(token: TokenModel, **kwargs) -> TokenBaseDAO:
            Insert a new TokenModel into the data store.
            Raises TokenAlreadyExistsError if the token is already taken.
            Raises DataStoreError on connection or write failure.

        get(token: str, **kwargs) -> TokenModel:
            Retrieve a TokenModel from the data store by token.
            Raises TokenNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

    NOTE:
        - Tokens never expire and are never deleted. The DAO does not
          provide an interface to manually delete entries.
    """

    @abstractmethod
    def insert(self, token: TokenModel, **kwargs) -> 'TokenBaseDAO':
        """Insert a new TokenModel into the data store.

        Args:
            token (TokenModel):
                The TokenModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            TokenBaseDAO: self (for method chaining)

        Raises:
            TokenAlreadyExistsError:
                If a TokenModel with the same token already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, token: str, **kwargs) -> TokenModel:
        """Retrieve a TokenModel from the data store by its token.

        Args:
            token (str):
                The opaque token of the TokenModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            TokenModel: The TokenModel instance.

        Raises:
            TokenNotFoundError:
                If no TokenModel with the given token exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
