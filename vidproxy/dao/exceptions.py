"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    TokenNotFoundError:
        Raised when a TokenModel is not found in the data store.

    TokenAlreadyExistsError:
        Raised when attempting to insert a TokenModel whose token is already taken.

    ShortLinkNotFoundError:
        Raised when a ShortLinkModel is not found in the data store.

    ShortLinkAlreadyExistsError:
        Raised when attempting to insert a ShortLinkModel whose shortcode is already taken.

    VideoLinkNotFoundError:
        Raised when an origin URL isn't registered in the direct-link allow-list.

Example:
    >>> from vidproxy.dao.exceptions import TokenNotFoundError
    >>> raise TokenNotFoundError("Token 'abc123' not found.")
    Traceback (most recent call last):
        ...
    vidproxy.dao.exceptions.TokenNotFoundError: Token 'abc123' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    pass


class TokenNotFoundError(DAOError):
    """Exception raised when a TokenModel is not found in the data store."""

    pass


class TokenAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a TokenModel that already exists in the data store."""

    pass


class ShortLinkNotFoundError(DAOError):
    """Exception raised when a ShortLinkModel is not found in the data store."""

    pass


class ShortLinkAlreadyExistsError(DAOError):
    """Exception raised when attempting to insert a ShortLinkModel that already exists in the data store."""

    pass


class VideoLinkNotFoundError(DAOError):
    """Exception raised when an origin URL is not registered in the allow-list."""

    pass
