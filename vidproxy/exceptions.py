"""Application exceptions mapped onto HTTP outcomes.

Each exception carries the HTTP `status_code` the router responds with and a
machine-readable `error_code`.

Classes:
    VideoProxyError:
        Base exception for all application-specific errors (500).

    ValidationError:
        Missing or malformed client input (400).

    ForbiddenError:
        Unknown or unauthorized credential (403). Deliberately used for
        tokens that never existed so callers can't enumerate tokens.

    NotFoundError:
        Unknown short link or route (404).

    UpstreamError:
        Origin fetch failed or origin responded with a server error (502).

    ConfigurationError:
        Application configured with missing or invalid parameters.
"""


class VideoProxyError(Exception):
    """Base exception for all application-specific errors."""

    status_code = 500
    error_code = 'app:video_proxy_error'


class ValidationError(VideoProxyError):
    """Raised when client input is missing or malformed."""

    status_code = 400
    error_code = 'request:validation_error'


class ForbiddenError(VideoProxyError):
    """Raised when a credential is unknown or not authorized for proxying."""

    status_code = 403
    error_code = 'request:forbidden_error'


class NotFoundError(VideoProxyError):
    """Raised when a requested short link doesn't exist."""

    status_code = 404
    error_code = 'request:not_found_error'


class UpstreamError(VideoProxyError):
    """Raised when the origin server can't be fetched or fails."""

    status_code = 502
    error_code = 'upstream:upstream_error'


class ConfigurationError(VideoProxyError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:configuration_error'
