from enum import StrEnum


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_PATH = 'VIDPROXY_CONFIG'
        HOST = 'HOST'
        PORT = 'PORT'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'  # noqa: S105


class Namespace(StrEnum):
    """Key-value store namespaces."""

    VIDEO_TOKEN = 'videoToken'  # token -> origin URL
    VIDEO_LINK = 'videoLink'  # origin URL -> origin URL (allow-list)
    SHORT = 'short'  # shortcode -> target


class Defaults:
    """Default configuration values."""

    TOKEN_LENGTH = 16
    SHORTCODE_LENGTH = 8
    MAX_ATTEMPTS = 5  # identifier regeneration attempts on collision

    CONNECT_TIMEOUT = 10.0  # seconds
    READ_TIMEOUT = 60.0  # seconds
    CHUNK_SIZE = 65_536  # bytes


# Origin URLs must use this scheme prefix
HTTPS_PREFIX = 'https://'

# Fallback content type when the origin omits one
DEFAULT_VIDEO_CONTENT_TYPE = 'video/mp4'
