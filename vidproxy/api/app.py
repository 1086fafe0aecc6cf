"""ASGI application factory

Example:
    Run with uvicorn (see also `python -m vidproxy`):

        $ uvicorn --factory vidproxy.api.app:create_app

    Build an app around fakes in tests:

        >>> app = create_app(config, token_dao=fake_token_dao, ..., http_client=mock_client)
        >>> with TestClient(app) as client:
        ...     client.get('/generateToken', params={'src': 'https://example.com/a.mp4'})
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse

from vidproxy.api.constants import BAD_REQUEST, DATA_STORE_ERROR, FORBIDDEN, NOT_FOUND, UPSTREAM_ERROR
from vidproxy.api.responses import cors_headers, error_response, response_500
from vidproxy.api.routes import router
from vidproxy.dao.base import ShortLinkBaseDAO, TokenBaseDAO, VideoLinkBaseDAO
from vidproxy.dao.exceptions import DAOError
from vidproxy.dao.redis import ShortLinkRedisDAO, TokenRedisDAO, VideoLinkRedisDAO
from vidproxy.exceptions import ForbiddenError, NotFoundError, UpstreamError, ValidationError, VideoProxyError
from vidproxy.services import ShortLinkRegistry, StreamingProxy, TokenRegistry, VideoLinkRegistry, build_http_client
from vidproxy.types import AppConfig, RedisConfig
from vidproxy.utils.config import app_prefix, load_config


logger = logging.getLogger(__name__)

VIDEO_PATH = '/video'

_ERROR_EVENTS = {
    ValidationError: BAD_REQUEST,
    ForbiddenError: FORBIDDEN,
    NotFoundError: NOT_FOUND,
    UpstreamError: UPSTREAM_ERROR,
}


def error_headers(request: Request) -> dict[str, str] | None:
    # /video errors carry the same CORS headers as proxied responses
    return cors_headers() if request.url.path == VIDEO_PATH else None


def build_redis_daos(redis_config: RedisConfig) -> tuple[TokenRedisDAO, VideoLinkRedisDAO, ShortLinkRedisDAO]:
    """Create the Redis DAOs, sharing one client (and connection pool)

    Raises:
        DataStoreError: if Redis is unreachable
    """
    redis_config = {f'redis_{k}': v for k, v in redis_config.items()}
    token_dao = TokenRedisDAO(**redis_config, prefix=app_prefix())
    shared = {'redis_client': token_dao.redis, 'prefix': app_prefix()}
    return token_dao, VideoLinkRedisDAO(**shared), ShortLinkRedisDAO(**shared)


async def handle_app_error(request: Request, exc: VideoProxyError) -> PlainTextResponse:
    event = next((code for cls, code in _ERROR_EVENTS.items() if isinstance(exc, cls)), None)
    logger.info(
        '%s. Responding with %s.',
        exc,
        exc.status_code,
        extra={'event': event, 'path': request.url.path},
    )
    return error_response(exc.status_code, str(exc), exc.error_code, error_headers(request))


async def handle_dao_error(request: Request, exc: DAOError) -> PlainTextResponse:
    logger.error(
        'Data store operation failed. Responding with 500.',
        exc_info=exc,
        extra={'event': DATA_STORE_ERROR, 'path': request.url.path},
    )
    return response_500(error_headers(request))


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    message = 'Not found' if exc.status_code == 404 else str(exc.detail)
    return PlainTextResponse(message, status_code=exc.status_code, headers=exc.headers)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    return error_response(400, 'Bad Request', ValidationError.error_code, error_headers(request))


def create_app(
    config: AppConfig | None = None,
    *,
    token_dao: TokenBaseDAO | None = None,
    video_link_dao: VideoLinkBaseDAO | None = None,
    short_link_dao: ShortLinkBaseDAO | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Create the video proxy application

    Collaborators not given explicitly are built at startup from the
    configuration (`load_config()` when `config` is None): Redis DAOs from the
    'redis' section and the origin HTTP client from the 'upstream' section.
    Collaborators built here are also closed here on shutdown.

    Args:
        config (AppConfig | None): application configuration
        token_dao (TokenBaseDAO | None): token store
        video_link_dao (VideoLinkBaseDAO | None): direct-link allow-list store
        short_link_dao (ShortLinkBaseDAO | None): short link store
        http_client (httpx.AsyncClient | None): client used to fetch origins

    Returns:
        FastAPI: ASGI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app_config = config if config is not None else load_config()
        identifiers = app_config['identifiers']

        tokens, video_links, short_links = token_dao, video_link_dao, short_link_dao
        redis_client = None
        if tokens is None or video_links is None or short_links is None:
            redis_daos = build_redis_daos(app_config['redis'])
            redis_client = redis_daos[0].redis
            tokens = tokens or redis_daos[0]
            video_links = video_links or redis_daos[1]
            short_links = short_links or redis_daos[2]

        client = http_client if http_client is not None else build_http_client(app_config['upstream'])

        app.state.token_registry = TokenRegistry(tokens, identifiers['token_length'], identifiers['max_attempts'])
        app.state.video_link_registry = VideoLinkRegistry(video_links)
        app.state.short_link_registry = ShortLinkRegistry(short_links, identifiers['shortcode_length'], identifiers['max_attempts'])
        app.state.streaming_proxy = StreamingProxy(client, chunk_size=app_config['upstream']['chunk_size'])
        logger.info('Video proxy started.', extra={'prefix': app_prefix()})

        try:
            yield
        finally:
            if http_client is None:
                await client.aclose()
            if redis_client is not None:
                redis_client.close()
            logger.info('Video proxy stopped.')

    app = FastAPI(
        title='Video Proxy',
        description='Token-protected, range-aware video streaming proxy with short links.',
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(router)
    app.add_exception_handler(VideoProxyError, handle_app_error)
    app.add_exception_handler(DAOError, handle_dao_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    return app
