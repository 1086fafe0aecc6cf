"""HTTP routes

HTTP surface:
    GET     /                   HTML control page
    GET     /healthz            liveness probe
    GET     /generateToken      ?src=<https URL>   -> text/plain token
    GET     /generate           ?src=<https URL>   -> text/plain direct proxy link
    GET     /video              ?token=<token> | ?src=<https URL>  -> streamed media
    OPTIONS /video              CORS preflight
    GET     /short              ?url=<string>      -> text/plain short URL
    GET     /s/{shortcode}      302 redirect to the short link's target

Handlers only extract parameters and delegate. Input validation happens
before any data store access; errors are raised as `vidproxy.exceptions`
and rendered by the handlers registered in `vidproxy.api.app`.
"""

import re
import logging

from fastapi import APIRouter, Depends, Request
from starlette.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from vidproxy.api.constants import (
    TOKEN_ISSUED,
    VIDEO_LINK_REGISTERED,
    SHORT_LINK_CREATED,
    REDIRECT_SUCCESS,
    STREAM_STARTED,
)
from vidproxy.api.dependencies import (
    get_short_link_registry,
    get_streaming_proxy,
    get_token_registry,
    get_video_link_registry,
    resolve_origin,
)
from vidproxy.api.frontend import INDEX_HTML
from vidproxy.api.responses import response_204_preflight
from vidproxy.exceptions import ValidationError
from vidproxy.services import ShortLinkRegistry, StreamingProxy, TokenRegistry, VideoLinkRegistry
from vidproxy.utils.helpers import base_url, get_proxy_url


logger = logging.getLogger(__name__)

SHORTCODE_PATTERN = re.compile(r'[A-Za-z0-9_-]{1,64}')

router = APIRouter()


@router.get('/', response_class=HTMLResponse)
def index() -> HTMLResponse:
    return HTMLResponse(INDEX_HTML)


@router.get('/healthz', response_class=PlainTextResponse)
def healthz() -> PlainTextResponse:
    return PlainTextResponse('ok')


@router.get('/generateToken', response_class=PlainTextResponse)
def issue_token(src: str | None = None, tokens: TokenRegistry = Depends(get_token_registry)) -> PlainTextResponse:
    token = tokens.issue(src)
    logger.info('Issued video token.', extra={'event': TOKEN_ISSUED})
    return PlainTextResponse(token)


@router.get('/generate', response_class=PlainTextResponse)
def register_video_link(
    request: Request,
    src: str | None = None,
    video_links: VideoLinkRegistry = Depends(get_video_link_registry),
) -> PlainTextResponse:
    origin_url = video_links.register(src)
    logger.info('Registered video link.', extra={'event': VIDEO_LINK_REGISTERED})
    return PlainTextResponse(get_proxy_url(base_url(request), origin_url))


@router.get('/video')
async def stream_video(
    request: Request,
    origin_url: str = Depends(resolve_origin),
    proxy: StreamingProxy = Depends(get_streaming_proxy),
) -> Response:
    range_header = request.headers.get('range')
    response = await proxy.stream(origin_url, range_header=range_header)
    logger.info(
        'Streaming video. Responding with %s.',
        response.status_code,
        extra={'event': STREAM_STARTED, 'range': range_header},
    )
    return response


@router.options('/video')
def video_preflight() -> Response:
    return response_204_preflight()


@router.get('/short', response_class=PlainTextResponse)
def shorten(
    request: Request,
    url: str | None = None,
    short_links: ShortLinkRegistry = Depends(get_short_link_registry),
) -> PlainTextResponse:
    short_url = short_links.shorten(url, base_url(request))
    logger.info('Created short link.', extra={'event': SHORT_LINK_CREATED, 'shortUrl': short_url})
    return PlainTextResponse(short_url)


@router.get('/s/{shortcode:path}')
def redirect(shortcode: str, short_links: ShortLinkRegistry = Depends(get_short_link_registry)) -> RedirectResponse:
    if not SHORTCODE_PATTERN.fullmatch(shortcode):
        raise ValidationError('Invalid short link path')
    target = short_links.resolve(shortcode)
    logger.info('Redirecting client to target. Responding with 302.', extra={'event': REDIRECT_SUCCESS, 'shortcode': shortcode})
    return RedirectResponse(target, status_code=302)
