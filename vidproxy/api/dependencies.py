"""FastAPI dependencies

Registries and the streaming proxy are built once per process (see
`vidproxy.api.app.lifespan`) and handed to route handlers from `app.state`.

Dependencies touching the data store are plain `def` functions: FastAPI runs
them in its threadpool, so blocking Redis calls never stall streaming
responses on the event loop.
"""

from fastapi import Depends, Request

from vidproxy.exceptions import ValidationError
from vidproxy.services import ShortLinkRegistry, StreamingProxy, TokenRegistry, VideoLinkRegistry


def get_token_registry(request: Request) -> TokenRegistry:
    return request.app.state.token_registry


def get_video_link_registry(request: Request) -> VideoLinkRegistry:
    return request.app.state.video_link_registry


def get_short_link_registry(request: Request) -> ShortLinkRegistry:
    return request.app.state.short_link_registry


def get_streaming_proxy(request: Request) -> StreamingProxy:
    return request.app.state.streaming_proxy


def resolve_origin(
    token: str | None = None,
    src: str | None = None,
    tokens: TokenRegistry = Depends(get_token_registry),
    video_links: VideoLinkRegistry = Depends(get_video_link_registry),
) -> str:
    """Resolve the `/video` credential to an origin URL

    A token takes precedence over a raw `src` URL.

    Raises:
        ValidationError: neither credential given, or `src` isn't https://
        ForbiddenError: unknown token or unregistered `src`
    """
    if token:
        return tokens.resolve(token)
    if src:
        return video_links.authorize(src)
    raise ValidationError('Missing token or src')
