"""Range-aware streaming proxy

Forwards a client's byte-range request to an origin URL and relays the
origin's status, a fixed subset of its headers, and its body as a live stream.

Header policy:
    - `Range` is forwarded upstream only when the client sent one.
    - `Content-Type` is copied from the origin, defaulting to video/mp4.
    - `Content-Length` and `Content-Range` are copied only when present.
    - Caching and CORS headers are always set by the proxy and are never
      taken from the origin.

Error policy:
    - Transport failures (DNS, connect, timeout, protocol) and origin 5xx
      responses raise UpstreamError (502). Nothing is retried.
    - Redirects are followed, but only within https://. An origin redirecting
      to any other scheme raises UpstreamError.
    - Any other origin status (200, 206, 404, 416, ...) is relayed unchanged.

Resource policy:
    The upstream response is closed on every exit path: stream exhausted,
    stream interrupted, client disconnected, or a response rejected up front
    (5xx or off-https redirect).

Example:
    >>> proxy = StreamingProxy(build_http_client(config['upstream']))
    >>> response = await proxy.stream('https://example.com/a.mp4', range_header='bytes=0-99')
    >>> response.status_code
    206
"""

import logging
from collections.abc import AsyncIterator

import anyio
import httpx
from starlette.background import BackgroundTask
from starlette.responses import StreamingResponse

from vidproxy.constants import Defaults, DEFAULT_VIDEO_CONTENT_TYPE
from vidproxy.exceptions import UpstreamError
from vidproxy.types import ResponseHeaders, UpstreamConfig


logger = logging.getLogger(__name__)


# Set on every proxied response, regardless of what the origin sent
PROXY_HEADERS: ResponseHeaders = {
    'Cache-Control': 'no-store',
    'Accept-Ranges': 'bytes',
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, OPTIONS',
    'Access-Control-Allow-Headers': 'Range',
    'Access-Control-Expose-Headers': 'Content-Length, Content-Range, Accept-Ranges',
}

# Copied from the origin only when present and non-empty
OPTIONAL_UPSTREAM_HEADERS = ('Content-Length', 'Content-Range')


def build_http_client(upstream_config: UpstreamConfig | None = None) -> httpx.AsyncClient:
    """Create the shared HTTP client used to fetch origins"""
    upstream_config = upstream_config or {}
    timeout = httpx.Timeout(
        upstream_config.get('read_timeout', Defaults.READ_TIMEOUT),
        connect=upstream_config.get('connect_timeout', Defaults.CONNECT_TIMEOUT),
    )
    return httpx.AsyncClient(follow_redirects=True, timeout=timeout)


def upstream_request_headers(range_header: str | None) -> dict[str, str]:
    # identity: relayed bytes must match the relayed Content-Length
    headers = {'Accept-Encoding': 'identity'}
    if range_header:
        headers['Range'] = range_header
    return headers


def relay_headers(upstream_headers: httpx.Headers) -> ResponseHeaders:
    headers = {'Content-Type': upstream_headers.get('content-type') or DEFAULT_VIDEO_CONTENT_TYPE}
    for name in OPTIONAL_UPSTREAM_HEADERS:
        value = upstream_headers.get(name)
        if value:
            headers[name] = value
    headers.update(PROXY_HEADERS)
    return headers


class StreamingProxy:
    """Stream origin responses through to clients

    Attributes:
        client (httpx.AsyncClient):
            Shared HTTP client (connection pool) used for all origin fetches.
        chunk_size (int):
            Maximum number of bytes relayed per chunk.
    """

    def __init__(self, client: httpx.AsyncClient, chunk_size: int = Defaults.CHUNK_SIZE):
        self.client = client
        self.chunk_size = chunk_size

    async def stream(self, origin_url: str, range_header: str | None = None) -> StreamingResponse:
        """Fetch `origin_url` and return a response streaming its body

        Args:
            origin_url (str):
                Resolved origin URL.
            range_header (str | None):
                Verbatim value of the client's Range header, if any.

        Returns:
            StreamingResponse: origin status, relayed headers, pass-through body.

        Raises:
            UpstreamError: if the origin can't be fetched, responds with 5xx
                or redirects to a non-https URL.
        """
        try:
            request = self.client.build_request('GET', origin_url, headers=upstream_request_headers(range_header))
            upstream = await self.client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(
                'Failed to fetch origin.',
                extra={'error': type(e).__name__, 'hasRange': range_header is not None},
            )
            raise UpstreamError('Bad Gateway: failed to fetch origin') from e

        if upstream.url.scheme != 'https':
            await upstream.aclose()
            logger.warning('Origin redirected off https.', extra={'scheme': upstream.url.scheme})
            raise UpstreamError('Bad Gateway: origin redirected to a non-https URL')

        if upstream.status_code >= 500:
            await upstream.aclose()
            logger.warning('Origin responded with a server error.', extra={'upstreamStatus': upstream.status_code})
            raise UpstreamError(f'Bad Gateway: origin responded with {upstream.status_code}')

        logger.debug(
            'Streaming origin response.',
            extra={'upstreamStatus': upstream.status_code, 'range': range_header},
        )
        # NOTE: the background task covers disconnects before the body iterator
        #       ever starts. aclose() is a no-op on an already closed response.
        return StreamingResponse(
            self._relay(upstream),
            status_code=upstream.status_code,
            headers=relay_headers(upstream.headers),
            background=BackgroundTask(upstream.aclose),
        )

    async def _relay(self, upstream: httpx.Response) -> AsyncIterator[bytes]:
        try:
            async for chunk in upstream.aiter_raw(self.chunk_size):
                yield chunk
        except httpx.HTTPError:
            logger.warning('Origin stream interrupted.', extra={'upstreamStatus': upstream.status_code})
            raise
        finally:
            # shielded: a client disconnect cancels the surrounding scope
            with anyio.CancelScope(shield=True):
                await upstream.aclose()
