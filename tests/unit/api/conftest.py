from copy import deepcopy

import httpx
import pytest
from fastapi.testclient import TestClient

from vidproxy.api.app import create_app
from vidproxy.models import ShortLinkModel, TokenModel, VideoLinkModel
from vidproxy.dao.base import ShortLinkBaseDAO, TokenBaseDAO, VideoLinkBaseDAO
from vidproxy.dao.exceptions import (
    ShortLinkAlreadyExistsError,
    ShortLinkNotFoundError,
    TokenAlreadyExistsError,
    TokenNotFoundError,
    VideoLinkNotFoundError,
)
from vidproxy.utils.config import DEFAULT_CONFIG


ORIGIN_BODY = bytes(range(256)) * 8


class InMemoryTokenDAO(TokenBaseDAO):
    def __init__(self):
        self.tokens: dict[str, str] = {}

    def insert(self, token: TokenModel, **kwargs) -> 'InMemoryTokenDAO':
        if token.token in self.tokens:
            raise TokenAlreadyExistsError(f"Token '{token.token}' already exists.")
        self.tokens[token.token] = token.target
        return self

    def get(self, token: str, **kwargs) -> TokenModel:
        if token not in self.tokens:
            raise TokenNotFoundError(f"Token '{token}' not found.")
        return TokenModel(token=token, target=self.tokens[token])


class InMemoryVideoLinkDAO(VideoLinkBaseDAO):
    def __init__(self):
        self.targets: set[str] = set()

    def insert(self, video_link: VideoLinkModel, **kwargs) -> 'InMemoryVideoLinkDAO':
        self.targets.add(video_link.target)
        return self

    def get(self, target: str, **kwargs) -> VideoLinkModel:
        if target not in self.targets:
            raise VideoLinkNotFoundError(f"Video link '{target}' is not registered.")
        return VideoLinkModel(target=target)


class InMemoryShortLinkDAO(ShortLinkBaseDAO):
    def __init__(self):
        self.links: dict[str, str] = {}

    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'InMemoryShortLinkDAO':
        if short_link.shortcode in self.links:
            raise ShortLinkAlreadyExistsError(f"Short link with code '{short_link.shortcode}' already exists.")
        self.links[short_link.shortcode] = short_link.target
        return self

    def get(self, shortcode: str, **kwargs) -> ShortLinkModel:
        if shortcode not in self.links:
            raise ShortLinkNotFoundError(f"Short link with code '{shortcode}' not found.")
        return ShortLinkModel(shortcode=shortcode, target=self.links[shortcode])


class Origin:
    """Fake origin serving ORIGIN_BODY with byte-range support"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code: int | None = None
        self.body = ORIGIN_BODY

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.status_code is not None:
            return httpx.Response(self.status_code, stream=httpx.ByteStream(b'origin error'))

        range_header = request.headers.get('range')
        if range_header is None:
            headers = {'Content-Type': 'video/mp4', 'Content-Length': str(len(ORIGIN_BODY))}
            return httpx.Response(200, headers=headers, stream=httpx.ByteStream(ORIGIN_BODY))

        start, end = range_header.removeprefix('bytes=').split('-')
        start, end = int(start), int(end)
        body = ORIGIN_BODY[start : end + 1]
        headers = {
            'Content-Type': 'video/mp4',
            'Content-Length': str(len(body)),
            'Content-Range': f'bytes {start}-{end}/{len(ORIGIN_BODY)}',
        }
        return httpx.Response(206, headers=headers, stream=httpx.ByteStream(body))


@pytest.fixture
def token_dao() -> InMemoryTokenDAO:
    return InMemoryTokenDAO()


@pytest.fixture
def video_link_dao() -> InMemoryVideoLinkDAO:
    return InMemoryVideoLinkDAO()


@pytest.fixture
def short_link_dao() -> InMemoryShortLinkDAO:
    return InMemoryShortLinkDAO()


@pytest.fixture
def origin() -> Origin:
    return Origin()


@pytest.fixture
def client(token_dao, video_link_dao, short_link_dao, origin):
    app = create_app(
        deepcopy(DEFAULT_CONFIG),
        token_dao=token_dao,
        video_link_dao=video_link_dao,
        short_link_dao=short_link_dao,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(origin)),
    )
    with TestClient(app) as client:
        yield client
