import logging

from vidproxy.models import VideoLinkModel
from vidproxy.dao.base import VideoLinkBaseDAO
from vidproxy.dao.exceptions import VideoLinkNotFoundError
from vidproxy.exceptions import ForbiddenError
from vidproxy.utils.helpers import require_https


logger = logging.getLogger(__name__)


class VideoLinkRegistry:
    """Allow-list of origin URLs which may be proxied directly via `src`"""

    def __init__(self, dao: VideoLinkBaseDAO):
        self.dao = dao

    def register(self, origin_url: str | None) -> str:
        origin_url = require_https(origin_url, 'src')
        self.dao.insert(VideoLinkModel(target=origin_url))
        return origin_url

    def authorize(self, src: str | None) -> str:
        """Return `src` if it was registered, raise ForbiddenError otherwise"""
        src = require_https(src, 'src')
        try:
            return self.dao.get(src).target
        except VideoLinkNotFoundError as e:
            raise ForbiddenError('Forbidden: unregistered src') from e
