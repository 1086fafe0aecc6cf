from beartype import beartype

from vidproxy.models import VideoLinkModel
from vidproxy.dao.base import VideoLinkBaseDAO
from vidproxy.dao.redis.mixins import RedisClientMixin
from vidproxy.dao.redis.helpers import handle_redis_connection_error
from vidproxy.dao.exceptions import VideoLinkNotFoundError


class VideoLinkRedisDAO(RedisClientMixin, VideoLinkBaseDAO):
    """Redis-based allow-list of origin URLs registered for direct proxying

    Each registered origin URL is stored under its own key, mapping to itself.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, video_link: VideoLinkModel, **kwargs) -> 'VideoLinkRedisDAO':
        self.redis.set(self.keys.video_link_key(video_link.target), video_link.target)
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, target: str, **kwargs) -> VideoLinkModel:
        if self.redis.get(self.keys.video_link_key(target)) is None:
            raise VideoLinkNotFoundError(f"Video link '{target}' is not registered.")
        return VideoLinkModel(target=target)
