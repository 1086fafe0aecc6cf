from vidproxy.dao.base.token_base_dao import TokenBaseDAO
from vidproxy.dao.base.short_link_base_dao import ShortLinkBaseDAO
from vidproxy.dao.base.video_link_base_dao import VideoLinkBaseDAO


__all__ = [
    'TokenBaseDAO',
    'ShortLinkBaseDAO',
    'VideoLinkBaseDAO',
]
