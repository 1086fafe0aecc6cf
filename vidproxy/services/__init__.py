from vidproxy.services.token_registry import TokenRegistry
from vidproxy.services.video_link_registry import VideoLinkRegistry
from vidproxy.services.short_link_registry import ShortLinkRegistry
from vidproxy.services.streaming_proxy import StreamingProxy, build_http_client


__all__ = [
    'TokenRegistry',
    'VideoLinkRegistry',
    'ShortLinkRegistry',
    'StreamingProxy',
    'build_http_client',
]
