from abc import ABC, abstractmethod

from vidproxy.models import VideoLinkModel


class VideoLinkBaseDAO(ABC):
    """Interface for the direct-link allow-list.

    Membership of an origin URL means it was registered for proxying
    via its raw `src` URL.

    Methods:
        insert(video_link: VideoLinkModel, **kwargs) -> VideoLinkBaseDAO:
            Register an origin URL. Registering the same URL twice is a no-op.
            Raises DataStoreError on connection or write failure.

        get(target: str, **kwargs) -> VideoLinkModel:
            Look up a registered origin URL.
            Raises VideoLinkNotFoundError if the URL was never registered.
            Raises DataStoreError on connection or read failure.
    """

    @abstractmethod
    def insert(self, video_link: VideoLinkModel, **kwargs) -> 'VideoLinkBaseDAO':
        pass

    @abstractmethod
    def get(self, target: str, **kwargs) -> VideoLinkModel:
        pass
