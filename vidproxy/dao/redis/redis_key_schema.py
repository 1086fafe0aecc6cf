import functools
from collections.abc import Callable

from vidproxy.constants import Namespace


__all__ = ['RedisKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Provide standardized Redis keys for the (namespace, identifier) mappings.

    An optional prefix can be provided to namespace all generated keys.
    It is highly encouraged to set a custom prefix for each app and environment,
    e.g. "vidproxy:prod" or "vidproxy:dev".
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def video_token_key(self, token: str) -> str:
        return f'{Namespace.VIDEO_TOKEN}:{token}'

    @prefix_key
    def video_link_key(self, target: str) -> str:
        return f'{Namespace.VIDEO_LINK}:{target}'

    @prefix_key
    def short_link_key(self, shortcode: str) -> str:
        return f'{Namespace.SHORT}:{shortcode}'
