"""Abstract base class for short link data access objects (DAOs)."""

from abc import ABC, abstractmethod

from vidproxy.models import ShortLinkModel


class ShortLinkBaseDAO(ABC):
    """Interface for short link data access objects (DAOs).

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkBaseDAO:
            Insert a new ShortLinkModel into the data store.
            Raises ShortLinkAlreadyExistsError if the shortcode is already taken.
            Raises DataStoreError on connection or write failure.

        get(shortcode: str, **kwargs) -> ShortLinkModel:
            Retrieve a ShortLinkModel from the data store by shortcode.
            Raises ShortLinkNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.
    """

    @abstractmethod
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Insert a new ShortLinkModel, refusing to overwrite an existing shortcode."""
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortLinkModel:
        """Retrieve a ShortLinkModel by its shortcode."""
        pass
