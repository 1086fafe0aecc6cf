"""Short link registry: generates shortcodes for arbitrary targets and resolves them.

Shortcodes are drawn at random and inserted with insert-if-absent semantics.
On collision a new candidate is drawn (rejection sampling), so a shortcode is
never bound to two different targets, even under concurrent requests.
"""

import logging

from vidproxy.constants import Defaults
from vidproxy.models import ShortLinkModel
from vidproxy.dao.base import ShortLinkBaseDAO
from vidproxy.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError
from vidproxy.exceptions import NotFoundError, ValidationError
from vidproxy.utils.helpers import get_short_url
from vidproxy.utils.shortener import generate_shortcode


logger = logging.getLogger(__name__)


class ShortLinkRegistry:
    def __init__(
        self,
        dao: ShortLinkBaseDAO,
        shortcode_length: int = Defaults.SHORTCODE_LENGTH,
        max_attempts: int = Defaults.MAX_ATTEMPTS,
    ):
        self.dao = dao
        self.shortcode_length = shortcode_length
        self.max_attempts = max_attempts

    def create(self, target: str | None) -> str:
        """Bind a fresh shortcode to `target` and return the shortcode

        Raises:
            ValidationError: if target is missing or empty
            ShortLinkAlreadyExistsError: if every attempt collided with an existing shortcode
            DataStoreError: on data store connectivity issues
        """
        if not target:
            raise ValidationError('Missing url')

        for attempt in range(1, self.max_attempts + 1):
            shortcode = generate_shortcode(self.shortcode_length)
            try:
                self.dao.insert(ShortLinkModel(shortcode=shortcode, target=target))
            except ShortLinkAlreadyExistsError:
                logger.warning('Shortcode collision. Regenerating shortcode.', extra={'attempt': attempt})
                if attempt == self.max_attempts:
                    raise
            else:
                return shortcode

    def shorten(self, target: str | None, base: str | None = None) -> str:
        """Shorten `target` and return the short URL

        Args:
            target (str | None): any non-empty string, typically a proxy link
            base (str | None): public base URL of this service. When None,
                only the path `/s/<shortcode>` is returned.

        Returns:
            str: e.g. 'https://proxy.example.com/s/Gh71WPTa'
        """
        return get_short_url(self.create(target), base)

    def resolve(self, shortcode: str) -> str:
        """Return the target of a short link

        Raises:
            NotFoundError: if the shortcode doesn't exist
            DataStoreError: on data store connectivity issues
        """
        try:
            return self.dao.get(shortcode).target
        except ShortLinkNotFoundError as e:
            raise NotFoundError('Short link not found') from e
