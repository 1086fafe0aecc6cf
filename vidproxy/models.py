from dataclasses import dataclass


# fmt: off
@dataclass(frozen=True)
class TokenModel:
    token: str                          # Opaque random identifier issued for an origin URL
    target: str                         # Origin URL the token resolves to


@dataclass(frozen=True)
class ShortLinkModel:
    shortcode: str                      # Unique short identifier of the short link
    target: str                         # Arbitrary redirect target (usually a proxy link)


@dataclass(frozen=True)
class VideoLinkModel:
    target: str                         # Origin URL registered for direct proxying
# fmt: on
