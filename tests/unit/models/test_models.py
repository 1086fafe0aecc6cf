from dataclasses import FrozenInstanceError

import pytest

from vidproxy.models import ShortLinkModel, TokenModel, VideoLinkModel


@pytest.mark.parametrize(
    'model, field',
    [
        (TokenModel(token='abc', target='https://example.com/a.mp4'), 'target'),
        (ShortLinkModel(shortcode='Gh71WPTa', target='https://host'), 'target'),
        (VideoLinkModel(target='https://example.com/a.mp4'), 'target'),
    ],
)
def test_models_are_immutable(model, field):
    """Ensure entries can't be rebound once created."""
    with pytest.raises(FrozenInstanceError):
        setattr(model, field, 'https://attacker.example.com')


def test_models_compare_by_value():
    assert TokenModel(token='abc', target='https://a') == TokenModel(token='abc', target='https://a')
    assert ShortLinkModel(shortcode='abc', target='x') != ShortLinkModel(shortcode='abc', target='y')
