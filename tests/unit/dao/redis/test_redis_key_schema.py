"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. Key generation per namespace
   - Ensures video token, video link and short link keys use their namespaces.

2. Default prefix behavior
   - Confirms keys are not prefixed when no prefix is provided.

3. Custom prefix behavior
   - Confirms keys are correctly prefixed when a valid prefix is provided.

4. Invalid prefix types
   - Ensures improper prefix types raise TypeError.
"""

import pytest

from vidproxy.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Key generation per namespace
# -------------------------------


@pytest.mark.parametrize(
    'token, expected',
    [
        ('3f2a9c41d07b4e5a', 'videoToken:3f2a9c41d07b4e5a'),
        ('abc', 'videoToken:abc'),
    ],
)
def test_video_token_key(token, expected):
    """Ensure video_token_key() generates valid Redis keys."""
    assert RedisKeySchema().video_token_key(token) == expected


def test_video_link_key():
    """Ensure video_link_key() keeps the full origin URL in the key."""
    keys = RedisKeySchema()
    assert keys.video_link_key('https://example.com/a.mp4?x=1') == 'videoLink:https://example.com/a.mp4?x=1'


@pytest.mark.parametrize(
    'shortcode, expected',
    [
        ('Gh71WPTa', 'short:Gh71WPTa'),
        ('XyZ78900', 'short:XyZ78900'),
    ],
)
def test_short_link_key(shortcode, expected):
    """Ensure short_link_key() generates valid Redis keys."""
    assert RedisKeySchema().short_link_key(shortcode) == expected


# -------------------------------
# 2. Default prefix behavior
# -------------------------------


def test_default_prefix_is_none():
    """Ensure keys are not prefixed without a prefix."""
    keys = RedisKeySchema()
    assert keys.prefix is None
    assert keys.short_link_key('abc') == 'short:abc'


# -------------------------------
# 3. Custom prefix behavior
# -------------------------------


def test_custom_prefix():
    """Ensure all keys carry the custom prefix."""
    keys = RedisKeySchema(prefix='vidproxy:dev')
    assert keys.video_token_key('abc') == 'vidproxy:dev:videoToken:abc'
    assert keys.video_link_key('https://a') == 'vidproxy:dev:videoLink:https://a'
    assert keys.short_link_key('abc') == 'vidproxy:dev:short:abc'


# -------------------------------
# 4. Invalid prefix types
# -------------------------------


@pytest.mark.parametrize('prefix', [123, 1.5, ['a'], {'a': 1}])
def test_invalid_prefix_type(prefix):
    """Ensure non-string prefixes raise TypeError."""
    with pytest.raises(TypeError, match='Prefix must be of type string'):
        RedisKeySchema(prefix=prefix)
