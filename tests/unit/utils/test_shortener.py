"""Unit tests for identifier generation in shortener.py.

Test coverage includes:

1. generate_token()
   - Produces fixed-length lowercase hex strings.
   - Produces distinct values across calls.
   - Rejects invalid lengths.

2. generate_shortcode()
   - Produces fixed-length Base62 strings.
   - Produces distinct values across calls.
   - Rejects invalid lengths.
"""

import re

import pytest

from vidproxy.utils.shortener import ALPHABET, generate_shortcode, generate_token


# -------------------------------
# 1. generate_token()
# -------------------------------


@pytest.mark.parametrize('length', [1, 8, 16, 32])
def test_generate_token_length(length):
    token = generate_token(length)
    assert len(token) == length
    assert re.fullmatch(r'[0-9a-f]+', token)


def test_generate_token_defaults_to_16_characters():
    assert len(generate_token()) == 16


def test_generate_token_is_random():
    tokens = {generate_token() for _ in range(1000)}
    assert len(tokens) == 1000


@pytest.mark.parametrize('length, error', [(0, ValueError), (33, ValueError), (-1, ValueError), ('16', TypeError), (16.0, TypeError)])
def test_generate_token_with_invalid_length(length, error):
    with pytest.raises(error):
        generate_token(length)


# -------------------------------
# 2. generate_shortcode()
# -------------------------------


def test_generate_shortcode_defaults_to_8_characters():
    shortcode = generate_shortcode()
    assert len(shortcode) == 8
    assert all(ch in ALPHABET for ch in shortcode)


def test_alphabet_is_base62():
    assert len(ALPHABET) == 62
    assert len(set(ALPHABET)) == 62


def test_generate_shortcode_is_random():
    shortcodes = {generate_shortcode() for _ in range(1000)}
    assert len(shortcodes) == 1000


@pytest.mark.parametrize('length, error', [(0, ValueError), (-8, ValueError), ('8', TypeError), (None, TypeError)])
def test_generate_shortcode_with_invalid_length(length, error):
    with pytest.raises(error):
        generate_shortcode(length)
