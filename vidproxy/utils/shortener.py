"""Opaque identifier generation utilities

This module provides helpers for generating the random identifiers handed out
by the registries: video tokens and short link shortcodes.

Both identifiers are drawn from the operating system's CSPRNG and carry no
information about the URL they are bound to. Uniqueness is enforced by the
DAOs (insert-if-absent), callers regenerate on collision.

Functions:
    generate_token(length=16):
        Generate a hex token suitable for use as a proxy capability.

    generate_shortcode(length=8):
        Generate a Base62 shortcode suitable for use as a URL slug.

Example:
    >>> from vidproxy.utils import generate_token, generate_shortcode
    >>> generate_token()
    '3f2a9c41d07b4e5a'
    >>> generate_shortcode()
    'Gh71WPTa'
"""

import secrets
import string
import uuid


# Base62: 26 lowercase + 26 uppercase + 10 digits
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits

MAX_TOKEN_LENGTH = 32  # hex digits in a UUID


def generate_token(length: int = 16) -> str:
    """Generate a random hex token from a random UUID with its separators stripped.

    Args:
        length (int, optional):
            Number of hex characters to keep. Defaults to 16 (64 bits of entropy).
            Must be between 1 and 32.

    Returns:
        str: A lowercase hex string of exactly `length` characters.

    Example:
        >>> generate_token(16)
        '3f2a9c41d07b4e5a'
    """
    if not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if not 1 <= length <= MAX_TOKEN_LENGTH:
        raise ValueError(f'Length must be between 1 and {MAX_TOKEN_LENGTH} (given value: {length}).')

    return uuid.uuid4().hex[:length]


def generate_shortcode(length: int = 8) -> str:
    """Generate a random Base62 shortcode.

    Args:
        length (int, optional):
            Length of the resulting shortcode. Defaults to 8
            (62^8, roughly 2.2e14 possible codes).

    Returns:
        str: A random alphanumeric string of exactly `length` characters.

    Example:
        >>> generate_shortcode(8)
        'Gh71WPTa'

    NOTE:
        - The alphabet is Base62 safe: [a-zA-Z0-9].
    """
    if not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))
