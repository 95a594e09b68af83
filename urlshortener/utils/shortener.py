"""Shortcode generation utilities

This module provides helpers for generating random, fixed-length shortcodes.
Uniqueness is NOT guaranteed here: callers insert the result into a DAO,
which rejects collisions, and retry with a fresh shortcode.

Functions:
    generate_shortcode(length):
        Generate a random Base62 shortcode of exactly `length` characters.
    pick_length(minimum, maximum):
        Pick a shortcode length uniformly from [minimum, maximum].

Example:
    >>> from urlshortener.utils import generate_shortcode
    >>> len(generate_shortcode(7))
    7
"""

import secrets
import string


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # Base62: 26 lowercase + 26 uppercase + 10 digits


def generate_shortcode(length: int) -> str:
    """Generate a random URL-safe shortcode.

    Characters are drawn independently from the Base62 alphabet using the
    operating system's CSPRNG (`secrets`).

    Args:
        length (int):
            Exact length of the resulting shortcode. Must be positive.

    Returns:
        str: A random alphanumeric string of the given length.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is not positive.

    Example:
        >>> generate_shortcode(6)  # doctest: +SKIP
        'q3ZfA9'
    """
    if not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def pick_length(minimum: int, maximum: int) -> int:
    """Pick a length uniformly at random from [minimum, maximum] (both inclusive)."""
    if minimum > maximum:
        raise ValueError(f'Minimum must not exceed maximum (given values: {minimum} > {maximum}).')
    return minimum + secrets.randbelow(maximum - minimum + 1)
