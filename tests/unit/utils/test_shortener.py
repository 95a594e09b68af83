"""Unit tests for shortcode generation utilities in shortener.py.

Test coverage includes:

1. generate_shortcode()
   - Ensures output has exactly the requested length.
   - Ensures output only uses the Base62 alphabet.
   - Confirms invalid lengths raise TypeError or ValueError.

2. pick_length()
   - Ensures picks stay within the inclusive range and cover both bounds.
   - Confirms an inverted range raises ValueError.
"""

import pytest

from urlshortener.utils.shortener import ALPHABET, BASE, generate_shortcode, pick_length


# -------------------------------
# 1. generate_shortcode()
# -------------------------------


def test_alphabet_is_base62():
    assert BASE == 62
    assert len(set(ALPHABET)) == 62


@pytest.mark.parametrize('length', [1, 2, 7, 32])
def test_generate_shortcode_length(length):
    """Ensure shortcodes have exactly the requested length."""
    assert len(generate_shortcode(length)) == length


def test_generate_shortcode_alphabet():
    """Ensure shortcodes only contain Base62 characters."""
    shortcodes = [generate_shortcode(16) for _ in range(50)]

    assert all(set(shortcode) <= set(ALPHABET) for shortcode in shortcodes)


def test_generate_shortcode_is_random():
    """Ensure repeated calls do not return one fixed value."""
    assert len({generate_shortcode(12) for _ in range(20)}) > 1


@pytest.mark.parametrize('length, error', [(0, ValueError), (-1, ValueError), ('7', TypeError), (7.0, TypeError)])
def test_generate_shortcode_invalid_length(length, error):
    with pytest.raises(error):
        generate_shortcode(length)


# -------------------------------
# 2. pick_length()
# -------------------------------


def test_pick_length_within_inclusive_range():
    """Ensure picks cover [minimum, maximum] including both ends."""
    picks = {pick_length(1, 3) for _ in range(500)}

    assert picks == {1, 2, 3}


def test_pick_length_with_single_value_range():
    assert pick_length(5, 5) == 5


def test_pick_length_with_inverted_range():
    with pytest.raises(ValueError):
        pick_length(4, 3)
