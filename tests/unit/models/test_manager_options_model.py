"""Unit tests for ShortURLManagerOptions.

Test coverage includes:

1. Defaults
   - Ensures default options are valid.

2. Validation
   - Ensures each invalid option raises its own error, naming the field.
   - Confirms validation order when several options are invalid.
"""

import pytest

from urlshortener.constants import Defaults
from urlshortener.exceptions import (
    ConfigurationError,
    InvalidMaximumLengthError,
    InvalidMinimumLengthError,
    InvalidLengthRangeError,
    InvalidMaximumAttemptsError,
)
from urlshortener.models import ShortURLManagerOptions


# -------------------------------
# 1. Defaults
# -------------------------------


def test_default_options_are_valid():
    """Ensure default options pass validation and validate() returns self."""
    options = ShortURLManagerOptions()

    assert options.validate() is options
    assert options.url_id_minimum_length == Defaults.URL_ID_MINIMUM_LENGTH
    assert options.url_id_maximum_length == Defaults.URL_ID_MAXIMUM_LENGTH
    assert options.maximum_creation_attempts == Defaults.MAXIMUM_CREATION_ATTEMPTS


def test_equal_minimum_and_maximum_are_valid():
    """Ensure min == max is accepted."""
    ShortURLManagerOptions(url_id_maximum_length=1, url_id_minimum_length=1, maximum_creation_attempts=1).validate()


# -------------------------------
# 2. Validation
# -------------------------------


@pytest.mark.parametrize(
    'kwargs, error, field',
    [
        ({'maximum_creation_attempts': 0}, InvalidMaximumAttemptsError, 'maximum_creation_attempts'),
        ({'maximum_creation_attempts': -3}, InvalidMaximumAttemptsError, 'maximum_creation_attempts'),
        ({'url_id_maximum_length': 0}, InvalidMaximumLengthError, 'url_id_maximum_length'),
        ({'url_id_minimum_length': 0}, InvalidMinimumLengthError, 'url_id_minimum_length'),
        ({'url_id_minimum_length': 2}, InvalidLengthRangeError, 'url_id_minimum_length'),
    ],
)
def test_invalid_option_raises_field_specific_error(kwargs, error, field):
    """Ensure every invalid option raises a distinct, identifiable error."""
    options = ShortURLManagerOptions(**{'url_id_maximum_length': 1, 'url_id_minimum_length': 1, 'maximum_creation_attempts': 1, **kwargs})

    with pytest.raises(error) as exc_info:
        options.validate()

    assert exc_info.value.field == field
    assert field in str(exc_info.value)
    assert isinstance(exc_info.value, ConfigurationError)


def test_invalid_option_error_codes_are_distinct():
    """Ensure each option error carries its own error code."""
    codes = {
        InvalidMaximumLengthError.error_code,
        InvalidMinimumLengthError.error_code,
        InvalidLengthRangeError.error_code,
        InvalidMaximumAttemptsError.error_code,
    }
    assert len(codes) == 4


def test_maximum_length_is_checked_first():
    """Ensure maximum length is validated before the other options."""
    options = ShortURLManagerOptions(url_id_maximum_length=0, url_id_minimum_length=0, maximum_creation_attempts=0)

    with pytest.raises(InvalidMaximumLengthError):
        options.validate()
