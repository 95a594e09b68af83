from dataclasses import dataclass

from urlshortener.constants import Defaults
from urlshortener.exceptions import (
    InvalidMaximumLengthError,
    InvalidMinimumLengthError,
    InvalidLengthRangeError,
    InvalidMaximumAttemptsError,
)


@dataclass(frozen=True)
class ShortURLManagerOptions:
    """Options for the short URL manager.

    Attributes:
        url_id_maximum_length (int):
            Maximum valid length of a shortcode.
        url_id_minimum_length (int):
            Minimum valid length of a shortcode (must not exceed the maximum).
        maximum_creation_attempts (int):
            Maximum number of randomized shortcodes tried by a single create.

    NOTE: construction does not validate anything, so options can be loaded
          from config as-is. `validate()` is called once by the manager.

    Example:
        >>> ShortURLManagerOptions(url_id_minimum_length=2, url_id_maximum_length=1).validate()
        Traceback (most recent call last):
            ...
        urlshortener.exceptions.InvalidLengthRangeError: The minimum value must be less than or equal to the maximum value. (field: url_id_minimum_length)
    """

    url_id_maximum_length: int = Defaults.URL_ID_MAXIMUM_LENGTH
    url_id_minimum_length: int = Defaults.URL_ID_MINIMUM_LENGTH
    maximum_creation_attempts: int = Defaults.MAXIMUM_CREATION_ATTEMPTS

    def validate(self) -> 'ShortURLManagerOptions':
        """Check every option, in declaration order, and return self.

        Raises:
            InvalidMaximumLengthError: url_id_maximum_length <= 0
            InvalidMinimumLengthError: url_id_minimum_length <= 0
            InvalidLengthRangeError: url_id_minimum_length > url_id_maximum_length
            InvalidMaximumAttemptsError: maximum_creation_attempts <= 0
        """
        if self.url_id_maximum_length <= 0:
            raise InvalidMaximumLengthError('url_id_maximum_length', 'The specified value must be a positive integer.')
        if self.url_id_minimum_length <= 0:
            raise InvalidMinimumLengthError('url_id_minimum_length', 'The specified value must be a positive integer.')
        if self.url_id_minimum_length > self.url_id_maximum_length:
            raise InvalidLengthRangeError('url_id_minimum_length', 'The minimum value must be less than or equal to the maximum value.')
        if self.maximum_creation_attempts <= 0:
            raise InvalidMaximumAttemptsError('maximum_creation_attempts', 'The specified value must be a positive integer.')
        return self
