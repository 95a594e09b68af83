"""Application-specific exceptions.

Operation outcomes (bad input, not found, collisions, exhausted attempts) are
reported as `ResultCode` values, never raised. The classes below cover the
remaining cases:

    - construction-time faults (bad options, missing dependencies)
    - malformed configuration sources
    - internal-consistency defects in a store
    - the intentionally unsupported update operation

Example:
    >>> from urlshortener.exceptions import InvalidMaximumAttemptsError
    >>> raise InvalidMaximumAttemptsError('maximum_creation_attempts', 'The specified value must be a positive integer.')
    Traceback (most recent call last):
        ...
    urlshortener.exceptions.InvalidMaximumAttemptsError: The specified value must be a positive integer. (field: maximum_creation_attempts)
"""


class UrlShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:urlshortener_error'


class ConfigurationError(UrlShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when a configuration source holds malformed data."""

    error_code = 'config:bad_configuration_error'


class InvalidOptionError(ConfigurationError):
    """Base exception for a manager option that fails validation.

    Attributes:
        field (str): name of the offending option.
    """

    error_code = 'config:invalid_option_error'

    def __init__(self, field: str, message: str):
        super().__init__(f'{message} (field: {field})')
        self.field = field


class InvalidMaximumLengthError(InvalidOptionError):
    error_code = 'config:invalid_maximum_length_error'


class InvalidMinimumLengthError(InvalidOptionError):
    error_code = 'config:invalid_minimum_length_error'


class InvalidLengthRangeError(InvalidOptionError):
    """Raised when the minimum shortcode length exceeds the maximum."""

    error_code = 'config:invalid_length_range_error'


class InvalidMaximumAttemptsError(InvalidOptionError):
    error_code = 'config:invalid_maximum_attempts_error'


class MissingDependencyError(ConfigurationError):
    """Raised when a required collaborator is not provided (e.g. store is None)."""

    error_code = 'config:missing_dependency_error'

    def __init__(self, field: str):
        super().__init__(f'Value cannot be None. (field: {field})')
        self.field = field


class InternalConsistencyError(UrlShortenerError):
    """Raised when a store reports a hit but returns no record."""

    error_code = 'app:internal_consistency_error'


class UnsupportedOperationError(UrlShortenerError, NotImplementedError):
    """Raised by operations that are deliberately not implemented."""

    error_code = 'app:unsupported_operation_error'
