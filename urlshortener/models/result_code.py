from enum import StrEnum


class ResultCode(StrEnum):
    """Outcome of a short URL manager operation.

    The string value is what front ends print, e.g. `str(ResultCode.NOT_FOUND) == 'NotFound'`.
    """

    SUCCESS = 'Success'
    INVALID_TARGET_URL = 'InvalidTargetUrl'  # target URL is empty or not an absolute URI
    INVALID_URL_IDENTIFIER = 'InvalidUrlIdentifier'  # desired shortcode length is out of bounds
    ALREADY_IN_USE = 'AlreadyInUse'  # desired shortcode is taken
    NOT_FOUND = 'NotFound'
    UNABLE_TO_CREATE_AFTER_MAX_ATTEMPTS = 'UnableToCreateAfterMaxAttempts'
