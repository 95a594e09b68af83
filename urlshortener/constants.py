from enum import StrEnum


class Defaults:
    """Default manager options (used when neither config file nor env sets them)."""

    URL_ID_MINIMUM_LENGTH = 4
    URL_ID_MAXIMUM_LENGTH = 8
    MAXIMUM_CREATION_ATTEMPTS = 10


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        PROJECT_ROOT = 'PROJECT_ROOT'
        CONFIG_PATH = 'URLSHORTENER_CONFIG'
        LOG_LEVEL = 'LOG_LEVEL'
        LOG_FORMAT = 'LOG_FORMAT'

    class Manager(StrEnum):
        URL_ID_MINIMUM_LENGTH = 'URLSHORTENER_URL_ID_MINIMUM_LENGTH'
        URL_ID_MAXIMUM_LENGTH = 'URLSHORTENER_URL_ID_MAXIMUM_LENGTH'
        MAXIMUM_CREATION_ATTEMPTS = 'URLSHORTENER_MAXIMUM_CREATION_ATTEMPTS'


class Event(StrEnum):
    """Structured log event names (passed as `extra={'event': ...}`)."""

    SHORT_URL_CREATED = 'SHORT_URL_CREATED'
    SHORTCODE_COLLISION = 'SHORTCODE_COLLISION'
    INVALID_TARGET_URL = 'INVALID_TARGET_URL'
    INVALID_URL_IDENTIFIER = 'INVALID_URL_IDENTIFIER'
    CREATION_ATTEMPTS_EXHAUSTED = 'CREATION_ATTEMPTS_EXHAUSTED'
    SHORT_URL_RETRIEVED = 'SHORT_URL_RETRIEVED'
    SHORT_URL_NOT_FOUND = 'SHORT_URL_NOT_FOUND'
    SHORT_URL_DELETED = 'SHORT_URL_DELETED'


# Config file section holding manager options
MANAGER_CONFIG_SECTION = 'manager'
