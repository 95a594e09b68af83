"""Utility functions for application configuration management.

Manager options are read from a YAML document selected by the application
environment (`APP_ENV`), then overridden by environment variables:

    <project root>/config/
    ├── local.yaml
    └── dev.yaml

The configuration YAML follows this structure:

    manager:
      url_id_minimum_length: 4
      url_id_maximum_length: 8
      maximum_creation_attempts: 10

Precedence (highest first):
    1. URLSHORTENER_URL_ID_MINIMUM_LENGTH / URLSHORTENER_URL_ID_MAXIMUM_LENGTH /
       URLSHORTENER_MAXIMUM_CREATION_ATTEMPTS environment variables
    2. the YAML document (explicit path, `URLSHORTENER_CONFIG`, or config/<env>.yaml)
    3. `Defaults` in urlshortener.constants

Ranges are NOT validated here; `ShortURLManager` validates options once at
construction.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to `'local'`.

    project_root() -> Path
        Return the project root directory, using `PROJECT_ROOT` when available.

    config_path() -> Path
        Return the YAML config path for the current environment.

    load_yaml(path: Path) -> dict
        Safely load a YAML document, defaulting to {} for empty files.

    load_config(path: Path | None = None) -> dict
        Load the `manager` config section, with environment overrides applied.

    load_manager_options(path: Path | None = None) -> ShortURLManagerOptions
        Build manager options from `load_config()`.

Example:
    >>> from urlshortener.utils.config import load_manager_options
    >>> options = load_manager_options()
    >>> options.url_id_maximum_length
    8
"""

import os
import functools
import logging
from pathlib import Path
from collections.abc import Callable

import yaml

from urlshortener.constants import ENV, Defaults, MANAGER_CONFIG_SECTION
from urlshortener.exceptions import BadConfigurationError
from urlshortener.models import ShortURLManagerOptions
from urlshortener.types import ConfigDocument, ManagerConfig


logger = logging.getLogger(__name__)

# Option name -> environment variable overriding it
ENV_OVERRIDES = {
    'url_id_minimum_length': ENV.Manager.URL_ID_MINIMUM_LENGTH,
    'url_id_maximum_length': ENV.Manager.URL_ID_MAXIMUM_LENGTH,
    'maximum_creation_attempts': ENV.Manager.MAXIMUM_CREATION_ATTEMPTS,
}


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def project_root() -> Path:
    """Return the absolute path to the project root directory

    Uses the PROJECT_ROOT environment variable, falling back to the directory
    that contains the `urlshortener` package.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, Path(__file__).resolve().parents[2]))


def config_path() -> Path:
    """Return the YAML config path (`URLSHORTENER_CONFIG` or config/<env>.yaml)"""
    explicit = os.environ.get(ENV.App.CONFIG_PATH)
    if explicit:
        return Path(explicit)
    return project_root() / 'config' / f'{app_env()}.yaml'


def load_yaml(path: Path) -> ConfigDocument:
    """Load a YAML file into a Python dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        BadConfigurationError: If the file is not valid YAML or not a mapping.
    """
    if not path.is_file():
        raise FileNotFoundError(f'YAML not found: {path}')
    with path.open('r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BadConfigurationError(f'Malformed YAML in {path}.') from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadConfigurationError(f'Top-level YAML document must be a mapping in {path}.')
    return data


def _as_int(name: str, value) -> int:
    # bool is an int subclass; floats are never truncated
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as e:
            raise BadConfigurationError(f"Option '{name}' must be an integer (given value: {value!r}).") from e
    raise BadConfigurationError(f"Option '{name}' must be an integer (given value: {value!r}).")


def environment_overrides(func: Callable[..., ManagerConfig]) -> Callable[..., ManagerConfig]:
    """Decorator: apply URLSHORTENER_* environment variables on top of loaded config

    Args:
        func (Callable[..., ManagerConfig]):
            load_config()

    Returns:
        Callable[..., ManagerConfig]:
            A compatible function whose result has every set override applied.

    Raises:
        BadConfigurationError:
            If an override is not an integer.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> ManagerConfig:
        config = func(*args, **kwargs)
        for option, env_name in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value:
                config[option] = _as_int(env_name, value)
                logger.debug('Applied environment override.', extra={'option': option, 'envVar': str(env_name)})
        return config

    return wrapper


@environment_overrides
def load_config(path: Path | None = None) -> ManagerConfig:
    """Load the manager section of the YAML configuration

    A missing file at the default location is not an error (defaults apply).
    A missing file at an explicitly given `path` is.

    Args:
        path (Path | None):
            Explicit YAML file. Defaults to `config_path()`.

    Returns:
        dict: option name -> value, restricted to known manager options.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
        BadConfigurationError: If the document or its manager section is malformed.

    Example:
        >>> load_config(Path('config/local.yaml'))
        {'url_id_minimum_length': 4, 'url_id_maximum_length': 8, 'maximum_creation_attempts': 10}
    """
    explicit = path is not None
    path = Path(path) if explicit else config_path()

    if not explicit and not path.is_file():
        logger.debug('No config file found, using defaults.', extra={'configPath': str(path)})
        return {}

    document = load_yaml(path)
    section = document.get(MANAGER_CONFIG_SECTION)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise BadConfigurationError(f"'{MANAGER_CONFIG_SECTION}' section must be a mapping in {path}.")

    logger.debug('Loaded config file.', extra={'configPath': str(path)})
    return {option: _as_int(option, section[option]) for option in ENV_OVERRIDES if option in section}


def load_manager_options(path: Path | None = None) -> ShortURLManagerOptions:
    """Build ShortURLManagerOptions from config file, environment and defaults"""
    config = load_config(path)
    return ShortURLManagerOptions(
        url_id_maximum_length=config.get('url_id_maximum_length', Defaults.URL_ID_MAXIMUM_LENGTH),
        url_id_minimum_length=config.get('url_id_minimum_length', Defaults.URL_ID_MINIMUM_LENGTH),
        maximum_creation_attempts=config.get('maximum_creation_attempts', Defaults.MAXIMUM_CREATION_ATTEMPTS),
    )
