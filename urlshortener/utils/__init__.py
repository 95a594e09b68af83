from urlshortener.utils.config import app_env, project_root, config_path, load_config, load_manager_options
from urlshortener.utils.helpers import is_absolute_url
from urlshortener.utils.shortener import generate_shortcode, pick_length
from urlshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'pick_length',
    'app_env',
    'project_root',
    'config_path',
    'load_config',
    'load_manager_options',
    'is_absolute_url',
    'initialize_logging',
]
