from urlshortener.manager.base import ShortURLBaseManager
from urlshortener.manager.short_url_manager import ShortURLManager


__all__ = [
    'ShortURLBaseManager',
    'ShortURLManager',
]
