from urlshortener.models import ResultCode, ShortURLModel, URLMetricsModel, ShortURLManagerOptions
from urlshortener.dao import ShortURLBaseDAO, ShortURLMemoryDAO
from urlshortener.manager import ShortURLBaseManager, ShortURLManager


__all__ = [
    'ResultCode',
    'ShortURLModel',
    'URLMetricsModel',
    'ShortURLManagerOptions',
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
    'ShortURLBaseManager',
    'ShortURLManager',
]
