from urlshortener.models.result_code import ResultCode
from urlshortener.models.url_metrics_model import URLMetricsModel
from urlshortener.models.short_url_model import ShortURLModel
from urlshortener.models.manager_options_model import ShortURLManagerOptions


__all__ = [
    'ResultCode',
    'URLMetricsModel',
    'ShortURLModel',
    'ShortURLManagerOptions',
]
