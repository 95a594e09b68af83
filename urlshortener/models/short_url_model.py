from dataclasses import dataclass, field, replace

from urlshortener.models.url_metrics_model import URLMetricsModel


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Identity is the shortcode alone: two models with the same shortcode compare
    (and hash) equal regardless of target or metrics.

    Attributes:
        target (str):
            The original long URL that the shortcode resolves to.
        shortcode (str):
            The unique short identifier representing the shortened URL.
        metrics (URLMetricsModel):
            Usage metrics, mutated in place by the manager on retrieval.

    Example:
        >>> url = ShortURLModel(target='https://example.com/article/123', shortcode='abc123')
        >>> url.metrics.retrieval_count
        0
        >>> print(url)
        Identifier: abc123, TargetUrl: https://example.com/article/123. Metrics: [RetrievalCount: 0]
    """

    target: str = field(compare=False)
    shortcode: str
    metrics: URLMetricsModel = field(default_factory=URLMetricsModel, compare=False)

    def snapshot(self, retrieval_count: int | None = None) -> 'ShortURLModel':
        """Return a detached copy, optionally pinned to a given retrieval count."""
        count = self.metrics.retrieval_count if retrieval_count is None else retrieval_count
        return replace(self, metrics=URLMetricsModel(retrieval_count=count))

    def __str__(self) -> str:
        return f'Identifier: {self.shortcode}, TargetUrl: {self.target}. Metrics: [RetrievalCount: {self.metrics.retrieval_count}]'
