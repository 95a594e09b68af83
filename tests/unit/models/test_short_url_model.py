"""Unit tests for the ShortURLModel and URLMetricsModel dataclasses.

Test coverage includes:

1. Model creation
   - Ensures instances can be created with valid field values.
   - Verifies metrics default to a zero retrieval count.

2. Identity semantics
   - Confirms models with the same shortcode compare (and hash) equal.
   - Ensures different shortcodes produce non-equal instances.

3. Immutability
   - Verifies that fields are frozen and cannot be reassigned.

4. Rendering and snapshots
   - Ensures str() renders identifier, target and retrieval count.
   - Confirms snapshots are detached from the original metrics.

5. Metrics increments
   - Ensures increment() returns the post-increment value.
   - Confirms concurrent increments never get lost.
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError

import pytest

from urlshortener.models import ShortURLModel, URLMetricsModel


# -------------------------------------------------
# 1. Model creation
# -------------------------------------------------


def test_valid_short_url_model_creation():
    """Ensure ShortURLModel can be created with valid data."""
    short_url = ShortURLModel(target='https://example.com/article/123', shortcode='abc123')

    assert short_url.target == 'https://example.com/article/123'
    assert short_url.shortcode == 'abc123'
    assert isinstance(short_url.metrics, URLMetricsModel)
    assert short_url.metrics.retrieval_count == 0


def test_metrics_are_not_shared_between_models():
    """Ensure each model gets its own metrics instance."""
    first = ShortURLModel(target='https://example.com', shortcode='a')
    second = ShortURLModel(target='https://example.com', shortcode='b')

    first.metrics.increment()

    assert first.metrics is not second.metrics
    assert second.metrics.retrieval_count == 0


# -------------------------------------------------
# 2. Identity semantics
# -------------------------------------------------


def test_models_with_same_shortcode_are_equal():
    """Ensure identity is the shortcode alone."""
    first = ShortURLModel(target='https://example.com/one', shortcode='abc123')
    second = ShortURLModel(target='https://example.com/two', shortcode='abc123', metrics=URLMetricsModel(retrieval_count=5))

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_models_with_different_shortcodes_are_not_equal():
    """Ensure different shortcodes yield different entities."""
    first = ShortURLModel(target='https://example.com', shortcode='abc123')
    second = ShortURLModel(target='https://example.com', shortcode='xyz789')

    assert first != second


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------


@pytest.mark.parametrize('field, value', [('shortcode', 'other'), ('target', 'https://other.com'), ('metrics', URLMetricsModel())])
def test_short_url_model_is_frozen(field, value):
    """Ensure fields cannot be reassigned after creation."""
    short_url = ShortURLModel(target='https://example.com', shortcode='abc123')

    with pytest.raises(FrozenInstanceError):
        setattr(short_url, field, value)


# -------------------------------------------------
# 4. Rendering and snapshots
# -------------------------------------------------


def test_short_url_model_str():
    """Ensure str() renders identifier, target and retrieval count."""
    short_url = ShortURLModel(target='https://example.com', shortcode='potato', metrics=URLMetricsModel(retrieval_count=3))

    assert str(short_url) == 'Identifier: potato, TargetUrl: https://example.com. Metrics: [RetrievalCount: 3]'


def test_snapshot_is_detached():
    """Ensure a snapshot keeps its count when the original keeps changing."""
    short_url = ShortURLModel(target='https://example.com', shortcode='potato')
    short_url.metrics.increment()

    snapshot = short_url.snapshot()
    short_url.metrics.increment()

    assert snapshot == short_url
    assert snapshot.metrics is not short_url.metrics
    assert snapshot.metrics.retrieval_count == 1
    assert short_url.metrics.retrieval_count == 2


def test_snapshot_with_pinned_count():
    """Ensure snapshot() can pin an explicit retrieval count."""
    short_url = ShortURLModel(target='https://example.com', shortcode='potato')

    assert short_url.snapshot(7).metrics.retrieval_count == 7
    assert short_url.metrics.retrieval_count == 0


# -------------------------------------------------
# 5. Metrics increments
# -------------------------------------------------


def test_increment_returns_new_value():
    """Ensure increment() returns the post-increment count."""
    metrics = URLMetricsModel()

    assert metrics.increment() == 1
    assert metrics.increment() == 2
    assert metrics.retrieval_count == 2


def test_concurrent_increments_are_not_lost():
    """Ensure N concurrent increments yield exactly the values 1..N."""
    workers, per_worker = 8, 250
    metrics = URLMetricsModel()
    barrier = threading.Barrier(workers)

    def hammer():
        barrier.wait()
        return [metrics.increment() for _ in range(per_worker)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = [value for future in [pool.submit(hammer) for _ in range(workers)] for value in future.result()]

    assert sorted(results) == list(range(1, workers * per_worker + 1))
    assert metrics.retrieval_count == workers * per_worker
