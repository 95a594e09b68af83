import threading
from dataclasses import dataclass, field


@dataclass
class URLMetricsModel:
    """Usage metrics of a short URL.

    Attributes:
        retrieval_count (int):
            Number of successful retrievals of the short URL. Starts at 0 and
            never decreases.

    NOTE: `increment()` is the only supported way to change the count while the
          model is shared between threads. It performs the read-modify-write
          under a per-instance lock and returns the value observed by the caller.

    Example:
        >>> metrics = URLMetricsModel()
        >>> metrics.increment()
        1
        >>> metrics.retrieval_count
        1
    """

    retrieval_count: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def increment(self) -> int:
        with self._lock:
            self.retrieval_count += 1
            return self.retrieval_count
