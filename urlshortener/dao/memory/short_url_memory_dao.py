"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a thread-safe, dictionary-backed implementation of
ShortURLBaseDAO. Records live only as long as the process does.

Responsibilities:
    - Insert, retrieve and remove short URLs keyed by shortcode;
    - Serialize conflicting mutations so that concurrent inserts of the same
      shortcode resolve with exactly one winner;
    - Hand out stored records by reference (callers may mutate their metrics).

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in process memory.

Example:
    >>> from urlshortener.models import ShortURLModel
    >>> from urlshortener.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.insert(ShortURLModel(target="https://example.com/page", shortcode="abc123"))
    True
    >>> retrieved, found = dao.get("abc123")
    >>> found
    True
    >>> retrieved.target
    'https://example.com/page'
    >>> dao.count()
    1
"""

import threading

from beartype import beartype

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    A single lock guards the whole mapping, so every operation is atomic with
    respect to every other operation (not only those on the same shortcode).

    Attributes:
        _links (dict[str, ShortURLModel]):
            Mapping of shortcode to stored record.
        _lock (threading.Lock):
            Exclusive section guarding `_links`.
    """

    def __init__(self):
        self._links: dict[str, ShortURLModel] = {}
        self._lock = threading.Lock()

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> bool:
        """Insert a short URL mapping unless its shortcode is taken

        The existence check and the write happen inside the same critical
        section, so two concurrent inserts of one shortcode cannot both succeed.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            bool: True if stored, False if the shortcode already exists.
        """
        with self._lock:
            if short_url.shortcode in self._links:
                return False
            self._links[short_url.shortcode] = short_url
            return True

    @beartype
    def get(self, shortcode: str, **kwargs) -> tuple[ShortURLModel | None, bool]:
        """Retrieve a stored short URL mapping by shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            tuple[ShortURLModel | None, bool]:
                (record, True) if found, otherwise (None, False).
        """
        with self._lock:
            short_url = self._links.get(shortcode)
        return short_url, short_url is not None

    @beartype
    def remove(self, shortcode: str, **kwargs) -> bool:
        with self._lock:
            return self._links.pop(shortcode, None) is not None

    def count(self, **kwargs) -> int:
        with self._lock:
            return len(self._links)
