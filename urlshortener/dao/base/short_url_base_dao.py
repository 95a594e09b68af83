"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism.

Responsibilities:
    - Provide an interface for inserting, retrieving and removing ShortURLModel objects.
    - Guarantee at most one record per shortcode at any instant.
    - Report expected outcomes (collision, miss) as return values, not exceptions.

A DAO knows nothing about URL semantics or shortcode generation policy, and it
never touches a record's metrics.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlshortener.models import ShortURLModel
        >>> from urlshortener.dao import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()

        >>> short_url = ShortURLModel(
        ...     target="https://example.com/blog/article-123",
        ...     shortcode="a1b2c3",
        ... )
        >>> dao.insert(short_url)
        True
        >>> dao.insert(short_url)
        False

        >>> retrieved, found = dao.get("a1b2c3")
        >>> print(retrieved.target)
        https://example.com/blog/article-123

        >>> dao.remove("a1b2c3")
        True
        >>> dao.remove("a1b2c3")
        False
"""

from abc import ABC, abstractmethod

from urlshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> bool:
            Insert a ShortURLModel iff its shortcode is not taken.

        get(shortcode: str, **kwargs) -> tuple[ShortURLModel | None, bool]:
            Retrieve the stored ShortURLModel (by reference) and whether it exists.

        remove(shortcode: str, **kwargs) -> bool:
            Delete a ShortURLModel if present.

        count(**kwargs) -> int:
            Number of stored ShortURLModel objects.

    Subclassing:
        Datastore-specific implementations must extend this class and implement
        all abstract methods. Each method must be atomic with respect to
        concurrent calls on the same shortcode.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> bool:
        """Insert a new ShortURLModel into the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if inserted, False if the shortcode already exists (no mutation).
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> tuple[ShortURLModel | None, bool]:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            tuple[ShortURLModel | None, bool]:
                The stored instance and True if found, otherwise (None, False).
        """
        pass

    @abstractmethod
    def remove(self, shortcode: str, **kwargs) -> bool:
        """Remove a ShortURLModel from the data store by its shortcode.

        Args:
            shortcode (str):
                The shortcode of the ShortURLModel to be removed.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            bool: True if a record was deleted, False if none existed.
        """
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        """Return the number of stored ShortURLModel objects."""
        pass
