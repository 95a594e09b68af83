"""Abstract base class for short URL managers.

The four methods below are the capability surface any front end (console,
RPC service, ...) drives. Expected outcomes are returned as ResultCode values;
implementations raise only for defects and deliberately unsupported operations.
"""

from abc import ABC, abstractmethod

from urlshortener.models import ResultCode, ShortURLModel


class ShortURLBaseManager(ABC):
    """Interface for short URL managers.

    Methods:
        create(target_url, desired_shortcode=None) -> tuple[ResultCode, ShortURLModel | None]
        get(shortcode) -> tuple[ResultCode, ShortURLModel | None]
        update(shortcode, target_url) -> tuple[ResultCode, ShortURLModel | None]
        delete(shortcode) -> ResultCode
    """

    @abstractmethod
    def create(self, target_url: str | None, desired_shortcode: str | None = None) -> tuple[ResultCode, ShortURLModel | None]:
        pass

    @abstractmethod
    def get(self, shortcode: str) -> tuple[ResultCode, ShortURLModel | None]:
        pass

    @abstractmethod
    def update(self, shortcode: str, target_url: str) -> tuple[ResultCode, ShortURLModel | None]:
        pass

    @abstractmethod
    def delete(self, shortcode: str) -> ResultCode:
        pass
