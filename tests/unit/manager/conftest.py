import pytest

from urlshortener.dao import ShortURLMemoryDAO
from urlshortener.manager import ShortURLManager
from urlshortener.models import ShortURLManagerOptions


@pytest.fixture
def dao() -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO()


@pytest.fixture
def options() -> ShortURLManagerOptions:
    return ShortURLManagerOptions(url_id_maximum_length=6, url_id_minimum_length=1, maximum_creation_attempts=1)


@pytest.fixture
def manager(dao, options) -> ShortURLManager:
    return ShortURLManager(dao, options)
