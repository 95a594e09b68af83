"""Short URL manager: shortcode allocation and record lifecycle

This module holds the only component with business semantics. It validates
input, allocates shortcodes (explicit, or randomized with bounded retry) and
orchestrates DAO operations.

Responsibilities:
    - Validate options once, at construction;
    - Validate target URLs and desired shortcodes;
    - Allocate randomized shortcodes, retrying on collision up to the attempt budget;
    - Maintain each record's retrieval count (the DAO never touches it).

Classes:
    ShortURLManager:
        ShortURLBaseManager implementation backed by any ShortURLBaseDAO.

Example:
    >>> from urlshortener.dao import ShortURLMemoryDAO
    >>> from urlshortener.models import ShortURLManagerOptions
    >>> manager = ShortURLManager(ShortURLMemoryDAO(), ShortURLManagerOptions())

    >>> manager.create('https://example.com', 'potato')
    (<ResultCode.SUCCESS: 'Success'>, ShortURLModel(target='https://example.com', shortcode='potato', ...))
    >>> manager.create('https://example.com', 'potato')
    (<ResultCode.ALREADY_IN_USE: 'AlreadyInUse'>, None)

    >>> code, short_url = manager.get('potato')
    >>> short_url.metrics.retrieval_count
    1

    >>> manager.delete('potato')
    <ResultCode.SUCCESS: 'Success'>
    >>> manager.delete('potato')
    <ResultCode.NOT_FOUND: 'NotFound'>
"""

import logging

from beartype import beartype

from urlshortener.constants import Event
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.exceptions import InternalConsistencyError, MissingDependencyError, UnsupportedOperationError
from urlshortener.manager.base import ShortURLBaseManager
from urlshortener.models import ResultCode, ShortURLModel, ShortURLManagerOptions
from urlshortener.types import LengthPicker, ShortcodeGenerator
from urlshortener.utils.helpers import is_absolute_url
from urlshortener.utils.shortener import generate_shortcode, pick_length


logger = logging.getLogger(__name__)


class ShortURLManager(ShortURLBaseManager):
    """Manage short URLs on top of a DAO

    Attributes:
        dao (ShortURLBaseDAO):
            Store holding the short URL records.
        options (ShortURLManagerOptions):
            Validated shortcode length bounds and creation attempt budget.

    Methods:
        create(target_url, desired_shortcode=None) -> tuple[ResultCode, ShortURLModel | None]:
            Create a short URL with the desired or a randomized shortcode.

        get(shortcode) -> tuple[ResultCode, ShortURLModel | None]:
            Retrieve a short URL and count the retrieval.

        update(shortcode, target_url):
            Always raises UnsupportedOperationError.

        delete(shortcode) -> ResultCode:
            Delete a short URL.
    """

    def __init__(
        self,
        dao: ShortURLBaseDAO | None,
        options: ShortURLManagerOptions | None,
        shortcode_generator: ShortcodeGenerator = generate_shortcode,
        length_picker: LengthPicker = pick_length,
    ):
        """Initialize the manager and validate its options

        Args:
            dao (ShortURLBaseDAO):
                Store to proxy to.

            options (ShortURLManagerOptions):
                Manager options; validated here, once.

            shortcode_generator (Callable[[int], str]):
                Produces a candidate shortcode of the given length.
                Defaults to a CSPRNG-backed Base62 generator.

            length_picker (Callable[[int, int], int]):
                Picks a candidate length from an inclusive [min, max] range.
                Defaults to a uniform CSPRNG-backed pick.

        Raises:
            MissingDependencyError:
                If dao or options is None.
            InvalidOptionError:
                A field-specific subclass if any option is invalid.
        """
        if dao is None:
            raise MissingDependencyError('dao')
        if options is None:
            raise MissingDependencyError('options')

        self.dao = dao
        self.options = options.validate()
        self._generate_shortcode = shortcode_generator
        self._pick_length = length_picker

    @beartype
    def create(self, target_url: str | None, desired_shortcode: str | None = None) -> tuple[ResultCode, ShortURLModel | None]:
        """Create a new short URL

        With a desired shortcode, only that shortcode is tried. Without one,
        up to `maximum_creation_attempts` randomized shortcodes are tried.

        Args:
            target_url (str | None):
                Long URL the short URL resolves to. Must be an absolute URI.
            desired_shortcode (str | None):
                Optional shortcode; None or '' requests a randomized one.

        Returns:
            tuple[ResultCode, ShortURLModel | None]:
                (SUCCESS, record) on success; otherwise one of
                INVALID_TARGET_URL, INVALID_URL_IDENTIFIER, ALREADY_IN_USE,
                UNABLE_TO_CREATE_AFTER_MAX_ATTEMPTS with no record.
        """
        if not is_absolute_url(target_url):
            logger.info('Rejected invalid target URL.', extra={'targetUrl': target_url, 'event': Event.INVALID_TARGET_URL})
            return ResultCode.INVALID_TARGET_URL, None

        if desired_shortcode:
            return self._create_with_shortcode(target_url, desired_shortcode)

        short_url = self._create_randomized(target_url)
        if short_url is None:
            logger.warning(
                'Unable to allocate a shortcode after max attempts.',
                extra={'attempts': self.options.maximum_creation_attempts, 'event': Event.CREATION_ATTEMPTS_EXHAUSTED},
            )
            return ResultCode.UNABLE_TO_CREATE_AFTER_MAX_ATTEMPTS, None
        return ResultCode.SUCCESS, short_url

    @beartype
    def get(self, shortcode: str) -> tuple[ResultCode, ShortURLModel | None]:
        """Retrieve a short URL and increment its retrieval count

        Returns:
            tuple[ResultCode, ShortURLModel | None]:
                (SUCCESS, record) where the record carries the retrieval count
                observed by this call, or (NOT_FOUND, None).

        Raises:
            InternalConsistencyError:
                If the DAO reports a hit without returning a record.
        """
        short_url, found = self.dao.get(shortcode)
        if not found:
            logger.debug('Short URL not found.', extra={'shortcode': shortcode, 'event': Event.SHORT_URL_NOT_FOUND})
            return ResultCode.NOT_FOUND, None

        if short_url is None:
            raise InternalConsistencyError(f"DAO reported short URL '{shortcode}' as found but returned no record.")

        # NOTE: the increment and the read of the new value happen under the
        #       record's own lock. Reading `metrics.retrieval_count` afterwards
        #       could observe a concurrent caller's increment instead of ours.
        retrieval_count = short_url.metrics.increment()
        logger.debug(
            'Short URL retrieved.',
            extra={'shortcode': shortcode, 'retrievalCount': retrieval_count, 'event': Event.SHORT_URL_RETRIEVED},
        )
        return ResultCode.SUCCESS, short_url.snapshot(retrieval_count)

    def update(self, shortcode: str, target_url: str) -> tuple[ResultCode, ShortURLModel | None]:
        """Update a short URL's target

        Raises:
            UnsupportedOperationError: always; updates are not supported.
        """
        raise UnsupportedOperationError('This operation is not supported in this manager.')

    @beartype
    def delete(self, shortcode: str) -> ResultCode:
        if self.dao.remove(shortcode):
            logger.info('Short URL deleted.', extra={'shortcode': shortcode, 'event': Event.SHORT_URL_DELETED})
            return ResultCode.SUCCESS
        logger.debug('Short URL not found.', extra={'shortcode': shortcode, 'event': Event.SHORT_URL_NOT_FOUND})
        return ResultCode.NOT_FOUND

    def _create_with_shortcode(self, target_url: str, shortcode: str) -> tuple[ResultCode, ShortURLModel | None]:
        minimum, maximum = self.options.url_id_minimum_length, self.options.url_id_maximum_length
        if not minimum <= len(shortcode) <= maximum:
            logger.info(
                'Rejected desired shortcode with invalid length.',
                extra={'shortcode': shortcode, 'minLength': minimum, 'maxLength': maximum, 'event': Event.INVALID_URL_IDENTIFIER},
            )
            return ResultCode.INVALID_URL_IDENTIFIER, None

        short_url = ShortURLModel(target=target_url, shortcode=shortcode)
        if not self.dao.insert(short_url):
            logger.info('Desired shortcode already in use.', extra={'shortcode': shortcode, 'event': Event.SHORTCODE_COLLISION})
            return ResultCode.ALREADY_IN_USE, None

        logger.info('Short URL created.', extra={'shortcode': shortcode, 'event': Event.SHORT_URL_CREATED})
        return ResultCode.SUCCESS, short_url

    def _create_randomized(self, target_url: str) -> ShortURLModel | None:
        """Try randomized shortcodes until one inserts or the attempt budget runs out"""
        minimum, maximum = self.options.url_id_minimum_length, self.options.url_id_maximum_length

        for attempt in range(1, self.options.maximum_creation_attempts + 1):
            length = self._pick_length(minimum, maximum)
            short_url = ShortURLModel(target=target_url, shortcode=self._generate_shortcode(length))

            if self.dao.insert(short_url):
                logger.info(
                    'Short URL created.',
                    extra={'shortcode': short_url.shortcode, 'attempt': attempt, 'event': Event.SHORT_URL_CREATED},
                )
                return short_url

            logger.debug(
                'Randomized shortcode collision, retrying.',
                extra={'shortcode': short_url.shortcode, 'attempt': attempt, 'event': Event.SHORTCODE_COLLISION},
            )

        return None
