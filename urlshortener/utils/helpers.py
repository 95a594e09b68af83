"""Helper utilities shared by the manager and front ends.

Functions:
    is_absolute_url(url) -> bool
        Check whether a string is a syntactically valid absolute URI

Example:
    >>> from urlshortener.utils.helpers import is_absolute_url
    >>> is_absolute_url('https://example.com')
    True
    >>> is_absolute_url('this is not a valid url')
    False
    >>> is_absolute_url('/relative/path')
    False
"""

import re
import unicodedata
from urllib.parse import urlsplit


# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
SCHEME_PATTERN = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*:')
# Schemes whose URIs are meaningless without a host
NETWORK_SCHEMES = frozenset({'http', 'https', 'ftp', 'ftps', 'ws', 'wss'})


def is_absolute_url(url: str | None) -> bool:
    """Check whether `url` is a syntactically valid absolute URI

    Only syntax is checked, never reachability or content.

    Rules:
        - non-empty, no whitespace or control characters;
        - starts with a scheme followed by ':' and a non-empty remainder;
        - network schemes (http, https, ftp, ...) must name a host.

    Args:
        url (str | None): candidate target URL

    Returns:
        bool: True if the URL is absolute and well-formed, False otherwise.
    """
    if not url or not isinstance(url, str):
        return False
    if any(ch.isspace() or unicodedata.category(ch) == 'Cc' for ch in url):
        return False

    match = SCHEME_PATTERN.match(url)
    if match is None or len(url) == match.end():
        return False

    try:
        components = urlsplit(url)
        # .port raises ValueError on a malformed or out-of-range port
        components.port
    except ValueError:
        return False

    if components.scheme.lower() in NETWORK_SCHEMES:
        return bool(components.hostname)
    return True
