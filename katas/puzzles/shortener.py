"""Sequential URL shortener

Responsibilities:
    - Register URLs in an append-only, per-instance registry;
    - Issue the Base62 form of a URL's registry index as its shortcode;
    - Resolve shortcodes back to the registered URLs.

Shortcodes are not hashes: they can be resolved only because they are issued
sequentially by the same instance that stores the URLs.

Classes:
    UrlShortener:
        Encode URLs to shortcodes and decode them back.

Example:
    >>> shortener = UrlShortener()
    >>> code = shortener.encode('https://en.wikipedia.org/wiki/URL_shortening')
    >>> code
    '0'
    >>> shortener.decode(code)
    'https://en.wikipedia.org/wiki/URL_shortening'
    >>> shortener.decode('zz') is None
    True
"""

import logging

from beartype import beartype

from katas.utils.base62 import encode_base62, decode_base62


logger = logging.getLogger(__name__)


class UrlShortener:
    """URL shortening helper backed by an in-memory registry.

    Attributes:
        urls (list[str]):
            Registered URLs; a URL's position is the number its shortcode encodes.

    Methods:
        encode(url: str) -> str:
            Register a URL and return its shortcode.

        decode(code: str) -> str | None:
            Return the URL registered under a shortcode, None if there is none.
    """

    def __init__(self):
        self.urls: list[str] = []

    def __len__(self) -> int:
        return len(self.urls)

    @beartype
    def encode(self, url: str) -> str:
        """Register a URL and return its shortcode

        Every call registers the URL anew, so encoding the same URL twice
        issues two different shortcodes.

        Args:
            url (str): original URL.

        Returns:
            str: Base62 representation of the URL's registry index.

        Example:
            >>> shortener.encode('https://example.com')
            '0'
            >>> shortener.encode('https://example.org')
            '1'
        """
        index = len(self.urls)
        self.urls.append(url)
        shortcode = encode_base62(index)

        logger.debug('Encoded URL.', extra={'shortcode': shortcode, 'index': index})
        return shortcode

    @beartype
    def decode(self, code: str) -> str | None:
        """Return the URL registered under a shortcode

        Args:
            code (str): shortcode issued by `encode()`.

        Returns:
            str | None:
                The original URL. None if the code is not valid Base62, has
                leading zeros, or no URL was registered under it.

        Example:
            >>> shortener.decode('0')
            'https://example.com'
        """
        try:
            index = decode_base62(code)
        except ValueError:
            logger.debug('Rejected malformed shortcode.', extra={'shortcode': code})
            return None

        # only issued (minimal) codes resolve, '01' is not an alias of '1'
        if index >= len(self.urls) or encode_base62(index) != code:
            logger.debug('Shortcode not found.', extra={'shortcode': code, 'index': index})
            return None

        return self.urls[index]
