"""Unit tests for the UrlShortener in shortener.py.

Test coverage includes:

1. Encoding
   - Ensures shortcodes are the Base62 form of sequential registry indexes.
   - Ensures encoding the same URL twice issues two shortcodes.

2. Decoding
   - Ensures decode(encode(url)) returns the original URL.
   - Ensures unknown, malformed or non-minimal shortcodes return None.

3. Instance isolation and logging
"""

import logging

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from katas.puzzles.shortener import UrlShortener


# -------------------------------
# 1. Encoding
# -------------------------------


def test_encode_issues_sequential_shortcodes(shortener):
    """Ensure the n-th URL gets the Base62 form of n."""
    codes = [shortener.encode(f'https://example.com/{i}') for i in range(64)]

    assert codes[:3] == ['0', '1', '2']
    assert codes[10] == 'a'
    assert codes[36] == 'A'
    assert codes[61] == 'Z'
    assert codes[62] == '10'
    assert codes[63] == '11'
    assert len(shortener) == 64


def test_encode_same_url_twice(shortener):
    """Ensure every call registers the URL anew."""
    first = shortener.encode('https://example.com')
    second = shortener.encode('https://example.com')

    assert first != second
    assert shortener.decode(first) == shortener.decode(second) == 'https://example.com'


def test_encode_with_invalid_type(shortener):
    """Ensure non-string URLs raise BeartypeCallHintParamViolation."""
    with pytest.raises(BeartypeCallHintParamViolation):
        shortener.encode(None)


# -------------------------------
# 2. Decoding
# -------------------------------


@pytest.mark.parametrize(
    'url',
    [
        'https://en.wikipedia.org/wiki/URL_shortening',
        'https://www.example.com/a/b/c?query=1&other=2#fragment',
        '',
        'not even a url',
    ],
)
def test_decode_round_trip(shortener, url):
    """Ensure decode() returns the URL passed to encode()."""
    assert shortener.decode(shortener.encode(url)) == url


def test_decode_many_urls(shortener):
    """Ensure every issued shortcode resolves to its own URL."""
    urls = [f'https://example.com/page/{i}' for i in range(500)]
    codes = [shortener.encode(url) for url in urls]
    assert [shortener.decode(code) for code in codes] == urls


@pytest.mark.parametrize('code', ['0', '1', 'zz'])
def test_decode_unknown_shortcode(code):
    """Ensure shortcodes beyond the registry return None."""
    shortener = UrlShortener()
    if code != '0':
        shortener.encode('https://example.com')
    assert shortener.decode(code) is None


@pytest.mark.parametrize('code', ['', '-1', 'a b', 'ü', '00', '01', '001'])
def test_decode_malformed_shortcode(shortener, code):
    """Ensure non-Base62 or non-minimal shortcodes return None."""
    shortener.encode('https://example.com')
    shortener.encode('https://example.org')
    assert shortener.decode(code) is None


# -------------------------------
# 3. Instance isolation and logging
# -------------------------------


def test_instances_do_not_share_registries():
    """Ensure each shortener has its own registry."""
    first, second = UrlShortener(), UrlShortener()
    code = first.encode('https://example.com')

    assert second.decode(code) is None
    assert len(second) == 0


def test_encode_logs_shortcode(shortener, caplog):
    """Ensure encode() logs the issued shortcode as an extra field."""
    caplog.set_level(logging.DEBUG, logger='katas.puzzles.shortener')

    shortener.encode('https://example.com')

    record = caplog.records[-1]
    assert record.getMessage() == 'Encoded URL.'
    assert record.shortcode == '0'
    assert record.index == 0
