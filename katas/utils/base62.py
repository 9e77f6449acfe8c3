"""Base62 codec utility

This module converts non-negative integers to and from their minimal Base62
representation. It backs the sequential `UrlShortener`, where the shortcode
of a URL is simply its registry index written in Base62.

Alphabet (in digit order): 0-9, a-z, A-Z.

Functions:
    encode_base62(number) -> str
        Encode a non-negative integer, most significant digit first.
    decode_base62(code) -> int
        Decode a Base62 string back into its integer value.

Example:
    >>> from katas.utils import encode_base62, decode_base62
    >>> encode_base62(0)
    '0'
    >>> encode_base62(125)
    '21'
    >>> decode_base62('21')
    125
"""

from katas.constants import BASE62_ALPHABET


BASE = len(BASE62_ALPHABET)
DIGITS = {char: value for value, char in enumerate(BASE62_ALPHABET)}


def encode_base62(number: int) -> str:
    """Encode a non-negative integer into a minimal Base62 string.

    Zero encodes to the first alphabet symbol; no other value has leading zeros.

    Args:
        number (int):
            Value to encode.

    Returns:
        str: Base62 digits, most significant first.

    Raises:
        TypeError: If `number` is not an integer.
        ValueError: If `number` is negative.

    Example:
        >>> encode_base62(61)
        'Z'
        >>> encode_base62(62)
        '10'
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f'Number must be of type integer (given type: {type(number)}).')
    if number < 0:
        raise ValueError(f'Number must be a non-negative integer (given value: {number}).')

    digits = []
    while True:
        number, remainder = divmod(number, BASE)
        digits.append(BASE62_ALPHABET[remainder])
        if number == 0:
            break

    return ''.join(reversed(digits))


def decode_base62(code: str) -> int:
    """Decode a Base62 string into its integer value.

    Args:
        code (str):
            Base62 digits, most significant first.

    Returns:
        int: The decoded value.

    Raises:
        TypeError: If `code` is not a string.
        ValueError: If `code` is empty or contains symbols outside the alphabet.

    Example:
        >>> decode_base62('10')
        62
    """
    if not isinstance(code, str):
        raise TypeError(f'Code must be of type string (given type: {type(code)}).')
    if not code:
        raise ValueError(f'Code must be a non-empty string (given value: {code!r}).')

    number = 0
    for char in code:
        try:
            number = number * BASE + DIGITS[char]
        except KeyError:
            raise ValueError(f'Code contains a non-Base62 symbol {char!r} (given value: {code!r}).') from None

    return number
