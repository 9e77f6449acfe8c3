"""Unit tests for the Base62 codec in base62.py.

Test coverage includes:

1. encode_base62()
   - Ensures known values encode to minimal Base62 strings.
   - Ensures invalid inputs raise TypeError or ValueError.

2. decode_base62()
   - Ensures known strings decode correctly and invert encode_base62().
   - Ensures invalid inputs raise TypeError or ValueError.
"""

import pytest

from katas.utils.base62 import encode_base62, decode_base62


# -------------------------------
# 1. encode_base62()
# -------------------------------


@pytest.mark.parametrize(
    'number, expected',
    [
        (0, '0'),
        (9, '9'),
        (10, 'a'),
        (35, 'z'),
        (36, 'A'),
        (61, 'Z'),
        (62, '10'),
        (125, '21'),
        (3843, 'ZZ'),
        (3844, '100'),
    ],
)
def test_encode_base62(number, expected):
    """Ensure integers encode most significant digit first, without padding."""
    assert encode_base62(number) == expected


@pytest.mark.parametrize(
    'number, error',
    [
        (-1, ValueError),
        ('12', TypeError),
        (1.5, TypeError),
        (True, TypeError),
        (None, TypeError),
    ],
)
def test_encode_base62_with_invalid_input(number, error):
    """Ensure invalid numbers raise descriptive errors."""
    with pytest.raises(error):
        encode_base62(number)


# -------------------------------
# 2. decode_base62()
# -------------------------------


@pytest.mark.parametrize(
    'code, expected',
    [
        ('0', 0),
        ('Z', 61),
        ('10', 62),
        ('21', 125),
        ('100', 3844),
        ('007', 7),
    ],
)
def test_decode_base62(code, expected):
    """Ensure Base62 strings decode to their integer values."""
    assert decode_base62(code) == expected


@pytest.mark.parametrize('number', [0, 1, 61, 62, 12345, 2**40])
def test_decode_inverts_encode(number):
    """Ensure decode_base62() reverses encode_base62()."""
    assert decode_base62(encode_base62(number)) == number


@pytest.mark.parametrize(
    'code, error',
    [
        ('', ValueError),
        ('ab-c', ValueError),
        ('+', ValueError),
        (12, TypeError),
        (None, TypeError),
    ],
)
def test_decode_base62_with_invalid_input(code, error):
    """Ensure invalid codes raise descriptive errors."""
    with pytest.raises(error):
        decode_base62(code)
