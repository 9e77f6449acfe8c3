"""Unit tests for the value objects in katas.models.

Test coverage includes:

1. Rectangle
   - Ensures fields are kept and area() multiplies them.
   - Ensures instances are immutable.

2. CompassPoint
   - Ensures to_dict() exposes abbreviation and azimuth.
"""

import dataclasses

import pytest

from katas.models import Rectangle, CompassPoint


# -------------------------------
# 1. Rectangle
# -------------------------------


def test_rectangle_fields():
    """Ensure width and height are stored as given."""
    r = Rectangle(10, 20)
    assert r.width == 10
    assert r.height == 20


@pytest.mark.parametrize(
    'width, height, expected',
    [
        (10, 20, 200),
        (5, 5, 25),
        (0, 7, 0),
        (1.5, 4, 6.0),
    ],
)
def test_rectangle_area(width, height, expected):
    """Ensure area() is width times height."""
    assert Rectangle(width, height).area() == expected


def test_rectangle_is_immutable():
    """Ensure assigning to a field raises FrozenInstanceError."""
    r = Rectangle(10, 20)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.width = 30


# -------------------------------
# 2. CompassPoint
# -------------------------------


def test_compass_point_to_dict():
    """Ensure to_dict() returns abbreviation and azimuth."""
    point = CompassPoint(abbreviation='NNE', azimuth=22.5)
    assert point.to_dict() == {'abbreviation': 'NNE', 'azimuth': 22.5}
