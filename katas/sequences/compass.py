"""32-point compass rose

See https://en.wikipedia.org/wiki/Points_of_the_compass#32_cardinal_points

Each quadrant starts with its cardinal point and is followed by seven points
named after the two cardinal letters bounding the quadrant. For bounding
letters (f, t) the seven names are:

    fbt, fft, ftbf, ft, ftbt, tft, tbf

Going clockwise, the N and S quadrants list them in this order, while the E
and W quadrants (whose names start from the following cardinal point) list
them reversed.

Functions:
    iter_compass_points() -> Iterator[CompassPoint]
    create_compass_points() -> list[CompassPoint]

Example:
    >>> points = create_compass_points()
    >>> points[1]
    CompassPoint(abbreviation='NbE', azimuth=11.25)
    >>> points[-1]
    CompassPoint(abbreviation='NbW', azimuth=348.75)
"""

from collections.abc import Iterator

from katas.models import CompassPoint
from katas.constants import COMPASS_STEP_DEGREES


# (cardinal point, bounding letters, listed reversed)
QUADRANTS = (
    ('N', ('N', 'E'), False),
    ('E', ('S', 'E'), True),
    ('S', ('S', 'W'), False),
    ('W', ('N', 'W'), True),
)


def quadrant_names(f: str, t: str, reverse: bool = False) -> list[str]:
    names = [f'{f}b{t}', f'{f}{f}{t}', f'{f}{t}b{f}', f'{f}{t}', f'{f}{t}b{t}', f'{t}{f}{t}', f'{t}b{f}']
    return names[::-1] if reverse else names


def iter_compass_points() -> Iterator[CompassPoint]:
    index = 0
    for cardinal, (f, t), reverse in QUADRANTS:
        for abbreviation in [cardinal, *quadrant_names(f, t, reverse)]:
            yield CompassPoint(abbreviation=abbreviation, azimuth=index * COMPASS_STEP_DEGREES)
            index += 1


def create_compass_points() -> list[CompassPoint]:
    """Return the 32 compass points with their headings

    Returns:
        list[CompassPoint]:
            Points clockwise from north, azimuth increasing by 11.25 degrees.
    """
    return list(iter_compass_points())
