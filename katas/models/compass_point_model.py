from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class CompassPoint:
    """Represent one of the 32 points of the compass rose.

    Attributes:
        abbreviation (str):
            Point name abbreviation, e.g. 'N', 'NbE', 'NNE'.
        azimuth (float):
            Heading in degrees clockwise from north.

    Example:
        >>> point = CompassPoint(abbreviation='NbE', azimuth=11.25)
        >>> point.to_dict()
        {'abbreviation': 'NbE', 'azimuth': 11.25}
    """

    abbreviation: str
    azimuth: float

    def to_dict(self) -> dict[str, str | float]:
        return asdict(self)
