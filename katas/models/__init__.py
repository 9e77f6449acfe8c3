from katas.models.rectangle_model import Rectangle
from katas.models.compass_point_model import CompassPoint


__all__ = [
    'Rectangle',
    'CompassPoint',
]
