from dataclasses import dataclass

from katas.types import Number


@dataclass(frozen=True)
class Rectangle:
    """Represent a rectangle by its two side lengths.

    Attributes:
        width (int | float):
            Horizontal side length.
        height (int | float):
            Vertical side length.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width
        10
        >>> r.height
        20
        >>> r.area()
        200
    """

    width: Number
    height: Number

    def area(self) -> Number:
        return self.width * self.height
