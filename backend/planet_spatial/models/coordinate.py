"""Generic 2D coordinate used for projected meters and pixel positions."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Coordinate:
    """A coordinate pair with X and Y values.

    The meaning of the axes depends on context: projected meters, pixel
    positions, or longitude (X) and latitude (Y) in degrees.

    Attributes:
        x: Horizontal position.
        y: Vertical position.

    Example:
        >>> point = Coordinate(10.5, 20.25)
        >>> str(point)
        '(10.5, 20.25)'
    """

    x: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
