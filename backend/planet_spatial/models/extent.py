"""Axis-aligned bounding rectangle with validated bounds.

The Extent is built once and never mutated. Derived geometry (center,
width, height, area) is computed on every access rather than stored.

Example:
    Creating an extent and reading its geometry:
        >>> from planet_spatial.models.extent import Extent
        >>> extent = Extent(10, 20, 30, 40)
        >>> extent.center_x, extent.width, extent.area
        (20.0, 20, 400)

    Invalid bounds are rejected at construction:
        >>> Extent(30, 20, 10, 40)
        Traceback (most recent call last):
        ...
        ConstructionInvariantError: X Min cannot be greater than Max
"""

from __future__ import annotations

import dataclasses

from planet_spatial.core import errors

BBox = tuple[float, float, float, float]


@dataclasses.dataclass(frozen=True)
class Extent:
    """Rectangle described by its minimum and maximum X and Y.

    Attributes:
        min_x: Minimum X coordinate.
        min_y: Minimum Y coordinate.
        max_x: Maximum X coordinate.
        max_y: Maximum Y coordinate.

    Raises:
        ConstructionInvariantError: If min_x > max_x (axis "X") or
            min_y > max_y (axis "Y").
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        if self.min_x > self.max_x:
            raise errors.ConstructionInvariantError("X")
        if self.min_y > self.max_y:
            raise errors.ConstructionInvariantError("Y")

    @classmethod
    def from_bbox(cls, bbox: BBox) -> Extent:
        """Build an extent from a (minx, miny, maxx, maxy) tuple."""
        return cls(*bbox)

    @property
    def center_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def center_y(self) -> float:
        return (self.min_y + self.max_y) / 2

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies inside or on the boundary of the extent."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def to_bbox(self) -> BBox:
        """Return the bounds as a (minx, miny, maxx, maxy) tuple."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
