"""Error taxonomy for coordinate and tile-addressing failures.

Every error is raised synchronously where the bad input is detected and
is never retried: the operations are pure arithmetic, so the same input
always fails the same way. Each class also derives from the closest
builtin exception, so callers may catch ValueError or OverflowError.

Example:
    Handle an invalid zoom level:
        >>> from planet_spatial.coordinates.mercator import Mercator
        >>> from planet_spatial.core import errors
        >>> engine = Mercator()
        >>> try:
        ...     engine.pixel_to_meters(0, 0, -1)
        ... except errors.RangeError as e:
        ...     print(f"Bad zoom: {e}")
"""

from __future__ import annotations


class SpatialError(Exception):
    """Base class for all errors raised by the spatial core."""


class ConstructionInvariantError(SpatialError, ValueError):
    """Raised when a value type is built with min greater than max.

    Attributes:
        axis: Name of the violated axis, "X" or "Y".
    """

    def __init__(self, axis: str, message: str | None = None) -> None:
        self.axis = axis
        super().__init__(message or f"{axis} Min cannot be greater than Max")


class InvalidArgumentError(SpatialError, ValueError):
    """Raised for arguments that can never produce a meaningful result.

    Examples are NaN or infinite coordinates and non-positive tile sizes.
    """


class RangeError(SpatialError, ValueError):
    """Raised when a zoom level or tile level is negative."""


class ResolutionOverflowError(SpatialError, OverflowError):
    """Raised when 2**zoom does not fit the 32-bit tile count arithmetic."""


class WorldBoundsError(RangeError):
    """Raised in strict mode when meters fall outside the projected world."""
