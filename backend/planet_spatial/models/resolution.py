"""Per-zoom-level resolution record."""

from __future__ import annotations

import dataclasses

from planet_spatial.core import errors

DEFAULT_TILE_SIZE = 512


@dataclasses.dataclass(frozen=True)
class Resolution:
    """Associates a zoom level with its meters-per-pixel and tile size.

    Attributes:
        level: Zoom level, never negative.
        units_per_pixel: Map units (meters for EPSG:3857) per pixel.
        tile_width: Tile width in pixels.
        tile_height: Tile height in pixels.
    """

    level: int
    units_per_pixel: float
    tile_width: int = DEFAULT_TILE_SIZE
    tile_height: int = DEFAULT_TILE_SIZE

    def __post_init__(self) -> None:
        if self.level < 0:
            raise errors.RangeError(
                f"Resolution level must be non-negative, got {self.level}"
            )
