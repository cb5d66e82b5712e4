"""Spherical Mercator (EPSG:3857) projection and tile-addressing engine.

This module converts between geographic degrees, projected meters, pixel
coordinates, and the zoom-level resolution hierarchy of a tile pyramid.
One engine is built per tile size; its derived constants are fixed at
construction, so a single instance can be shared by any number of
threads without locking.

Pixel space has its origin at the bottom-left corner of the projected
world (-OriginShift, -OriginShift), and Y grows northwards.

Example:
    Convert a location to meters and then to pixels at zoom 10:
        >>> from planet_spatial.coordinates.mercator import Mercator
        >>> engine = Mercator(256)
        >>> meters = engine.lat_lon_to_meters(-122.4194, 37.7749)
        >>> pixels = engine.meters_to_pixels(meters.x, meters.y, 10)

    Find the tile that contains a location:
        >>> index = engine.meters_to_tile(meters.x, meters.y, 10)
        >>> engine.tile_extent(index).contains(meters.x, meters.y)
        True
"""

from __future__ import annotations

import functools
import logging
import math

from planet_spatial.core import errors
from planet_spatial.models import coordinate as coordinate_models
from planet_spatial.models import extent as extent_models
from planet_spatial.models import resolution as resolution_models
from planet_spatial.models import tiles as tile_models

logger = logging.getLogger(__name__)

EARTH_RADIUS = 6378137.0
MAX_LATITUDE = 85.05112878
MAX_TILE_COUNT = 2**31 - 1
BOUNDS_TOLERANCE = 1e-9


class Mercator:
    """Spherical Mercator engine for one tile size.

    Attributes:
        tile_size: Tile edge length in pixels.
        initial_resolution: Meters per pixel at zoom 0,
            2 * pi * EARTH_RADIUS / tile_size.
        origin_shift: Half the projected world circumference in meters,
            pi * EARTH_RADIUS.
        strict: When True, pixel/meter conversions reject meters outside
            [-origin_shift, origin_shift] with WorldBoundsError.

    Raises:
        InvalidArgumentError: If tile_size is not a positive int.
    """

    __slots__ = ("tile_size", "initial_resolution", "origin_shift", "strict")

    def __init__(self, tile_size: int = 512, *, strict: bool = False) -> None:
        if (
            not isinstance(tile_size, int)
            or isinstance(tile_size, bool)
            or tile_size <= 0
        ):
            raise errors.InvalidArgumentError(
                f"Tile size must be a positive int, got {tile_size!r}"
            )
        self.tile_size = tile_size
        self.initial_resolution = 2 * math.pi * EARTH_RADIUS / tile_size
        self.origin_shift = 2 * math.pi * EARTH_RADIUS / 2.0
        self.strict = strict
        logger.debug(
            "Mercator engine ready: tile_size=%d resolution=%.6f strict=%s",
            tile_size,
            self.initial_resolution,
            strict,
        )

    def __repr__(self) -> str:
        return f"Mercator(tile_size={self.tile_size}, strict={self.strict})"

    def lat_lon_to_meters(
        self,
        lon: float,
        lat: float,
    ) -> coordinate_models.Coordinate:
        """Convert longitude/latitude in degrees to Mercator meters.

        Latitude is clamped to [-MAX_LATITUDE, MAX_LATITUDE] first, since the
        poles project to infinity. Longitude is passed through as is.

        Args:
            lon: Longitude in degrees.
            lat: Latitude in degrees.

        Returns:
            Coordinate with x and y in meters.
        """
        lat = max(min(lat, MAX_LATITUDE), -MAX_LATITUDE)

        mx = lon * self.origin_shift / 180.0
        my = math.log(math.tan((90.0 + lat) * math.pi / 360.0))
        my = my / (math.pi / 180.0)
        my = my * self.origin_shift / 180.0

        return coordinate_models.Coordinate(mx, my)

    def meters_to_lat_lon(
        self,
        mx: float,
        my: float,
    ) -> coordinate_models.Coordinate:
        """Convert Mercator meters to degrees.

        Args:
            mx: X in meters.
            my: Y in meters.

        Returns:
            Coordinate with longitude as x and latitude as y, in degrees.
        """
        lon = (mx / self.origin_shift) * 180.0
        lat = (my / self.origin_shift) * 180.0
        lat = 180.0 / math.pi * (
            2 * math.atan(math.exp(lat * math.pi / 180.0)) - math.pi / 2.0
        )

        return coordinate_models.Coordinate(lon, lat)

    def resolution(self, zoom: int) -> float:
        """Meters per pixel at a zoom level.

        Args:
            zoom: Zoom level.

        Returns:
            initial_resolution / 2**zoom.

        Raises:
            InvalidArgumentError: If zoom is not an int.
            RangeError: If zoom is negative.
            ResolutionOverflowError: If 2**zoom exceeds the signed 32-bit
                tile count range (zoom > 30).
        """
        return self.initial_resolution / _tile_count(zoom)

    def resolution_at(self, zoom: int) -> resolution_models.Resolution:
        """Resolution record for a zoom level, sized to this engine's tiles."""
        return resolution_models.Resolution(
            level=zoom,
            units_per_pixel=self.resolution(zoom),
            tile_width=self.tile_size,
            tile_height=self.tile_size,
        )

    def resolutions(
        self,
        max_zoom: int,
    ) -> dict[int, resolution_models.Resolution]:
        """Resolution table for levels 0 through max_zoom inclusive."""
        _tile_count(max_zoom)
        return {zoom: self.resolution_at(zoom) for zoom in range(max_zoom + 1)}

    def world_extent(self) -> extent_models.Extent:
        """Bounds of the projected world in meters."""
        return extent_models.Extent(
            -self.origin_shift,
            -self.origin_shift,
            self.origin_shift,
            self.origin_shift,
        )

    def pixel_to_meters(
        self,
        px: float,
        py: float,
        zoom: int,
    ) -> coordinate_models.Coordinate:
        """Convert pixel coordinates at a zoom level to Mercator meters.

        Args:
            px: X in pixels.
            py: Y in pixels.
            zoom: Zoom level.

        Returns:
            Coordinate with x and y in meters.

        Raises:
            RangeError: If zoom is negative.
            ResolutionOverflowError: If zoom is too large.
            WorldBoundsError: In strict mode, if the result lies outside the
                projected world.
            InvalidArgumentError: In strict mode, if the result is not finite.
        """
        resolution = self.resolution(zoom)
        mx = px * resolution - self.origin_shift
        my = py * resolution - self.origin_shift
        if self.strict:
            self._check_bounds(mx, my)
        return coordinate_models.Coordinate(mx, my)

    def meters_to_pixels(
        self,
        mx: float,
        my: float,
        zoom: int,
    ) -> coordinate_models.Coordinate:
        """Convert Mercator meters to pixel coordinates at a zoom level.

        Args:
            mx: X in meters.
            my: Y in meters.
            zoom: Zoom level.

        Returns:
            Coordinate with x and y in pixels.

        Raises:
            InvalidArgumentError: If mx or my is NaN or infinite.
            RangeError: If zoom is negative.
            ResolutionOverflowError: If zoom is too large.
            WorldBoundsError: In strict mode, if the meters lie outside the
                projected world.
        """
        if not math.isfinite(mx) or not math.isfinite(my):
            raise errors.InvalidArgumentError(
                f"Meters must be finite, got ({mx}, {my})"
            )
        resolution = self.resolution(zoom)
        if self.strict:
            self._check_bounds(mx, my)
        return coordinate_models.Coordinate(
            (mx + self.origin_shift) / resolution,
            (my + self.origin_shift) / resolution,
        )

    def pixels_to_tile(
        self,
        px: float,
        py: float,
        zoom: int,
    ) -> tile_models.TileIndex:
        """Index of the tile containing a pixel at a zoom level.

        Raises:
            InvalidArgumentError: If px or py is NaN or infinite.
            RangeError: If zoom is negative.
            ResolutionOverflowError: If zoom is too large.
        """
        if not math.isfinite(px) or not math.isfinite(py):
            raise errors.InvalidArgumentError(
                f"Pixels must be finite, got ({px}, {py})"
            )
        _tile_count(zoom)
        return tile_models.TileIndex(
            math.floor(px / self.tile_size),
            math.floor(py / self.tile_size),
            zoom,
        )

    def meters_to_tile(
        self,
        mx: float,
        my: float,
        zoom: int,
    ) -> tile_models.TileIndex:
        """Index of the tile containing a point in meters at a zoom level."""
        pixels = self.meters_to_pixels(mx, my, zoom)
        return self.pixels_to_tile(pixels.x, pixels.y, zoom)

    def tile_extent(self, index: tile_models.TileIndex) -> extent_models.Extent:
        """Bounds of a tile in meters."""
        size = self.tile_size
        low = self.pixel_to_meters(index.col * size, index.row * size, index.level)
        high = self.pixel_to_meters(
            (index.col + 1) * size,
            (index.row + 1) * size,
            index.level,
        )
        return extent_models.Extent(low.x, low.y, high.x, high.y)

    def tile_info(self, index: tile_models.TileIndex) -> tile_models.TileInfo:
        """A tile's index together with its extent in meters."""
        return tile_models.TileInfo(extent=self.tile_extent(index), index=index)

    def _check_bounds(self, mx: float, my: float) -> None:
        if not math.isfinite(mx) or not math.isfinite(my):
            raise errors.InvalidArgumentError(
                f"Meters must be finite, got ({mx}, {my})"
            )
        limit = self.origin_shift * (1 + BOUNDS_TOLERANCE)
        if abs(mx) > limit or abs(my) > limit:
            raise errors.WorldBoundsError(
                f"Meters ({mx}, {my}) lie outside ±{self.origin_shift}"
            )


def _tile_count(zoom: int) -> int:
    """Number of tiles per axis at a zoom level, validating the zoom."""
    if not isinstance(zoom, int) or isinstance(zoom, bool):
        raise errors.InvalidArgumentError(f"Zoom level must be an int, got {zoom!r}")
    if zoom < 0:
        raise errors.RangeError(f"Zoom level must be non-negative, got {zoom}")
    tiles = 1 << zoom
    if tiles > MAX_TILE_COUNT:
        raise errors.ResolutionOverflowError(
            f"Zoom level {zoom} overflows the tile count range"
        )
    return tiles


@functools.lru_cache
def get_mercator(tile_size: int = 512, strict: bool = False) -> Mercator:
    """Shared engine for a tile size.

    Engines hold only immutable constants, so one cached instance per
    (tile_size, strict) pair is safe to share across threads.

    Args:
        tile_size: Tile edge length in pixels.
        strict: Whether the engine enforces world bounds.

    Returns:
        The cached Mercator engine.
    """
    return Mercator(tile_size, strict=strict)
