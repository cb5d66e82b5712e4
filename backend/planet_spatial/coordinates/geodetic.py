"""Latitude/longitude pair with projection helpers.

Example:
    >>> from planet_spatial.coordinates.geodetic import Geodetic
    >>> sf = Geodetic(37.7749, -122.4194)
    >>> str(sf)
    '37.77490°, -122.41940°'
    >>> meters = sf.to_meters()
    >>> back = Geodetic.from_meters(meters)
"""

from __future__ import annotations

import dataclasses

from planet_spatial.coordinates import mercator
from planet_spatial.models import coordinate as coordinate_models


@dataclasses.dataclass
class Geodetic:
    """Geographic position in degrees.

    Values are not range-checked here; latitude is clamped only when the
    position is projected.

    Attributes:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
    """

    latitude: float = 0.0
    longitude: float = 0.0

    def to_meters(
        self,
        engine: mercator.Mercator | None = None,
    ) -> coordinate_models.Coordinate:
        """Project this position to Web Mercator meters.

        Args:
            engine: Engine to use; the shared default engine when omitted.

        Returns:
            Coordinate with x and y in meters.
        """
        engine = engine or mercator.get_mercator()
        return engine.lat_lon_to_meters(self.longitude, self.latitude)

    @classmethod
    def from_meters(
        cls,
        meters: coordinate_models.Coordinate,
        engine: mercator.Mercator | None = None,
    ) -> Geodetic:
        """Build a position from Web Mercator meters."""
        engine = engine or mercator.get_mercator()
        lon_lat = engine.meters_to_lat_lon(meters.x, meters.y)
        return cls(latitude=lon_lat.y, longitude=lon_lat.x)

    def __str__(self) -> str:
        return f"{self.latitude:.5f}°, {self.longitude:.5f}°"
