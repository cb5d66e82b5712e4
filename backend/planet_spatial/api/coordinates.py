"""Coordinate conversion endpoints.

All meters are EPSG:3857 (Web Mercator). Pixel coordinates use the
engine's bottom-left origin.

Example:
    Project a location to meters:
        >>> response = client.get("/coordinates/meters?lon=180&lat=0")
        >>> # Returns: {"x": 20037508.342789244, "y": 0.0}

    Convert meters to pixels at zoom 1:
        >>> response = client.get("/coordinates/pixels?mx=0&my=0&zoom=1")
        >>> # Returns: {"x": 512.0, "y": 512.0}
"""

import dataclasses
from typing import Any

import fastapi

from planet_spatial.api import deps
from planet_spatial.coordinates import geodetic, mercator
from planet_spatial.models import coordinate as coordinate_models

router = fastapi.APIRouter(prefix="/coordinates", tags=["coordinates"])


@router.get("/meters")
async def lat_lon_to_meters(
    lon: float,
    lat: float,
    engine: mercator.Mercator = fastapi.Depends(deps.get_engine),  # noqa: B008
) -> dict[str, float]:
    """Project longitude/latitude degrees to meters.

    Latitude is clamped to the Web Mercator band before projecting.

    Args:
        lon: Longitude in degrees.
        lat: Latitude in degrees.
        engine: Mercator engine (injected via FastAPI Depends).

    Returns:
        Dictionary with "x" and "y" in meters.
    """
    return dataclasses.asdict(engine.lat_lon_to_meters(lon, lat))


@router.get("/geodetic")
async def meters_to_geodetic(
    mx: float,
    my: float,
    engine: mercator.Mercator = fastapi.Depends(deps.get_engine),  # noqa: B008
) -> dict[str, Any]:
    """Convert meters to a latitude/longitude position.

    Args:
        mx: X in meters.
        my: Y in meters.
        engine: Mercator engine (injected via FastAPI Depends).

    Returns:
        Dictionary with "latitude", "longitude", and the canonical "text"
        rendering of the position.
    """
    position = geodetic.Geodetic.from_meters(
        coordinate_models.Coordinate(mx, my),
        engine,
    )
    return {**dataclasses.asdict(position), "text": str(position)}


@router.get("/pixels")
async def meters_to_pixels(
    mx: float,
    my: float,
    zoom: int,
    engine: mercator.Mercator = fastapi.Depends(deps.get_engine),  # noqa: B008
) -> dict[str, float]:
    """Convert meters to pixel coordinates at a zoom level.

    Raises:
        InvalidArgumentError: If mx or my is not finite (served as 422).
        RangeError: If zoom is negative (served as 422).
        ResolutionOverflowError: If zoom is too large (served as 422).
    """
    return dataclasses.asdict(engine.meters_to_pixels(mx, my, zoom))


@router.get("/meters-from-pixels")
async def pixel_to_meters(
    px: float,
    py: float,
    zoom: int,
    engine: mercator.Mercator = fastapi.Depends(deps.get_engine),  # noqa: B008
) -> dict[str, float]:
    """Convert pixel coordinates at a zoom level to meters."""
    return dataclasses.asdict(engine.pixel_to_meters(px, py, zoom))
