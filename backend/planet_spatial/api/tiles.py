"""Tile extent and tile schema endpoints.

Example:
    Get the extent of the single zoom-0 tile:
        >>> response = client.get("/tiles/0/0/0/extent")
        >>> # Returns: {"min_x": -20037508.34..., "max_x": 20037508.34...,
        >>> #           "center_x": 0.0, "width": 40075016.68..., ...}

    Describe the tile pyramid up to zoom 2:
        >>> response = client.get("/tiles/schema?max_zoom=2")
        >>> # Returns: {"name": "GlobalMercator", "srs": "EPSG:3857",
        >>> #           "resolutions": {"0": {...}, "1": {...}, "2": {...}}}
"""

import dataclasses
from typing import Any

import fastapi

from planet_spatial.api import deps
from planet_spatial.coordinates import mercator
from planet_spatial.core import config
from planet_spatial.models import extent as extent_models
from planet_spatial.models import schema as schema_models
from planet_spatial.models import tiles as tile_models

router = fastapi.APIRouter(prefix="/tiles", tags=["tiles"])

SCHEMA_NAME = "GlobalMercator"


def _extent_payload(extent: extent_models.Extent) -> dict[str, float]:
    """Serialize an extent with its derived geometry."""
    return {
        **dataclasses.asdict(extent),
        "center_x": extent.center_x,
        "center_y": extent.center_y,
        "width": extent.width,
        "height": extent.height,
        "area": extent.area,
    }


@router.get("/schema")
async def tile_schema(
    max_zoom: int | None = fastapi.Query(default=None, ge=0),  # noqa: B008
    engine: mercator.Mercator = fastapi.Depends(deps.get_engine),  # noqa: B008
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> dict[str, Any]:
    """Describe the tile pyramid served by this engine.

    Args:
        max_zoom: Highest level to include; the configured max_zoom is used
            when omitted.
        engine: Mercator engine (injected via FastAPI Depends).
        settings: Application settings (injected via FastAPI Depends).

    Returns:
        Dictionary with the schema name, SRS, world extent, tile format,
        and a resolution record per zoom level.
    """
    levels = settings.max_zoom if max_zoom is None else max_zoom
    return {
        "name": SCHEMA_NAME,
        "srs": settings.srs,
        "extent": _extent_payload(engine.world_extent()),
        "format": schema_models.MbTileFormat.PNG.value,
        "resolutions": {
            zoom: dataclasses.asdict(resolution)
            for zoom, resolution in engine.resolutions(levels).items()
        },
    }


@router.get("/{zoom}/{col}/{row}/extent")
async def tile_extent(
    zoom: int,
    col: int,
    row: int,
    engine: mercator.Mercator = fastapi.Depends(deps.get_engine),  # noqa: B008
) -> dict[str, Any]:
    """Get the meters extent of a tile.

    Args:
        zoom: Zoom level.
        col: Tile column.
        row: Tile row, counted from the bottom of the world.
        engine: Mercator engine (injected via FastAPI Depends).

    Returns:
        Dictionary with the tile index and its extent.
    """
    info = engine.tile_info(tile_models.TileIndex(col, row, zoom))
    return {
        "index": dataclasses.asdict(info.index),
        "extent": _extent_payload(info.extent),
    }
