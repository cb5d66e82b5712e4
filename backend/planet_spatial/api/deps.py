"""Shared FastAPI dependencies."""

import fastapi

from planet_spatial.coordinates import mercator
from planet_spatial.core import config


def get_engine(
    tile_size: int | None = fastapi.Query(default=None, gt=0),  # noqa: B008
    settings: config.Settings = fastapi.Depends(config.get_settings),  # noqa: B008
) -> mercator.Mercator:
    """Resolve the Mercator engine for a request.

    Args:
        tile_size: Optional tile size query parameter; the configured
            tile size is used when omitted.
        settings: Application settings (injected via FastAPI Depends).

    Returns:
        Shared Mercator engine for the tile size and strictness.
    """
    return mercator.get_mercator(
        tile_size or settings.tile_size,
        settings.strict_bounds,
    )
