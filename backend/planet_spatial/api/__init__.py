"""API router subpackage for the spatial core.

This package exposes read-only JSON endpoints over the Mercator engine so
that conversions can be inspected from a browser or a tile pipeline
without importing the library. Each module exposes its own APIRouter for
composition in the application's main FastAPI instance.

Submodules:
    - deps: Shared dependencies (engine resolution from settings).
    - coordinates: Degree, meter, and pixel conversions.
    - tiles: Tile extents and the tile schema description.
"""
