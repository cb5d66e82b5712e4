"""Spatial core for turning raster imagery into a web map tile pyramid.

This package contains the coordinate transformation and tile-addressing
engine used by the tile generation pipeline. Every conversion between
geographic degrees, EPSG:3857 (Web Mercator) meters, pixel space, and the
zoom-level resolution hierarchy goes through the Mercator engine in
planet_spatial.coordinates.mercator.

- Pure, synchronous arithmetic: no file I/O, no tile caching, no encoders
- Immutable value types (Extent, Resolution, TileIndex) safe as cache keys
- Explicit error taxonomy for invalid input (see planet_spatial.core.errors)
- A thin read-only FastAPI surface for inspecting conversions

See module sub-docstrings for details on the individual components.
"""
