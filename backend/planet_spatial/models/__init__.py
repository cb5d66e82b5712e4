"""Value types shared by the projection engine and tile consumers.

Submodules:
    - coordinate: Mutable 2D coordinate used for meters and pixels.
    - extent: Validated axis-aligned rectangle with derived geometry.
    - resolution: Per-zoom-level meters-per-pixel record.
    - tiles: Tile keys (TileIndex, TileAddress) and tile descriptors.
    - schema: Protocols for tile schemas and tile sources.
"""
