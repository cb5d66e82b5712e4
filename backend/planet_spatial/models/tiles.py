"""Discrete tile keys and tile descriptors.

TileIndex is the key the storage and cache layers use to look tiles up,
so equality, hashing, and ordering are all structural over
(col, row, level). Ordering is lexicographic in that order, which gives
batch processing a deterministic iteration order.

TileAddress carries only (x, y) and is meaningful only where the zoom
level is tracked by the surrounding context. Converting between the two
always names the level explicitly.

Example:
    Using tile indices as dictionary keys and sorting them:
        >>> from planet_spatial.models.tiles import TileIndex
        >>> tiles = {TileIndex(1, 2, 3): b"..."}
        >>> TileIndex(1, 2, 3) in tiles
        True
        >>> sorted([TileIndex(1, 2, 4), TileIndex(1, 2, 3)])
        [TileIndex(col=1, row=2, level=3), TileIndex(col=1, row=2, level=4)]
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from planet_spatial.models import extent as extent_models


@dataclasses.dataclass(frozen=True, order=True)
class TileIndex:
    """A tile key made of column, row, and zoom level.

    Attributes:
        col: Column index.
        row: Row index.
        level: Zoom level.
    """

    col: int
    row: int
    level: int

    @property
    def address(self) -> TileAddress:
        """The (x, y) part of this index, dropping the level."""
        return TileAddress(self.col, self.row)

    @classmethod
    def from_address(cls, address: TileAddress, level: int) -> TileIndex:
        """Combine a level-less address with an explicit level."""
        return cls(address.x, address.y, level)


@dataclasses.dataclass(frozen=True)
class TileAddress:
    """A tile position without a zoom level.

    Attributes:
        x: Tile column.
        y: Tile row.
    """

    x: int
    y: int


@dataclasses.dataclass(frozen=True)
class TilePixel:
    """A pixel within a tile; z is the zoom level."""

    x: int
    y: int
    z: int


@dataclasses.dataclass(frozen=True)
class TileInfo:
    """A tile index paired with the extent it covers.

    Attributes:
        extent: Bounds of the tile in map units.
        index: Key of the tile.
    """

    extent: extent_models.Extent
    index: TileIndex
