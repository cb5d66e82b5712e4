"""Protocols for tile schemas and tile sources.

The spatial core populates these interfaces (extents, resolution tables)
but does not implement them; concrete schemas and sources live with the
tile generation pipeline and the storage layer.

Example:
    Populate a schema's resolution table from an engine:
        >>> from planet_spatial.coordinates import mercator
        >>> engine = mercator.Mercator(256)
        >>> resolutions = engine.resolutions(18)
        >>> resolutions[0].units_per_pixel
        156543.03392804097
"""

from __future__ import annotations

import dataclasses
import enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from planet_spatial.models import extent as extent_models
    from planet_spatial.models import resolution as resolution_models
    from planet_spatial.models import tiles as tile_models


class MbTileFormat(enum.StrEnum):
    """Image or data format of the tiles in an MBTiles set."""

    PNG = "png"
    JPG = "jpg"
    JPEG = "jpg"
    WEBP = "webp"
    PBF = "pbf"


class MbTileType(enum.StrEnum):
    """Role of an MBTiles set in a map."""

    NONE = "none"
    BASELAYER = "baselayer"
    OVERLAY = "overlay"


@dataclasses.dataclass(frozen=True)
class Attribution:
    """Attribution text and link for a tile source."""

    name: str = ""
    url: str = ""


class TileSchema(Protocol):
    """Describes how a tile pyramid is laid out.

    Attributes:
        name: Human-readable schema name.
        srs: Spatial reference identifier, e.g. "EPSG:3857".
        extent: Bounds of the pyramid in map units.
        format: Tile format identifier, e.g. "png".
        resolutions: Mapping from zoom level to its Resolution.
    """

    @property
    def name(self) -> str: ...

    @property
    def srs(self) -> str: ...

    @property
    def extent(self) -> extent_models.Extent: ...

    @property
    def format(self) -> str: ...

    @property
    def resolutions(self) -> Mapping[int, resolution_models.Resolution]: ...


class TileSource(Protocol):
    """A named provider of tiles that follow a schema."""

    @property
    def name(self) -> str: ...

    @property
    def schema(self) -> TileSchema: ...

    @property
    def attribution(self) -> Attribution: ...


class LocalTileSource(TileSource, Protocol):
    """A tile source that can return tile bytes directly."""

    async def get_tile(self, tile_info: tile_models.TileInfo) -> bytes | None: ...
