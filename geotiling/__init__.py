"""
GeoTiling - Tile addressing for geographic imagery and terrain pyramids

Maps tile (x, y, level) coordinates to longitude/latitude rectangles and
back, either by power-of-two subdivision of a root rectangle or by an
explicit CGCS2000 tile matrix.

Quick Start:
    >>> import geotiling as gt
    >>>
    >>> scheme = gt.GeographicTilingScheme()
    >>> scheme.tile_to_native_rectangle(1, 0, 0)
    >>> scheme.position_to_tile(gt.Cartographic.from_degrees(127.05, 37.55), 5)
    >>>
    >>> # Tile matrix published by a map service
    >>> info = gt.TileInfo.from_json("tile_info.json")
    >>> scheme = gt.GeographicTilingScheme(tile_info=info)
"""

from geotiling.core import (
    LevelNotFoundError,
    TilingError,
    ValidationError,
)
from geotiling.geodesy import (
    Cartographic,
    Ellipsoid,
    GeographicProjection,
    Rectangle,
    TileXY,
)
from geotiling.grid import (
    GeographicTilingScheme,
    LevelOfDetail,
    Origin,
    SpatialReference,
    TileInfo,
    TilingScheme,
    TilingSchemeOptions,
    level_rectangles,
    positions_to_tiles,
    tiles_in_rectangle,
)

__version__ = "0.1.0"

__all__ = [
    "Cartographic",
    "Ellipsoid",
    "GeographicProjection",
    "GeographicTilingScheme",
    "LevelNotFoundError",
    "LevelOfDetail",
    "Origin",
    "Rectangle",
    "SpatialReference",
    "TileInfo",
    "TileXY",
    "TilingError",
    "TilingScheme",
    "TilingSchemeOptions",
    "ValidationError",
    "__version__",
    "level_rectangles",
    "positions_to_tiles",
    "tiles_in_rectangle",
]
