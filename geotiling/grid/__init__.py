"""
GeoTiling Grid Module

Tiling schemes mapping tile coordinates to geographic rectangles.
"""

from geotiling.grid.base import TilingScheme
from geotiling.grid.geographic import GeographicTilingScheme
from geotiling.grid.options import MatrixGrid, StandardGrid, TilingSchemeOptions
from geotiling.grid.tile_matrix import LevelOfDetail, Origin, SpatialReference, TileInfo
from geotiling.grid.vectorized import level_rectangles, positions_to_tiles, tiles_in_rectangle

__all__ = [
    "GeographicTilingScheme",
    "LevelOfDetail",
    "MatrixGrid",
    "Origin",
    "SpatialReference",
    "StandardGrid",
    "TileInfo",
    "TilingScheme",
    "TilingSchemeOptions",
    "level_rectangles",
    "positions_to_tiles",
    "tiles_in_rectangle",
]
