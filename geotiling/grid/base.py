"""
Tiling Scheme Protocol

Addressing layer between tile (x, y, level) coordinates and geographic
rectangles.
"""

from typing import Protocol

from geotiling.geodesy.cartographic import Cartographic, TileXY
from geotiling.geodesy.ellipsoid import Ellipsoid
from geotiling.geodesy.projection import GeographicProjection
from geotiling.geodesy.rectangle import Rectangle


class TilingScheme(Protocol):
    """
    Hierarchical grid of rectangular tiles over an ellipsoid

    Level 0 is the least detailed level. Tile x grows eastward from the
    west edge of the root rectangle, tile y grows southward from its north
    edge.
    """

    @property
    def ellipsoid(self) -> Ellipsoid:
        """Ellipsoid whose surface is tiled"""
        ...

    @property
    def rectangle(self) -> Rectangle:
        """Extent covered by level zero, in radians"""
        ...

    @property
    def projection(self) -> GeographicProjection:
        """Map projection derived from the ellipsoid"""
        ...

    def tile_count_x(self, level: int) -> int:
        """
        Number of tiles in the X direction at a level

        Args:
            level: Level-of-detail

        Returns:
            Tile count across
        """
        ...

    def tile_count_y(self, level: int) -> int:
        """
        Number of tiles in the Y direction at a level

        Args:
            level: Level-of-detail

        Returns:
            Tile count down
        """
        ...

    def to_native_rectangle(
        self, rectangle: Rectangle, out: Rectangle | None = None
    ) -> Rectangle:
        """
        Convert a radian rectangle to the scheme's native (degree) units

        Args:
            rectangle: Rectangle in radians
            out: Optional rectangle to write into

        Returns:
            ``out`` if given, otherwise a new rectangle
        """
        ...

    def tile_to_rectangle(
        self, x: int, y: int, level: int, out: Rectangle | None = None
    ) -> Rectangle:
        """
        Geographic bounds of a tile, in radians

        Args:
            x: Tile column
            y: Tile row
            level: Level-of-detail
            out: Optional rectangle to write into

        Returns:
            ``out`` if given, otherwise a new rectangle
        """
        ...

    def tile_to_native_rectangle(
        self, x: int, y: int, level: int, out: Rectangle | None = None
    ) -> Rectangle:
        """Geographic bounds of a tile, in degrees"""
        ...

    def position_to_tile(
        self, position: Cartographic, level: int, out: TileXY | None = None
    ) -> TileXY | None:
        """
        Tile containing a position

        Args:
            position: Position in radians
            level: Level-of-detail
            out: Optional pair to write into

        Returns:
            Tile coordinates, or None when the position lies outside the
            root rectangle
        """
        ...
