"""
GeographicTilingScheme Implementation

Tiling scheme for geometry referenced to a geographic (plate carrée)
projection, where longitude and latitude map directly to X and Y.
"""

import logging

from geotiling.core.exceptions import ValidationError
from geotiling.core.math import (
    TWO_PI,
    round_half_away,
    tile_index,
    to_degrees,
    to_radians,
)
from geotiling.geodesy.cartographic import Cartographic, TileXY
from geotiling.geodesy.ellipsoid import Ellipsoid
from geotiling.geodesy.projection import GeographicProjection
from geotiling.geodesy.rectangle import Rectangle
from geotiling.grid.options import (
    MatrixGrid,
    StandardGrid,
    TilingSchemeOptions,
    resolve_options,
)

logger = logging.getLogger(__name__)

# Angular spans tiled by a tile matrix, in degrees
_MATRIX_SPAN_X = 360.0
_MATRIX_SPAN_Y = 180.0


class GeographicTilingScheme:
    """
    Geographic tiling scheme with two grid modes

    - Standard: the root rectangle is split into
      ``number_of_level_zero_tiles_x`` x ``number_of_level_zero_tiles_y``
      tiles at level 0 (2x1 by default) and each level doubles both counts.
    - Matrix: given a CGCS2000 (wkid 4490) tile matrix, tile bounds come from
      the matrix origin and the resolution of each level.

    The mode is chosen once at construction; instances are immutable and
    safe to share between threads (as long as ``out`` buffers are not).

    Examples:
        >>> scheme = GeographicTilingScheme()
        >>> scheme.tile_count_x(1), scheme.tile_count_y(1)
        (4, 2)
        >>> scheme.tile_to_native_rectangle(0, 0, 0)
        Rectangle(west=-180.0, south=-90.0, east=0.0, north=90.0)
        >>> scheme.position_to_tile(Cartographic.from_degrees(127.05, 37.55), 1)
        TileXY(x=3, y=0)
    """

    def __init__(self, options: TilingSchemeOptions | None = None, **kwargs):
        """
        Initialize tiling scheme

        Args:
            options: Construction options; alternatively pass the same
                fields as keyword arguments
        """
        if options is None:
            options = TilingSchemeOptions(**kwargs)
        elif kwargs:
            raise ValidationError("Pass either an options object or keyword arguments, not both")

        self._ellipsoid, self._rectangle, self._grid = resolve_options(options)
        self._projection = GeographicProjection(self._ellipsoid)

        logger.debug(
            "Created %s tiling scheme on %s covering %s",
            "matrix" if self.is_matrix else "standard",
            self._ellipsoid.name or self._ellipsoid,
            self._rectangle.to_degrees(),
        )

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @property
    def rectangle(self) -> Rectangle:
        """Root rectangle in radians (a copy; the scheme never changes)"""
        r = self._rectangle
        return Rectangle(r.west, r.south, r.east, r.north)

    @property
    def projection(self) -> GeographicProjection:
        return self._projection

    @property
    def grid(self) -> StandardGrid | MatrixGrid:
        return self._grid

    @property
    def is_matrix(self) -> bool:
        return isinstance(self._grid, MatrixGrid)

    # -------------------------------------------------------------------------
    # Level extents
    # -------------------------------------------------------------------------

    def tile_count_x(self, level: int) -> int:
        """
        Number of tiles in the X direction at ``level``

        Raises:
            ValidationError: If level is negative
            LevelNotFoundError: If the tile matrix has no entry for level
        """
        _check_level(level)
        grid = self._grid
        if isinstance(grid, MatrixGrid):
            return round_half_away(_MATRIX_SPAN_X / grid.tile_info.tile_width(level))
        return grid.tiles_x << level

    def tile_count_y(self, level: int) -> int:
        """
        Number of tiles in the Y direction at ``level``

        Raises:
            ValidationError: If level is negative
            LevelNotFoundError: If the tile matrix has no entry for level
        """
        _check_level(level)
        grid = self._grid
        if isinstance(grid, MatrixGrid):
            return round_half_away(_MATRIX_SPAN_Y / grid.tile_info.tile_height(level))
        return grid.tiles_y << level

    # -------------------------------------------------------------------------
    # Tile -> rectangle
    # -------------------------------------------------------------------------

    def to_native_rectangle(
        self, rectangle: Rectangle, out: Rectangle | None = None
    ) -> Rectangle:
        """
        Convert a rectangle from radians to degrees

        Args:
            rectangle: Rectangle in radians
            out: Optional rectangle to write into (may be ``rectangle`` itself)

        Returns:
            ``out`` if given, otherwise a new rectangle
        """
        if rectangle is None:
            raise ValidationError("rectangle is required")

        west = to_degrees(rectangle.west)
        south = to_degrees(rectangle.south)
        east = to_degrees(rectangle.east)
        north = to_degrees(rectangle.north)

        if out is None:
            return Rectangle(west, south, east, north)
        out.west, out.south, out.east, out.north = west, south, east, north
        return out

    def tile_to_rectangle(
        self, x: int, y: int, level: int, out: Rectangle | None = None
    ) -> Rectangle:
        """
        Bounds of tile (x, y) at ``level``, in radians

        Indices are not range checked: out-of-range tiles extrapolate the
        grid past the root rectangle.

        Examples:
            >>> GeographicTilingScheme().tile_to_rectangle(1, 0, 0).west
            0.0
        """
        grid = self._grid
        if isinstance(grid, MatrixGrid):
            info = grid.tile_info
            tile_width = info.tile_width(level)
            tile_height = info.tile_height(level)

            west = to_radians(info.origin.x + x * tile_width)
            east = to_radians(info.origin.x + (x + 1) * tile_width)
            north = to_radians(info.origin.y - y * tile_height)
            south = to_radians(info.origin.y - (y + 1) * tile_height)
        else:
            rectangle = self._rectangle
            tile_width = rectangle.width / self.tile_count_x(level)
            tile_height = rectangle.height / self.tile_count_y(level)

            west = x * tile_width + rectangle.west
            east = (x + 1) * tile_width + rectangle.west
            north = rectangle.north - y * tile_height
            south = rectangle.north - (y + 1) * tile_height

        if out is None:
            return Rectangle(west, south, east, north)
        out.west, out.south, out.east, out.north = west, south, east, north
        return out

    def tile_to_native_rectangle(
        self, x: int, y: int, level: int, out: Rectangle | None = None
    ) -> Rectangle:
        """Bounds of tile (x, y) at ``level``, in degrees"""
        rectangle = self.tile_to_rectangle(x, y, level, out)
        return self.to_native_rectangle(rectangle, rectangle)

    # -------------------------------------------------------------------------
    # Position -> tile
    # -------------------------------------------------------------------------

    def position_to_tile(
        self, position: Cartographic, level: int, out: TileXY | None = None
    ) -> TileXY | None:
        """
        Tile containing ``position`` at ``level``

        Args:
            position: Position in radians
            level: Level-of-detail
            out: Optional pair to write into

        Returns:
            Tile coordinates, or None when the position lies outside the
            root rectangle

        Examples:
            >>> scheme = GeographicTilingScheme()
            >>> scheme.position_to_tile(Cartographic.from_degrees(-10.0, 45.0), 0)
            TileXY(x=0, y=0)
        """
        if position is None:
            raise ValidationError("position is required")

        rectangle = self._rectangle
        if not rectangle.contains(position):
            return None

        grid = self._grid
        if isinstance(grid, MatrixGrid):
            info = grid.tile_info
            longitude = to_degrees(position.longitude)
            latitude = to_degrees(position.latitude)

            x = tile_index(longitude - info.origin.x, info.tile_width(level))
            y = tile_index(info.origin.y - latitude, info.tile_height(level))
        else:
            tiles_x = self.tile_count_x(level)
            tiles_y = self.tile_count_y(level)
            tile_width = rectangle.width / tiles_x
            tile_height = rectangle.height / tiles_y

            longitude = position.longitude
            if rectangle.east < rectangle.west and longitude < 0.0:
                longitude += TWO_PI

            x = tile_index(longitude - rectangle.west, tile_width, tiles_x)
            y = tile_index(rectangle.north - position.latitude, tile_height, tiles_y)

        if out is None:
            return TileXY(x, y)
        out.x = x
        out.y = y
        return out

    def __repr__(self):
        return (
            f"GeographicTilingScheme(mode={'matrix' if self.is_matrix else 'standard'}, "
            f"ellipsoid={self._ellipsoid!r}, rectangle={self._rectangle.to_degrees()})"
        )


def _check_level(level: int) -> None:
    if level < 0:
        raise ValidationError(f"Level must be non-negative, got {level}")
