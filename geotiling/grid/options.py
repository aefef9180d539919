"""
Tiling scheme configuration

Options a scheme is built from and the resolution of those options into one
of two grid definitions:

- StandardGrid: the root rectangle is split into a fixed number of level-zero
  tiles, each level doubling the count in both directions.
- MatrixGrid: tiles follow an explicit tile matrix (origin plus a
  resolution per level), selected when the matrix is defined in CGCS2000.
"""

import logging
from dataclasses import dataclass
from typing import Any

from geotiling.core.exceptions import ValidationError
from geotiling.geodesy.ellipsoid import Ellipsoid
from geotiling.geodesy.rectangle import Rectangle
from geotiling.grid.tile_matrix import TileInfo

logger = logging.getLogger(__name__)

_ELLIPSOIDS = {
    "WGS84": Ellipsoid.WGS84,
    "CGCS2000": Ellipsoid.CGCS2000,
    "UNIT_SPHERE": Ellipsoid.UNIT_SPHERE,
}


@dataclass(frozen=True)
class StandardGrid:
    """Power-of-two subdivision of the root rectangle"""

    tiles_x: int
    tiles_y: int


@dataclass(frozen=True)
class MatrixGrid:
    """
    Grid defined by a tile matrix

    ``tiles_x``/``tiles_y`` keep the configured level-zero counts for
    reference; tile counts per level come from the matrix resolutions.
    """

    tile_info: TileInfo
    tiles_x: int
    tiles_y: int


@dataclass
class TilingSchemeOptions:
    """
    Construction options for GeographicTilingScheme

    Every field is optional; unset fields take the defaults of the grid mode
    selected by ``tile_info``.

    Attributes:
        ellipsoid: Body being tiled
        rectangle: Extent covered by level zero, in radians
        number_of_level_zero_tiles_x: Tiles across at level zero
        number_of_level_zero_tiles_y: Tiles down at level zero
        tile_info: Tile matrix; only a CGCS2000 (wkid 4490) matrix switches
            the scheme to matrix mode

    Examples:
        >>> options = TilingSchemeOptions.from_dict(
        ...     {"ellipsoid": "WGS84", "rectangle": [-180, -90, 180, 90]}
        ... )
    """

    ellipsoid: Ellipsoid | None = None
    rectangle: Rectangle | None = None
    number_of_level_zero_tiles_x: int | None = None
    number_of_level_zero_tiles_y: int | None = None
    tile_info: TileInfo | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TilingSchemeOptions":
        """
        Build options from plain data

        ``ellipsoid`` may be a preset name, ``rectangle`` a
        ``[west, south, east, north]`` list in degrees and ``tileInfo`` an
        ArcGIS REST tile info dictionary.
        """
        ellipsoid = data.get("ellipsoid")
        if isinstance(ellipsoid, str):
            try:
                ellipsoid = _ELLIPSOIDS[ellipsoid.upper()]
            except KeyError:
                raise ValidationError(
                    f"Unknown ellipsoid '{ellipsoid}'. Available: {', '.join(_ELLIPSOIDS)}"
                ) from None

        rectangle = data.get("rectangle")
        if rectangle is not None and not isinstance(rectangle, Rectangle):
            if len(rectangle) != 4:
                raise ValidationError(
                    f"rectangle must be [west, south, east, north], got {rectangle}"
                )
            rectangle = Rectangle.from_degrees(*rectangle)

        tile_info = data.get("tileInfo", data.get("tile_info"))
        if isinstance(tile_info, dict):
            tile_info = TileInfo.from_dict(tile_info)

        return cls(
            ellipsoid=ellipsoid,
            rectangle=rectangle,
            number_of_level_zero_tiles_x=data.get("number_of_level_zero_tiles_x"),
            number_of_level_zero_tiles_y=data.get("number_of_level_zero_tiles_y"),
            tile_info=tile_info,
        )


def _pick(value, default):
    return default if value is None else value


def resolve_options(
    options: TilingSchemeOptions,
) -> tuple[Ellipsoid, Rectangle, StandardGrid | MatrixGrid]:
    """
    Resolve options into (ellipsoid, root rectangle, grid)

    Explicit values always win over the defaults of the selected mode. The
    returned rectangle is a private copy.
    """
    tile_info = options.tile_info
    matrix_mode = tile_info is not None and tile_info.is_regional

    if matrix_mode:
        ellipsoid = _pick(options.ellipsoid, Ellipsoid.CGCS2000)
        rectangle = _pick(options.rectangle, Rectangle.from_degrees(-180.0, -90.0, 180.0, 90.0))
        tiles_x = _pick(options.number_of_level_zero_tiles_x, 4)
        tiles_y = _pick(options.number_of_level_zero_tiles_y, 2)
        if (
            options.number_of_level_zero_tiles_x is not None
            or options.number_of_level_zero_tiles_y is not None
        ):
            logger.warning(
                "Level-zero tile counts are ignored with a tile matrix; "
                "tile counts follow the matrix resolutions"
            )
    else:
        if tile_info is not None:
            logger.warning(
                "Ignoring tile matrix with spatial reference %s; only wkid 4490 is supported",
                tile_info.spatial_reference.wkid,
            )
        ellipsoid = _pick(options.ellipsoid, Ellipsoid.WGS84)
        rectangle = _pick(options.rectangle, Rectangle.max_value())
        tiles_x = _pick(options.number_of_level_zero_tiles_x, 2)
        tiles_y = _pick(options.number_of_level_zero_tiles_y, 1)

    if int(tiles_x) != tiles_x or int(tiles_y) != tiles_y or tiles_x < 1 or tiles_y < 1:
        raise ValidationError(
            f"Level-zero tile counts must be integers >= 1, got {tiles_x}x{tiles_y}"
        )
    tiles_x, tiles_y = int(tiles_x), int(tiles_y)

    rectangle = Rectangle(rectangle.west, rectangle.south, rectangle.east, rectangle.north)

    if matrix_mode:
        grid: StandardGrid | MatrixGrid = MatrixGrid(tile_info, tiles_x, tiles_y)
    else:
        grid = StandardGrid(tiles_x, tiles_y)
    return ellipsoid, rectangle, grid
