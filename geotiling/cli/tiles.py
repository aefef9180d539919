"""
Tile CLI commands

counts, bounds and locate against a standard or matrix tiling scheme.
"""

import argparse
import logging

from geotiling.core.exceptions import TilingError
from geotiling.geodesy.cartographic import Cartographic
from geotiling.grid.geographic import GeographicTilingScheme
from geotiling.grid.tile_matrix import TileInfo

logger = logging.getLogger(__name__)


def build_scheme(args: argparse.Namespace) -> GeographicTilingScheme:
    """Tiling scheme from the global CLI options"""
    kwargs = {}
    if args.tile_info:
        kwargs["tile_info"] = TileInfo.from_json(args.tile_info)
    if args.level_zero_tiles:
        kwargs["number_of_level_zero_tiles_x"] = args.level_zero_tiles[0]
        kwargs["number_of_level_zero_tiles_y"] = args.level_zero_tiles[1]
    return GeographicTilingScheme(**kwargs)


def run_counts(args: argparse.Namespace) -> int:
    """Run the counts command"""
    try:
        scheme = build_scheme(args)
        tiles_x = scheme.tile_count_x(args.level)
        tiles_y = scheme.tile_count_y(args.level)
    except (TilingError, OSError) as e:
        print(f"Error: {e}")
        return 2

    print(f"Level {args.level}: {tiles_x} x {tiles_y} tiles ({tiles_x * tiles_y:,} total)")
    return 0


def run_bounds(args: argparse.Namespace) -> int:
    """Run the bounds command"""
    try:
        scheme = build_scheme(args)
        rect = scheme.tile_to_native_rectangle(args.x, args.y, args.level)
    except (TilingError, OSError) as e:
        print(f"Error: {e}")
        return 2

    tiles_x = scheme.tile_count_x(args.level)
    tiles_y = scheme.tile_count_y(args.level)
    if not (0 <= args.x < tiles_x and 0 <= args.y < tiles_y):
        logger.warning(
            "Tile (%d, %d) is outside the %dx%d grid at level %d",
            args.x, args.y, tiles_x, tiles_y, args.level,
        )

    print(f"Tile: x={args.x} y={args.y} level={args.level}")
    print(f"  West:  {rect.west:.10f}")
    print(f"  South: {rect.south:.10f}")
    print(f"  East:  {rect.east:.10f}")
    print(f"  North: {rect.north:.10f}")
    return 0


def run_locate(args: argparse.Namespace) -> int:
    """Run the locate command"""
    try:
        scheme = build_scheme(args)
        tile = scheme.position_to_tile(Cartographic.from_degrees(args.lon, args.lat), args.level)
    except (TilingError, OSError) as e:
        print(f"Error: {e}")
        return 2

    if tile is None:
        print(f"No tile: ({args.lon}, {args.lat}) is outside the tiling scheme")
        return 1

    print(f"Tile: x={tile.x} y={tile.y} level={args.level}")
    return 0
