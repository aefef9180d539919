"""
Vectorized tile queries

numpy counterparts of GeographicTilingScheme.position_to_tile and
tile_to_rectangle for whole batches of positions or whole levels, and the
tile coverage of a rectangle.
"""

import math

import numpy as np

from geotiling.core.exceptions import ValidationError
from geotiling.core.math import EPSILON14, TWO_PI
from geotiling.geodesy.cartographic import TileXY
from geotiling.geodesy.rectangle import Rectangle
from geotiling.grid.geographic import GeographicTilingScheme
from geotiling.grid.options import MatrixGrid


def _contains(rectangle: Rectangle, lon: np.ndarray, lat: np.ndarray) -> np.ndarray:
    """Array form of Rectangle.contains"""
    west = rectangle.west
    east = rectangle.east
    if east < west:
        east += TWO_PI
        lon = np.where(lon < 0.0, lon + TWO_PI, lon)

    return (
        ((lon > west) | (np.abs(lon - west) <= EPSILON14))
        & ((lon < east) | (np.abs(lon - east) <= EPSILON14))
        & (lat >= rectangle.south)
        & (lat <= rectangle.north)
    )


def positions_to_tiles(
    scheme: GeographicTilingScheme,
    longitudes,
    latitudes,
    level: int,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Tile coordinates for many positions at once

    Args:
        scheme: Tiling scheme
        longitudes: Longitudes in radians (array-like)
        latitudes: Latitudes in radians (array-like, same shape)
        level: Level-of-detail

    Returns:
        (x, y, valid) arrays. ``valid`` is False where the position lies
        outside the root rectangle; x and y are -1 there.

    Examples:
        >>> scheme = GeographicTilingScheme()
        >>> x, y, valid = positions_to_tiles(scheme, [-1.0, 1.0], [0.5, -0.5], 0)
        >>> x.tolist(), y.tolist()
        ([0, 1], [0, 0])
    """
    lon = np.asarray(longitudes, dtype=np.float64)
    lat = np.asarray(latitudes, dtype=np.float64)
    if lon.shape != lat.shape:
        raise ValidationError(
            f"longitudes and latitudes must have the same shape, got {lon.shape} and {lat.shape}"
        )

    rectangle = scheme.rectangle
    valid = _contains(rectangle, lon, lat)

    grid = scheme.grid
    if isinstance(grid, MatrixGrid):
        info = grid.tile_info
        x = np.floor((np.degrees(lon) - info.origin.x) / info.tile_width(level))
        y = np.floor((info.origin.y - np.degrees(lat)) / info.tile_height(level))
    else:
        tiles_x = scheme.tile_count_x(level)
        tiles_y = scheme.tile_count_y(level)
        tile_width = rectangle.width / tiles_x
        tile_height = rectangle.height / tiles_y

        if rectangle.crosses_antimeridian:
            lon = np.where(lon < 0.0, lon + TWO_PI, lon)

        x = np.clip(np.floor((lon - rectangle.west) / tile_width), 0, tiles_x - 1)
        y = np.clip(np.floor((rectangle.north - lat) / tile_height), 0, tiles_y - 1)

    x = np.where(valid, x, -1).astype(np.int64)
    y = np.where(valid, y, -1).astype(np.int64)
    return x, y, valid


def level_rectangles(scheme: GeographicTilingScheme, level: int) -> np.ndarray:
    """
    Bounds of every tile at a level

    Returns:
        Array of shape (tile_count_y, tile_count_x, 4) holding
        (west, south, east, north) in radians; ``out[y, x]`` is tile (x, y).
    """
    tiles_x = scheme.tile_count_x(level)
    tiles_y = scheme.tile_count_y(level)

    grid = scheme.grid
    if isinstance(grid, MatrixGrid):
        info = grid.tile_info
        xs = np.arange(tiles_x + 1, dtype=np.float64)
        ys = np.arange(tiles_y + 1, dtype=np.float64)
        x_edges = np.radians(info.origin.x + xs * info.tile_width(level))
        y_edges = np.radians(info.origin.y - ys * info.tile_height(level))
    else:
        rectangle = scheme.rectangle
        tile_width = rectangle.width / tiles_x
        tile_height = rectangle.height / tiles_y
        x_edges = np.arange(tiles_x + 1, dtype=np.float64) * tile_width + rectangle.west
        y_edges = rectangle.north - np.arange(tiles_y + 1, dtype=np.float64) * tile_height

    bounds = np.empty((tiles_y, tiles_x, 4), dtype=np.float64)
    bounds[..., 0] = x_edges[np.newaxis, :-1]
    bounds[..., 1] = y_edges[1:, np.newaxis]
    bounds[..., 2] = x_edges[np.newaxis, 1:]
    bounds[..., 3] = y_edges[:-1, np.newaxis]
    return bounds


# Tolerance, in tile units, for treating an edge as touching a tile boundary
_EDGE_TOLERANCE = 1e-9


def _index_range(
    low: float, high: float, start: float, size: float, count: int, clamp: bool
) -> range:
    """
    Tile indices along one axis overlapping the span [low, high]

    Tile edges are half-open: a span that only touches a tile's edge does
    not include it. A zero-width span still selects the tile it lies in.
    """
    first = math.floor((low - start) / size + _EDGE_TOLERANCE)
    last = math.ceil((high - start) / size - _EDGE_TOLERANCE) - 1
    last = max(last, first)

    if clamp:
        first = min(max(first, 0), count - 1)
        last = min(max(last, 0), count - 1)
    elif last < 0 or first >= count:
        return range(0)
    else:
        first = max(first, 0)
        last = min(last, count - 1)
    return range(first, last + 1)


def _split_at_antimeridian(west: float, east: float) -> list[tuple[float, float]]:
    if east < west:
        return [(west, math.pi), (-math.pi, east)]
    return [(west, east)]


def tiles_in_rectangle(
    scheme: GeographicTilingScheme, rectangle: Rectangle, level: int
) -> list[TileXY]:
    """
    Tiles at ``level`` intersecting a rectangle

    The query is clipped to the scheme's root rectangle. Query and root are
    each split at the antimeridian, so either may cross it. Tiles that only
    share an edge with the query are not included. Tiles are returned row
    by row, north to south.

    Examples:
        >>> scheme = GeographicTilingScheme()
        >>> tiles_in_rectangle(scheme, Rectangle.from_degrees(-10, -10, 10, 10), 0)
        [TileXY(x=0, y=0), TileXY(x=1, y=0)]
    """
    if rectangle is None:
        raise ValidationError("rectangle is required")

    root = scheme.rectangle
    south = max(rectangle.south, root.south)
    north = min(rectangle.north, root.north)
    if south > north:
        return []

    tiles_x = scheme.tile_count_x(level)
    tiles_y = scheme.tile_count_y(level)

    grid = scheme.grid
    if isinstance(grid, MatrixGrid):
        info = grid.tile_info
        x_start = math.radians(info.origin.x)
        y_start = math.radians(info.origin.y)
        tile_width = math.radians(info.tile_width(level))
        tile_height = math.radians(info.tile_height(level))
        clamp = False
    else:
        x_start = root.west
        y_start = root.north
        tile_width = root.width / tiles_x
        tile_height = root.height / tiles_y
        clamp = True

    rows = _index_range(y_start - north, y_start - south, 0.0, tile_height, tiles_y, clamp)

    # Longitudes east of the antimeridian sit one turn further along in a
    # wrapping standard root's frame
    root_parts = _split_at_antimeridian(root.west, root.east)
    shifts = [0.0, TWO_PI if clamp else 0.0]

    seen: set[tuple[int, int]] = set()
    for query_west, query_east in _split_at_antimeridian(rectangle.west, rectangle.east):
        for (root_west, root_east), shift in zip(root_parts, shifts):
            west = max(query_west, root_west)
            east = min(query_east, root_east)
            if west > east:
                continue

            columns = _index_range(
                west + shift, east + shift, x_start, tile_width, tiles_x, clamp
            )
            for y in rows:
                for x in columns:
                    seen.add((y, x))

    return [TileXY(x, y) for y, x in sorted(seen)]
