"""
GeoTiling Geodesy Module

Ellipsoids, geographic projection and the rectangle/position value types
the tiling schemes are expressed in.
"""

from geotiling.geodesy.cartographic import Cartographic, TileXY
from geotiling.geodesy.ellipsoid import Ellipsoid
from geotiling.geodesy.projection import Cartesian3, GeographicProjection
from geotiling.geodesy.rectangle import Rectangle

__all__ = [
    "Cartesian3",
    "Cartographic",
    "Ellipsoid",
    "GeographicProjection",
    "Rectangle",
    "TileXY",
]
