"""
Position and tile coordinate value types.
"""

from dataclasses import dataclass

from geotiling.core.math import to_degrees, to_radians


@dataclass
class Cartographic:
    """
    Geodetic position: longitude and latitude in radians, height in meters
    """

    longitude: float = 0.0
    latitude: float = 0.0
    height: float = 0.0

    @classmethod
    def from_degrees(
        cls, longitude: float, latitude: float, height: float = 0.0
    ) -> "Cartographic":
        return cls(to_radians(longitude), to_radians(latitude), height)

    def to_degrees(self) -> tuple[float, float]:
        """(longitude, latitude) in degrees"""
        return (to_degrees(self.longitude), to_degrees(self.latitude))


@dataclass
class TileXY:
    """
    Tile column/row pair

    Mutable so callers on hot paths can pass one instance as an output
    buffer; iterable so it unpacks like a tuple.

    Examples:
        >>> x, y = TileXY(3, 1)
    """

    x: int = 0
    y: int = 0

    def __iter__(self):
        yield self.x
        yield self.y
