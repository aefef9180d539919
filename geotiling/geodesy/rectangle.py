"""
Geographic rectangle

West/south/east/north bounds in radians. A rectangle whose east bound is
less than its west bound crosses the antimeridian.
"""

from dataclasses import dataclass

from geotiling.core.exceptions import ValidationError
from geotiling.core.math import (
    EPSILON14,
    PI,
    PI_OVER_TWO,
    TWO_PI,
    equals_epsilon,
    negative_pi_to_pi,
    to_degrees,
    to_radians,
)
from geotiling.geodesy.cartographic import Cartographic


@dataclass
class Rectangle:
    """
    Rectangle in radians

    Mutable so it can be handed to the tiling scheme as an output buffer.

    Examples:
        >>> rect = Rectangle.from_degrees(-180.0, -90.0, 180.0, 90.0)
        >>> rect.contains(Cartographic.from_degrees(127.05, 37.55))
        True
    """

    west: float = 0.0
    south: float = 0.0
    east: float = 0.0
    north: float = 0.0

    @classmethod
    def from_degrees(
        cls,
        west: float = 0.0,
        south: float = 0.0,
        east: float = 0.0,
        north: float = 0.0,
    ) -> "Rectangle":
        return cls(to_radians(west), to_radians(south), to_radians(east), to_radians(north))

    @classmethod
    def max_value(cls) -> "Rectangle":
        """The largest possible rectangle (whole globe)"""
        return cls(-PI, -PI_OVER_TWO, PI, PI_OVER_TWO)

    @property
    def width(self) -> float:
        """Angular width, accounting for antimeridian crossing"""
        if self.east < self.west:
            return self.east + TWO_PI - self.west
        return self.east - self.west

    @property
    def height(self) -> float:
        return self.north - self.south

    @property
    def crosses_antimeridian(self) -> bool:
        return self.east < self.west

    def contains(self, cartographic: Cartographic) -> bool:
        """
        Whether a position lies inside the rectangle, edges included

        Longitude edges are compared with a 1e-14 tolerance so positions that
        came out of a degree round trip still land inside.
        """
        if cartographic is None:
            raise ValidationError("cartographic is required")

        longitude = cartographic.longitude
        latitude = cartographic.latitude

        west = self.west
        east = self.east

        if east < west:
            east += TWO_PI
            if longitude < 0.0:
                longitude += TWO_PI

        return (
            (longitude > west or equals_epsilon(longitude, west, EPSILON14))
            and (longitude < east or equals_epsilon(longitude, east, EPSILON14))
            and self.south <= latitude <= self.north
        )

    def center(self) -> Cartographic:
        """Center point, wrapped back into [-π, π] longitude"""
        east = self.east
        if east < self.west:
            east += TWO_PI
        longitude = negative_pi_to_pi((self.west + east) * 0.5)
        latitude = (self.south + self.north) * 0.5
        return Cartographic(longitude, latitude, 0.0)

    def to_degrees(self) -> tuple[float, float, float, float]:
        """(west, south, east, north) in degrees"""
        return (
            to_degrees(self.west),
            to_degrees(self.south),
            to_degrees(self.east),
            to_degrees(self.north),
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.west, self.south, self.east, self.north)

    def copy_from(self, other: "Rectangle") -> "Rectangle":
        """Overwrite this rectangle's bounds with another's and return self"""
        self.west = other.west
        self.south = other.south
        self.east = other.east
        self.north = other.north
        return self
