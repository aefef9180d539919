"""
Reference ellipsoids

Only the radii are modelled; the tiling code needs an ellipsoid to build its
projection and to report which body it tiles.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Ellipsoid:
    """
    Ellipsoid defined by its radii along the x, y and z axes (meters)

    Examples:
        >>> Ellipsoid.WGS84.maximum_radius
        6378137.0
    """

    x: float
    y: float
    z: float
    name: str = field(default="", compare=False)

    @property
    def radii(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def maximum_radius(self) -> float:
        return max(self.x, self.y, self.z)

    @property
    def minimum_radius(self) -> float:
        return min(self.x, self.y, self.z)

    @property
    def flattening(self) -> float:
        """Flattening of the meridian ellipse, 0 for a sphere"""
        return (self.x - self.z) / self.x

    def __repr__(self):
        label = f"{self.name}, " if self.name else ""
        return f"Ellipsoid({label}{self.x}, {self.y}, {self.z})"


# Semi-minor axes follow the published flattenings:
# WGS84 1/298.257223563, CGCS2000 1/298.257222101
Ellipsoid.WGS84 = Ellipsoid(6378137.0, 6378137.0, 6356752.3142451793, "WGS84")
Ellipsoid.CGCS2000 = Ellipsoid(6378137.0, 6378137.0, 6356752.314140356, "CGCS2000")
Ellipsoid.UNIT_SPHERE = Ellipsoid(1.0, 1.0, 1.0, "UNIT_SPHERE")
