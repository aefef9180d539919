"""
Geographic (equirectangular) map projection.
"""

from typing import NamedTuple

from geotiling.core.exceptions import ValidationError
from geotiling.geodesy.cartographic import Cartographic
from geotiling.geodesy.ellipsoid import Ellipsoid


class Cartesian3(NamedTuple):
    """Projected coordinate in meters"""

    x: float
    y: float
    z: float


class GeographicProjection:
    """
    Maps longitude and latitude directly to X and Y scaled by the
    ellipsoid's semi-major axis (plate carrée).

    Examples:
        >>> projection = GeographicProjection(Ellipsoid.WGS84)
        >>> projection.project(Cartographic(1.0, 0.5)).x
        6378137.0
    """

    def __init__(self, ellipsoid: Ellipsoid = Ellipsoid.WGS84):
        self._ellipsoid = ellipsoid
        self._semimajor_axis = ellipsoid.maximum_radius
        self._one_over_semimajor_axis = 1.0 / self._semimajor_axis

    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def project(self, cartographic: Cartographic) -> Cartesian3:
        """Project a geodetic position (radians) to meters"""
        if cartographic is None:
            raise ValidationError("cartographic is required")
        return Cartesian3(
            cartographic.longitude * self._semimajor_axis,
            cartographic.latitude * self._semimajor_axis,
            cartographic.height,
        )

    def unproject(self, cartesian: Cartesian3) -> Cartographic:
        """Inverse of project()"""
        if cartesian is None:
            raise ValidationError("cartesian is required")
        return Cartographic(
            cartesian[0] * self._one_over_semimajor_axis,
            cartesian[1] * self._one_over_semimajor_axis,
            cartesian[2],
        )

    def __repr__(self):
        return f"GeographicProjection({self._ellipsoid!r})"
