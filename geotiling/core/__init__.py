"""
GeoTiling Core Module

Exceptions and angle helpers.
"""

from geotiling.core.exceptions import (
    LevelNotFoundError,
    TilingError,
    ValidationError,
)
from geotiling.core.math import (
    EPSILON14,
    PI,
    PI_OVER_TWO,
    TWO_PI,
    round_half_away,
    to_degrees,
    to_radians,
)

__all__ = [
    # Exceptions
    "TilingError",
    "ValidationError",
    "LevelNotFoundError",
    # Math
    "EPSILON14",
    "PI",
    "PI_OVER_TWO",
    "TWO_PI",
    "round_half_away",
    "to_degrees",
    "to_radians",
]
