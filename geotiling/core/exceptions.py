"""
GeoTiling Exceptions

Exception hierarchy for error handling.
"""


class TilingError(Exception):
    """Base exception for GeoTiling"""

    pass


class ValidationError(TilingError):
    """Argument or configuration validation failed"""

    pass


class LevelNotFoundError(ValidationError):
    """Requested level has no entry in the tile matrix"""

    def __init__(self, level: int, available: list[int] | None = None):
        self.level = level
        self.available = sorted(available or [])
        super().__init__(
            f"Level {level} not found in tile matrix (available levels: {self.available})"
        )
