"""
Tile matrix descriptor

Explicit per-level grid published by a map service: an origin, a tile size
in cells and a resolution per level. The dictionary layout is the ArcGIS
REST ``tileInfo`` block used by regional services such as the CGCS2000
(EPSG:4490) tile matrices.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, NamedTuple

from geotiling.core.exceptions import LevelNotFoundError, ValidationError

logger = logging.getLogger(__name__)

# China Geodetic Coordinate System 2000
CGCS2000_WKID = 4490


class Origin(NamedTuple):
    """Top-left corner of tile (0, 0), in the matrix's degree units"""

    x: float
    y: float


@dataclass(frozen=True)
class LevelOfDetail:
    """
    One level of a tile matrix

    Attributes:
        level: Level-of-detail index
        resolution: Ground size of one cell in degrees
        scale: Map scale denominator, informational only
    """

    level: int
    resolution: float
    scale: float | None = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"level": self.level, "resolution": self.resolution}
        if self.scale is not None:
            d["scale"] = self.scale
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LevelOfDetail":
        return cls(
            level=int(data["level"]),
            resolution=float(data["resolution"]),
            scale=data.get("scale"),
        )


@dataclass(frozen=True)
class SpatialReference:
    wkid: int | None = None
    latest_wkid: int | None = None

    def matches(self, wkid: int) -> bool:
        return wkid in (self.wkid, self.latest_wkid)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"wkid": self.wkid}
        if self.latest_wkid is not None:
            d["latestWkid"] = self.latest_wkid
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "SpatialReference":
        data = data or {}
        return cls(wkid=data.get("wkid"), latest_wkid=data.get("latestWkid"))


@dataclass(frozen=True)
class TileInfo:
    """
    Tile matrix definition

    Attributes:
        origin: Projected coordinate of the top-left corner of tile (0, 0)
        rows: Cells per tile, scales the resolution into a tile width
        cols: Cells per tile, scales the resolution into a tile height
        lods: Levels of detail, at most one per level
        spatial_reference: Spatial reference the matrix is defined in

    Examples:
        >>> info = TileInfo(
        ...     origin=Origin(-180.0, 90.0),
        ...     rows=256,
        ...     cols=256,
        ...     lods=[LevelOfDetail(0, 0.703125)],
        ...     spatial_reference=SpatialReference(4490),
        ... )
        >>> info.tile_width(0)
        180.0
    """

    origin: Origin
    rows: int
    cols: int
    lods: tuple[LevelOfDetail, ...]
    spatial_reference: SpatialReference = field(default_factory=SpatialReference)
    _by_level: dict[int, LevelOfDetail] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self):
        if not isinstance(self.origin, Origin):
            object.__setattr__(self, "origin", Origin(*self.origin))
        if self.rows < 1 or self.cols < 1:
            raise ValidationError(
                f"Tile dimensions must be at least 1, got rows={self.rows}, cols={self.cols}"
            )

        object.__setattr__(self, "lods", tuple(self.lods))

        by_level = {}
        for lod in self.lods:
            if lod.resolution <= 0:
                raise ValidationError(
                    f"Resolution must be positive, got {lod.resolution} at level {lod.level}"
                )
            if lod.level in by_level:
                raise ValidationError(f"Duplicate level {lod.level} in tile matrix")
            by_level[lod.level] = lod
        object.__setattr__(self, "_by_level", by_level)

    @property
    def is_regional(self) -> bool:
        """Whether the matrix is defined in CGCS2000 (wkid 4490)"""
        return self.spatial_reference.matches(CGCS2000_WKID)

    @property
    def levels(self) -> list[int]:
        return sorted(self._by_level)

    def lod(self, level: int) -> LevelOfDetail:
        """Level-of-detail entry for ``level``, exact match only"""
        try:
            return self._by_level[level]
        except KeyError:
            raise LevelNotFoundError(level, list(self._by_level)) from None

    def resolution(self, level: int) -> float:
        return self.lod(level).resolution

    def tile_width(self, level: int) -> float:
        """Ground width of one tile at ``level``, in degrees"""
        return self.rows * self.resolution(level)

    def tile_height(self, level: int) -> float:
        """Ground height of one tile at ``level``, in degrees"""
        return self.cols * self.resolution(level)

    def to_dict(self) -> dict[str, Any]:
        return {
            "origin": {"x": self.origin.x, "y": self.origin.y},
            "rows": self.rows,
            "cols": self.cols,
            "lods": [lod.to_dict() for lod in self.lods],
            "spatialReference": self.spatial_reference.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TileInfo":
        """
        Build from an ArcGIS REST ``tileInfo`` dictionary

        A full map service document is accepted too; its ``tileInfo`` member
        is used.
        """
        if "tileInfo" in data:
            data = data["tileInfo"]

        try:
            origin = data["origin"]
            return cls(
                origin=Origin(float(origin["x"]), float(origin["y"])),
                rows=int(data["rows"]),
                cols=int(data["cols"]),
                lods=[LevelOfDetail.from_dict(lod) for lod in data["lods"]],
                spatial_reference=SpatialReference.from_dict(data.get("spatialReference")),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(f"Invalid tile info: missing or malformed field {e}") from e

    @classmethod
    def from_json(cls, source: str | Path) -> "TileInfo":
        """
        Build from JSON text or a path to a JSON file
        """
        if isinstance(source, Path) or not source.lstrip().startswith("{"):
            path = Path(source)
            logger.debug("Loading tile info from %s", path)
            text = path.read_text(encoding="utf-8")
        else:
            text = source

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid tile info JSON: {e}") from e
        return cls.from_dict(data)
