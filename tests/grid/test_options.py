"""
Tests for tiling scheme option resolution
"""

import logging

import pytest

from geotiling.core.exceptions import ValidationError
from geotiling.geodesy.ellipsoid import Ellipsoid
from geotiling.geodesy.rectangle import Rectangle
from geotiling.grid.options import (
    MatrixGrid,
    StandardGrid,
    TilingSchemeOptions,
    resolve_options,
)
from geotiling.grid.tile_matrix import SpatialReference, TileInfo


class TestResolveOptions:
    """Test mode selection and defaults"""

    def test_standard_defaults(self):
        ellipsoid, rectangle, grid = resolve_options(TilingSchemeOptions())
        assert ellipsoid == Ellipsoid.WGS84
        assert rectangle == Rectangle.max_value()
        assert grid == StandardGrid(2, 1)

    def test_matrix_defaults(self, tile_info):
        ellipsoid, rectangle, grid = resolve_options(TilingSchemeOptions(tile_info=tile_info))
        assert ellipsoid == Ellipsoid.CGCS2000
        assert rectangle == Rectangle.from_degrees(-180.0, -90.0, 180.0, 90.0)
        assert isinstance(grid, MatrixGrid)
        assert grid.tile_info is tile_info
        assert (grid.tiles_x, grid.tiles_y) == (4, 2)

    def test_matrix_overrides(self, tile_info):
        """Test explicit values win over matrix defaults"""
        rect = Rectangle.from_degrees(70.0, 0.0, 140.0, 60.0)
        ellipsoid, rectangle, grid = resolve_options(
            TilingSchemeOptions(
                ellipsoid=Ellipsoid.WGS84,
                rectangle=rect,
                number_of_level_zero_tiles_x=1,
                number_of_level_zero_tiles_y=1,
                tile_info=tile_info,
            )
        )
        assert ellipsoid == Ellipsoid.WGS84
        assert rectangle == rect
        assert (grid.tiles_x, grid.tiles_y) == (1, 1)

    def test_rectangle_is_copied(self):
        rect = Rectangle.from_degrees(-10.0, -10.0, 10.0, 10.0)
        _, rectangle, _ = resolve_options(TilingSchemeOptions(rectangle=rect))
        assert rectangle == rect
        assert rectangle is not rect

    def test_other_spatial_reference_stays_standard(self, tile_info, caplog):
        """Test a non-CGCS2000 matrix is ignored with a warning"""
        info = TileInfo(
            tile_info.origin,
            tile_info.rows,
            tile_info.cols,
            tile_info.lods,
            SpatialReference(4326),
        )
        with caplog.at_level(logging.WARNING, logger="geotiling.grid.options"):
            ellipsoid, _, grid = resolve_options(TilingSchemeOptions(tile_info=info))
        assert ellipsoid == Ellipsoid.WGS84
        assert grid == StandardGrid(2, 1)
        assert "4326" in caplog.text

    def test_invalid_tile_counts(self):
        with pytest.raises(ValidationError):
            resolve_options(TilingSchemeOptions(number_of_level_zero_tiles_x=0))

        with pytest.raises(ValidationError):
            resolve_options(TilingSchemeOptions(number_of_level_zero_tiles_y=-2))

        with pytest.raises(ValidationError):
            resolve_options(TilingSchemeOptions(number_of_level_zero_tiles_x=1.5))


class TestOptionsFromDict:
    """Test building options from plain data"""

    def test_from_dict(self, tile_info_dict):
        options = TilingSchemeOptions.from_dict(
            {
                "ellipsoid": "wgs84",
                "rectangle": [-90, -45, 90, 45],
                "number_of_level_zero_tiles_x": 3,
                "tileInfo": tile_info_dict,
            }
        )
        assert options.ellipsoid == Ellipsoid.WGS84
        assert options.rectangle == Rectangle.from_degrees(-90, -45, 90, 45)
        assert options.number_of_level_zero_tiles_x == 3
        assert options.number_of_level_zero_tiles_y is None
        assert options.tile_info.is_regional

    def test_from_dict_empty(self):
        assert TilingSchemeOptions.from_dict({}) == TilingSchemeOptions()

    def test_from_dict_unknown_ellipsoid(self):
        with pytest.raises(ValidationError, match="Unknown ellipsoid"):
            TilingSchemeOptions.from_dict({"ellipsoid": "MARS"})

    def test_from_dict_bad_rectangle(self):
        with pytest.raises(ValidationError):
            TilingSchemeOptions.from_dict({"rectangle": [0, 0, 10]})


class TestMatrixLevelZeroCounts:
    """Test explicit level-zero counts alongside a tile matrix"""

    def test_warns(self, tile_info, caplog):
        with caplog.at_level(logging.WARNING, logger="geotiling.grid.options"):
            resolve_options(
                TilingSchemeOptions(tile_info=tile_info, number_of_level_zero_tiles_x=8)
            )
        assert "ignored with a tile matrix" in caplog.text

    def test_defaults_do_not_warn(self, tile_info, caplog):
        with caplog.at_level(logging.WARNING, logger="geotiling.grid.options"):
            resolve_options(TilingSchemeOptions(tile_info=tile_info))
        assert caplog.text == ""
