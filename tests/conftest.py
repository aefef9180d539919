"""
GeoTiling Test Configuration

Shared pytest fixtures for all tests.
"""

import json

import pytest

from geotiling.grid.geographic import GeographicTilingScheme
from geotiling.grid.tile_matrix import TileInfo


@pytest.fixture
def tile_info_dict():
    """CGCS2000 tile matrix in ArcGIS REST tileInfo layout"""
    return {
        "rows": 256,
        "cols": 256,
        "dpi": 96,
        "format": "PNG",
        "origin": {"x": -180.0, "y": 90.0},
        "spatialReference": {"wkid": 4490, "latestWkid": 4490},
        "lods": [
            {"level": 0, "resolution": 0.703125, "scale": 295497593.05875},
            {"level": 1, "resolution": 0.3515625, "scale": 147748796.52937502},
            {"level": 2, "resolution": 0.17578125, "scale": 73874398.26468751},
            {"level": 3, "resolution": 0.087890625, "scale": 36937199.132343754},
        ],
    }


@pytest.fixture
def tile_info(tile_info_dict):
    """Parsed CGCS2000 tile matrix"""
    return TileInfo.from_dict(tile_info_dict)


@pytest.fixture
def tile_info_file(tmp_path, tile_info_dict):
    """Tile matrix written to a JSON file"""
    path = tmp_path / "tile_info.json"
    path.write_text(json.dumps({"tileInfo": tile_info_dict}))
    return path


@pytest.fixture
def standard_scheme():
    """Default standard-mode scheme (2x1 tiles at level 0)"""
    return GeographicTilingScheme()


@pytest.fixture
def matrix_scheme(tile_info):
    """Matrix-mode scheme over the CGCS2000 tile matrix"""
    return GeographicTilingScheme(tile_info=tile_info)


@pytest.fixture
def wide_tile_scheme(tile_info_dict):
    """Matrix-mode scheme whose tiles are twice as wide as they are tall"""
    tile_info_dict["rows"] = 512
    tile_info_dict["cols"] = 256
    return GeographicTilingScheme(tile_info=TileInfo.from_dict(tile_info_dict))
