"""
Tests for Rectangle
"""

import math

import pytest

from geotiling.core.exceptions import ValidationError
from geotiling.geodesy.cartographic import Cartographic
from geotiling.geodesy.rectangle import Rectangle


class TestRectangle:
    """Test Rectangle construction and geometry"""

    @pytest.fixture
    def wrapping(self):
        """Rectangle crossing the antimeridian (170°E to 170°W)"""
        return Rectangle.from_degrees(170.0, -10.0, -170.0, 10.0)

    def test_from_degrees(self):
        """Test degree constructor converts every bound"""
        rect = Rectangle.from_degrees(-90.0, -45.0, 90.0, 45.0)
        assert abs(rect.west + math.pi / 2) < 1e-15
        assert abs(rect.south + math.pi / 4) < 1e-15
        assert abs(rect.east - math.pi / 2) < 1e-15
        assert abs(rect.north - math.pi / 4) < 1e-15

    def test_max_value(self):
        """Test max_value covers the whole globe"""
        rect = Rectangle.max_value()
        assert rect.as_tuple() == (-math.pi, -math.pi / 2, math.pi, math.pi / 2)

    def test_max_value_is_fresh(self):
        """Test max_value returns a new instance each call"""
        rect = Rectangle.max_value()
        rect.west = 0.0
        assert Rectangle.max_value().west == -math.pi

    def test_width_height(self):
        rect = Rectangle.from_degrees(-10.0, -5.0, 30.0, 15.0)
        assert abs(math.degrees(rect.width) - 40.0) < 1e-12
        assert abs(math.degrees(rect.height) - 20.0) < 1e-12

    def test_width_antimeridian(self, wrapping):
        """Test width wraps when east < west"""
        assert wrapping.crosses_antimeridian
        assert abs(math.degrees(wrapping.width) - 20.0) < 1e-9

    def test_contains(self):
        rect = Rectangle.from_degrees(-10.0, -10.0, 10.0, 10.0)
        assert rect.contains(Cartographic.from_degrees(0.0, 0.0))
        assert rect.contains(Cartographic.from_degrees(-10.0, 10.0))
        assert not rect.contains(Cartographic.from_degrees(11.0, 0.0))
        assert not rect.contains(Cartographic.from_degrees(0.0, -10.5))

    def test_contains_antimeridian(self, wrapping):
        """Test containment on both sides of the antimeridian"""
        assert wrapping.contains(Cartographic.from_degrees(175.0, 0.0))
        assert wrapping.contains(Cartographic.from_degrees(-175.0, 0.0))
        assert wrapping.contains(Cartographic.from_degrees(180.0, 0.0))
        assert not wrapping.contains(Cartographic.from_degrees(0.0, 0.0))
        assert not wrapping.contains(Cartographic.from_degrees(160.0, 0.0))

    def test_contains_requires_position(self):
        with pytest.raises(ValidationError):
            Rectangle.max_value().contains(None)

    def test_center(self):
        rect = Rectangle.from_degrees(0.0, 0.0, 20.0, 10.0)
        lon, lat = rect.center().to_degrees()
        assert abs(lon - 10.0) < 1e-12
        assert abs(lat - 5.0) < 1e-12

    def test_center_antimeridian(self, wrapping):
        """Test center of a wrapping rectangle lands on the antimeridian"""
        lon, lat = wrapping.center().to_degrees()
        assert abs(abs(lon) - 180.0) < 1e-9
        assert abs(lat) < 1e-12

    def test_copy_from(self):
        target = Rectangle()
        source = Rectangle(1.0, 2.0, 3.0, 4.0)
        assert target.copy_from(source) is target
        assert target == source
