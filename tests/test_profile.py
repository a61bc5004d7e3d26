import pytest

from framefem.geometry import Point, Polygon
from framefem.profile import (
    CustomProfile,
    PolygonProfile,
    StandardProfile,
    profile_from_polygon,
    rectangle_profile,
)


def _pts(*coords):
    return Polygon([Point(x, y) for x, y in coords])


def test_major_second_moment_square_rectangle():
    p1 = PolygonProfile.rectangle("R100x100", 100.0, 100.0)
    assert abs(p1.major_second_moment_of_area() - 8333333.0) < 1.0


def test_major_second_moment_diamond_cw():
    polygon = _pts((100.0, 0.0), (0.0, 100.0), (100.0, 200.0), (200.0, 100.0), (100.0, 0.0))
    p2 = profile_from_polygon("R100x100", polygon)
    assert abs(p2.major_second_moment_of_area() - 33333333.33) < 1.0


def test_major_second_moment_diamond_ccw():
    polygon = _pts((100.0, 0.0), (200.0, 100.0), (100.0, 200.0), (0.0, 100.0), (100.0, 0.0))
    p2 = profile_from_polygon("R100x100", polygon)
    assert abs(p2.major_second_moment_of_area() - 33333333.33) < 1.0


def test_major_second_moment_tall_rectangle_polygon():
    polygon = _pts((0.0, 0.0), (0.0, 200.0), (100.0, 200.0), (100.0, 0.0), (0.0, 0.0))
    p3 = profile_from_polygon("R200x100", polygon)
    assert abs(p3.major_second_moment_of_area() - 66666666.666666666) < 1.0


def test_major_second_moment_tall_rectangle():
    p4 = rectangle_profile("R200x100", 200.0, 100.0)
    assert abs(p4.major_second_moment_of_area() - 66666666.666666666) < 1.0


def test_rectangle_dimensions_and_area():
    profile = rectangle_profile("R200x100", 200.0, 100.0)
    assert (profile.name, profile.height, profile.width) == ("R200x100", 200.0, 100.0)
    assert profile.area() == pytest.approx(profile.height * profile.width)
    assert profile.polygon.points[0] == profile.polygon.points[-1]


def test_from_polygon_uses_bounding_box():
    polygon = _pts((100.0, 0.0), (0.0, 100.0), (100.0, 200.0), (200.0, 100.0), (100.0, 0.0))
    profile = PolygonProfile.from_polygon("D", polygon)
    assert (profile.width, profile.height) == (200.0, 200.0)
    assert profile.polygon is polygon


def test_from_empty_polygon_raises():
    with pytest.raises(ValueError):
        profile_from_polygon("empty", Polygon())


def test_empty_polygon_profile_has_zero_values():
    profile = PolygonProfile()
    assert profile.area() == 0.0
    assert profile.major_second_moment_of_area() == 0.0


def test_custom_profile_returns_given_values():
    profile = CustomProfile(
        name="TEST", custom_major_sec_mom_of_area=200_000_000.0, custom_area=6000.0
    )
    assert profile.area() == 6000.0
    assert profile.major_second_moment_of_area() == 200_000_000.0


def test_standard_profile_returns_given_values():
    profile = StandardProfile(name="HEA", custom_area=2000.0, custom_major_sec_mom_of_area=3.5e7)
    assert profile.area() == 2000.0
    assert profile.major_second_moment_of_area() == 3.5e7