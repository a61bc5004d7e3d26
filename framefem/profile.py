"""Cross-section profiles of frame elements."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

from framefem.geometry import (
    Point,
    Polygon,
    bounding_box,
    calculate_area,
    centroid_from_polygon,
)


class ProfileType(enum.Enum):
    """The kind of a profile."""

    POLYGON = "polygon"
    STANDARD_PROFILE = "standard_profile"
    CUSTOM = "custom"


def _rectangle_polygon(height: float, width: float) -> Polygon:
    return Polygon(
        [
            Point(0.0, 0.0),
            Point(width, 0.0),
            Point(width, height),
            Point(0.0, height),
            Point(0.0, 0.0),
        ]
    )


@dataclass
class PolygonProfile:
    """A profile whose section values are calculated from a closed polygon (mm)."""

    name: str = ""
    height: float = 0.0
    width: float = 0.0
    polygon: Polygon = field(default_factory=Polygon)

    @classmethod
    def from_polygon(cls, name: str, polygon: Polygon) -> PolygonProfile:
        """Create a profile; height and width come from the polygon's bounding box."""
        box = bounding_box(polygon)
        return cls(name=name, height=box.height, width=box.width, polygon=polygon)

    @classmethod
    def rectangle(cls, name: str, height: float, width: float) -> PolygonProfile:
        """Create a rectangular profile with its lower left corner at the origin."""
        return cls(name=name, height=height, width=width, polygon=_rectangle_polygon(height, width))

    def area(self) -> float:
        """Area of the profile in mm²."""
        return calculate_area(self.polygon)

    def major_second_moment_of_area(self) -> float:
        """Second moment of area about the centroid in mm⁴, for either point order."""
        if len(self.polygon.points) < 3:
            return 0.0
        centroid = centroid_from_polygon(self.polygon)
        total = 0.0
        for current, following in self.polygon.edges():
            cur_x = current.x - centroid.x
            cur_y = current.y - centroid.y
            next_x = following.x - centroid.x
            next_y = following.y - centroid.y
            total += (cur_x * next_y - next_x * cur_y) * (cur_y**2 + cur_y * next_y + next_y**2)
        return abs(total) / 12.0


@dataclass
class StandardProfile:
    """A profile from a profile library, with tabulated section values."""

    name: str = ""
    height: float = 0.0
    width: float = 0.0
    polygon: Polygon = field(default_factory=Polygon)
    custom_area: float = 0.0
    custom_major_sec_mom_of_area: float = 0.0
    custom_minor_sec_mom_of_area: float = 0.0
    custom_weight_per_meter: float = 0.0
    custom_torsional_constant: float = 0.0
    custom_warping_constant: float = 0.0

    def area(self) -> float:
        """Area of the profile in mm²."""
        return self.custom_area

    def major_second_moment_of_area(self) -> float:
        """Major second moment of area in mm⁴."""
        return self.custom_major_sec_mom_of_area


@dataclass
class CustomProfile:
    """A profile with user-given section values."""

    name: str = ""
    height: float = 0.0
    width: float = 0.0
    custom_area: float = 0.0
    custom_major_sec_mom_of_area: float = 0.0
    custom_minor_sec_mom_of_area: float = 0.0
    custom_weight_per_meter: float = 0.0
    custom_torsional_constant: float = 0.0
    custom_warping_constant: float = 0.0

    def area(self) -> float:
        """Area of the profile in mm²."""
        return self.custom_area

    def major_second_moment_of_area(self) -> float:
        """Major second moment of area in mm⁴."""
        return self.custom_major_sec_mom_of_area


Profile = Union[PolygonProfile, StandardProfile, CustomProfile]


def profile_from_polygon(name: str, polygon: Polygon) -> PolygonProfile:
    """Create a polygon profile sized by the polygon's bounding box."""
    return PolygonProfile.from_polygon(name, polygon)


def rectangle_profile(name: str, height: float, width: float) -> PolygonProfile:
    """Create a rectangular polygon profile."""
    return PolygonProfile.rectangle(name, height, width)