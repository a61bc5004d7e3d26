"""Nodes, supports, releases and elements of a plane frame model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from framefem.geometry import Point, calc_length_between_points, get_angle_from_points
from framefem.material import Material, Steel, get_elastic_modulus
from framefem.profile import PolygonProfile, Profile
from framefem.settings import CalculationSettings

if TYPE_CHECKING:
    from framefem.loads import Load, LoadCombination


@dataclass
class Support:
    """Support conditions of a node in global coordinates.

    A true lock means the degree of freedom is held; springs are stiffness values.
    """

    tx: bool = False
    tz: bool = False
    ry: bool = False
    x_spring: float = 0.0
    z_spring: float = 0.0
    r_spring: float = 0.0

    @classmethod
    def hinged(cls) -> Support:
        """Translations locked, rotation free."""
        return cls(tx=True, tz=True)

    @classmethod
    def fixed(cls) -> Support:
        """Translations and rotation locked."""
        return cls(tx=True, tz=True, ry=True)

    def lock(self, index: int) -> bool:
        """Return the lock at the index (0=tx, 1=tz, 2=ry)."""
        locks = (self.tx, self.tz, self.ry)
        if not 0 <= index < len(locks):
            raise IndexError(f"support has no degree of freedom {index}")
        return locks[index]

    def spring(self, index: int) -> float:
        """Return the spring constant at the index (0=x, 1=z, 2=r)."""
        springs = (self.x_spring, self.z_spring, self.r_spring)
        if not 0 <= index < len(springs):
            raise IndexError(f"support has no spring for degree of freedom {index}")
        return springs[index]


@dataclass
class Release:
    """End releases of an element in its local coordinates; true means released."""

    s_tx: bool = False
    s_tz: bool = False
    s_ry: bool = False
    e_tx: bool = False
    e_tz: bool = False
    e_ry: bool = False

    def _values(self) -> tuple[bool, bool, bool, bool, bool, bool]:
        return (self.s_tx, self.s_tz, self.s_ry, self.e_tx, self.e_tz, self.e_ry)

    def value(self, index: int) -> bool:
        """Return the release at index 0..5 (s_tx, s_tz, s_ry, e_tx, e_tz, e_ry)."""
        values = self._values()
        if not 0 <= index < len(values):
            raise IndexError(f"release index {index} is outside 0..5")
        return values[index]

    def start_release_any(self) -> bool:
        return self.s_tx or self.s_tz or self.s_ry

    def end_release_any(self) -> bool:
        return self.e_tx or self.e_tz or self.e_ry

    def start_release_count(self) -> int:
        return sum((self.s_tx, self.s_tz, self.s_ry))

    def end_release_count(self) -> int:
        return sum((self.e_tx, self.e_tz, self.e_ry))


@dataclass
class Node:
    """A numbered point of the frame with its support conditions."""

    number: int
    point: Point
    support: Support = field(default_factory=Support)

    @classmethod
    def free(cls, number: int, point: Point) -> Node:
        return cls(number, point, Support())

    @classmethod
    def hinged(cls, number: int, point: Point) -> Node:
        return cls(number, point, Support.hinged())

    @classmethod
    def fixed(cls, number: int, point: Point) -> Node:
        return cls(number, point, Support.fixed())


def _default_profile() -> PolygonProfile:
    return PolygonProfile.rectangle("R100x100", 100.0, 100.0)


def _default_material() -> Steel:
    return Steel(elastic_modulus=210000.0)


@dataclass
class Element:
    """A beam element between two nodes, referred to by node number."""

    number: int = -1
    node_start: int = 1
    node_end: int = 2
    profile: Profile = field(default_factory=_default_profile)
    material: Material = field(default_factory=_default_material)
    releases: Release = field(default_factory=Release)

    def _end_points(self, nodes: dict[int, Node]) -> tuple[Point, Point]:
        return nodes[self.node_start].point, nodes[self.node_end].point

    def length(self, nodes: dict[int, Node]) -> float:
        """Length of the element in millimetres."""
        return calc_length_between_points(*self._end_points(nodes))

    def rotation(self, nodes: dict[int, Node]) -> float:
        """Direction of the element in degrees."""
        return get_angle_from_points(*self._end_points(nodes))

    def elastic_modulus(self) -> float:
        return get_elastic_modulus(self.material)


@dataclass
class CalculationModel:
    """Everything needed to run a calculation."""

    nodes: dict[int, Node] = field(default_factory=dict)
    elements: list[Element] = field(default_factory=list)
    load_combinations: list[LoadCombination] = field(default_factory=list)
    loads: list[Load] = field(default_factory=list)
    calc_settings: CalculationSettings = field(default_factory=CalculationSettings)


def element_release_count(elements: list[Element]) -> int:
    """Total number of released degrees of freedom over all elements."""
    return sum(
        e.releases.start_release_count() + e.releases.end_release_count() for e in elements
    )