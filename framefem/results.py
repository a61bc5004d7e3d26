"""Results of a frame calculation: node displacements, reactions and internal forces."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np

from framefem.equations import EquationHandler


class ForceType(enum.Enum):
    """The kind of an internal force."""

    AXIAL = "axial"
    SHEAR = "shear"
    MOMENT = "moment"
    DEFLECTION = "deflection"


@dataclass
class InternalForcePoint:
    """An internal force value at one position along an element.

    ``value_x`` is along the element's local X-axis (mostly used for deflection);
    ``value_y`` is along its local Y-axis.
    """

    force_type: ForceType
    value_x: float
    value_y: float
    pos_on_element: float
    element_number: int
    load_comb_number: int


@dataclass
class InternalForceResults:
    """Internal forces along one element."""

    element_number: int
    axial_forces: list[InternalForcePoint] = field(default_factory=list)
    shear_forces: list[InternalForcePoint] = field(default_factory=list)
    moment_forces: list[InternalForcePoint] = field(default_factory=list)
    deflections: list[InternalForcePoint] = field(default_factory=list)


@dataclass(eq=False)
class NodeResults:
    """Displacements and support reactions of all nodes.

    Directions are 0 = X translation, 1 = Z translation and 2 = rotation about Y.
    The equation handler is copied, so later changes to the given one are not seen.
    """

    displacements: np.ndarray
    support_reactions: np.ndarray
    node_count: int
    equation_handler: EquationHandler = field(default_factory=EquationHandler)
    dof_count: int = 3

    def __post_init__(self) -> None:
        self.displacements = np.asarray(self.displacements, dtype=float)
        self.support_reactions = np.asarray(self.support_reactions, dtype=float)
        self.equation_handler = self.equation_handler.copy()

    def _value(self, values: np.ndarray, node_number: int, direction: int) -> float:
        index = (node_number - 1) * self.dof_count + direction
        flat = values.reshape(-1, order="F")
        if not 0 <= index < flat.size:
            raise IndexError(
                f"no result for node {node_number} in direction {direction}"
            )
        return float(flat[index])

    def displacement(self, node_number: int, direction: int) -> float:
        """Displacement of the node in the given direction."""
        return self._value(self.displacements, node_number, direction)

    def support_reaction(self, node_number: int, direction: int) -> float:
        """Support reaction of the node in the given direction."""
        return self._value(self.support_reactions, node_number, direction)


@dataclass(eq=False)
class CalculationResults:
    """Node results together with internal forces keyed by element number."""

    node_results: NodeResults
    internal_force_results: dict[int, InternalForceResults] = field(default_factory=dict)