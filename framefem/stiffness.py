"""Element stiffness matrices and system sizes."""

from __future__ import annotations

import warnings

import numpy as np

from framefem.material import Timber, get_elastic_modulus
from framefem.structure import Element, Node, element_release_count

DOF = 3
"""Degrees of freedom per node: tx, tz, ry."""


def element_stiffness_matrix(element: Element, nodes: dict[int, Node]) -> np.ndarray:
    """Return the 6x6 stiffness matrix of the element in its local coordinates."""
    if isinstance(element.material, Timber):
        warnings.warn(
            "timber is not supported in the stiffness calculation; stiffness taken as zero",
            stacklevel=2,
        )
        modulus = 0.0
    else:
        modulus = get_elastic_modulus(element.material)
    length = element.length(nodes)
    ea = modulus * element.profile.area()
    ei = modulus * element.profile.major_second_moment_of_area()

    axial = ea / length
    shear = 12.0 * ei / length**3
    coupling = 6.0 * ei / length**2
    near = 4.0 * ei / length
    far = 2.0 * ei / length

    return np.array(
        [
            [axial, 0.0, 0.0, -axial, 0.0, 0.0],
            [0.0, shear, coupling, 0.0, -shear, coupling],
            [0.0, coupling, near, 0.0, -coupling, far],
            [-axial, 0.0, 0.0, axial, 0.0, 0.0],
            [0.0, -shear, -coupling, 0.0, shear, -coupling],
            [0.0, coupling, far, 0.0, -coupling, near],
        ]
    )


def col_height(nodes: dict[int, Node], elements: list[Element]) -> int:
    """Size of the joined system: node degrees of freedom plus one per release."""
    return len(nodes) * DOF + element_release_count(elements)