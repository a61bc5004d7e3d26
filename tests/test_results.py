import numpy as np
import pytest

from framefem.equations import EquationHandler
from framefem.results import (
    CalculationResults,
    ForceType,
    InternalForcePoint,
    InternalForceResults,
    NodeResults,
)


def _results(handler=None):
    displacements = np.array([[0.5], [1.5], [2.5], [3.5], [4.5], [5.5]])
    reactions = np.array([10.0, 20.0, 30.0, 40.0, 50.0, 60.0])
    if handler is None:
        return NodeResults(displacements, reactions, 2)
    return NodeResults(displacements, reactions, 2, handler)


def test_displacement_indexing_by_node_and_direction():
    results = _results()
    assert results.displacement(1, 0) == 0.5
    assert results.displacement(1, 2) == 2.5
    assert results.displacement(2, 0) == 3.5
    assert results.displacement(2, 2) == 5.5


def test_support_reaction_indexing_by_node_and_direction():
    results = _results()
    assert results.support_reaction(1, 1) == 20.0
    assert results.support_reaction(2, 1) == 50.0
    assert results.support_reaction(2, 2) == 60.0


def test_every_displacement_matches_flat_vector():
    results = _results()
    values = [
        results.displacement(node, direction)
        for node in (1, 2)
        for direction in range(results.dof_count)
    ]
    assert values == [0.5, 1.5, 2.5, 3.5, 4.5, 5.5]


def test_out_of_range_node_raises():
    results = _results()
    with pytest.raises(IndexError):
        results.displacement(3, 0)
    with pytest.raises(IndexError):
        results.support_reaction(0, 0)


def test_equation_handler_is_copied():
    handler = EquationHandler()
    handler.set_variable("a", 2.0)
    results = _results(handler)
    handler.set_variable("a", 7.0)
    handler.set_variable("b", 1.0)
    assert results.equation_handler.get_variables() == {"a": 2.0}


def test_calculation_results_hold_node_results_and_forces():
    point = InternalForcePoint(ForceType.MOMENT, 0.0, 12.5, 1000.0, 1, 0)
    forces = InternalForceResults(1, moment_forces=[point])
    results = CalculationResults(_results(), {1: forces})
    assert results.node_results.support_reaction(2, 0) == 40.0
    assert results.internal_force_results[1].moment_forces[0].value_y == 12.5
    assert results.internal_force_results[1].axial_forces == []