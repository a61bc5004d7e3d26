# framefem

`framefem` describes plane-frame structures for finite element analysis. Each
node has three degrees of freedom: translation in X, translation in Z and
rotation about Y.

## What is in the package

- `framefem.geometry`: the `Point`, `Polygon` and `Rectangle` classes. It also has
  `bounding_box`, `calculate_area`, `centroid_from_polygon`,
  `calc_length_between_points`, `get_angle_from_points` (degrees, 0 to 360) and
  `rotate_point` (counter-clockwise, degrees).
- `framefem.material`: the `Concrete`, `Steel` and `Timber` dataclasses, plus
  `get_elastic_modulus` and `get_thermal_expansion_coefficient`.
  - `Steel()` has the S355 values. `Steel.s235()`, `Steel.aisi304()` and
    `Steel.aisi314()` give the other grades.
  - `Timber()` and `Timber.c18()` give C18. `Timber.c24()` gives C24.
- `framefem.profile`: the profile classes.
  - `PolygonProfile` computes its `area()` and `major_second_moment_of_area()`
    from its outline. The second moment is taken about the centroid and does not
    depend on the point order.
  - `StandardProfile` and `CustomProfile` return the section values stored on
    them.
  - `profile_from_polygon` and `rectangle_profile` are shortcuts for building
    polygon profiles.
- `framefem.structure`: `Support`, `Release`, `Node`, `Element` and
  `CalculationModel`, plus `element_release_count`.
  - `Support.hinged()` and `Support.fixed()` set the locks, and springs are
    optional.
  - `Node.free`, `Node.hinged` and `Node.fixed` create nodes with those
    supports.
  - `Element.length(nodes)` and `Element.rotation(nodes)` look up the element's
    end nodes by number.
- `framefem.settings`: `CalculationSettings`, which holds a `CalcSplitInterval`.
  The interval is `absolute` or `relative`, and the default is `relative(0.01)`.
- `framefem.equations`: `EquationHandler`, which evaluates formulas with named
  variables.
  - Supported syntax: `+ - * / ^`, parentheses, `sqrt`, `abs` and `pi`.
  - A formula that cannot be evaluated raises `FormulaError`.
- `framefem.loads`: `Load`, `LoadType`, `CalculationLoad`, `CalculationLoadType`
  and `LoadCombination`. The helpers are `get_linked_element_numbers`,
  `load_is_linked`, `split_trapezoid_load`,
  `split_trapezoid_load_with_strengths` and `extract_calculation_loads`.
- `framefem.stiffness`: `element_stiffness_matrix` returns the 6x6 stiffness
  matrix of an element in its local axes. `col_height` gives the size of the
  joined system: three degrees of freedom per node plus one row for each
  release.
- `framefem.results`: `NodeResults`, `InternalForceResults`,
  `InternalForcePoint`, `ForceType` and `CalculationResults`.
- `framefem.serialization`: `model_to_dict`, `model_from_dict`, `dump_model` and
  `load_model`. They convert a `CalculationModel` to and from JSON.

## Installation

```
pip install framefem
```

To run the tests as well:

```
pip install "framefem[test]"
pytest
```

## Example

```python
from framefem.geometry import Point
from framefem.material import Steel
from framefem.profile import rectangle_profile
from framefem.structure import Node, Element, CalculationModel
from framefem.loads import Load, extract_calculation_loads
from framefem.equations import EquationHandler
from framefem.stiffness import element_stiffness_matrix

nodes = {
    1: Node.hinged(1, Point(0.0, 0.0)),
    2: Node.hinged(2, Point(4000.0, 0.0)),
}
beam = Element(
    number=1,
    node_start=1,
    node_end=2,
    profile=rectangle_profile("R100x100", 100.0, 100.0),
    material=Steel(),
)

print(beam.length(nodes))  # 4000.0

k = element_stiffness_matrix(beam, nodes)  # 6x6 numpy array, local axes

load = Load.line("Dead", "1", "0", "L", "10", -90.0)
calc_loads = extract_calculation_loads([beam], nodes, [load], EquationHandler())
```

## Load formulas

Offsets and strengths of a `Load` are formula strings. `extract_calculation_loads`
evaluates them for each linked element in turn.

- Before evaluating an element's formulas, it sets the variable `L` to that
  element's length.
- Any formula that cannot be evaluated counts as 0.
- A thermal load becomes a strain load equal to
  strength × the material's expansion coefficient × the element length.
- A trapezoid load is split into a line load and a triangular load.

## Element numbers on loads

A load names the elements it acts on in `element_numbers`:

- numbers separated by commas, for example `"1,2,6"`;
- a range written as `S..E`, which includes both ends, for example `"3..6"`;
- `"-1"`, which attaches the load to every element.

`get_linked_element_numbers` expands this text into a list of numbers.

## Saving models

`dump_model` writes a `CalculationModel` to JSON text. `load_model` reads it
back, and raises `ValueError` on invalid data:

```python
from framefem.serialization import dump_model, load_model

model = CalculationModel(nodes=nodes, elements=[beam], loads=[load])
text = dump_model(model)
same = load_model(text)
```

## What it does not do

This package builds models and gives the element stiffness matrix in local axes.
It does not do the following:

- transform that matrix to global axes;
- assemble the joined system stiffness matrix or equivalent load vector;
- solve for displacements or support reactions;
- compute internal forces along elements.

The classes in `framefem.results` only hold such values once you have them.

`element_stiffness_matrix` does not support timber. For a timber element it
issues a warning and uses an elastic modulus of zero.

There is no command-line tool.

## Units

Lengths are in millimetres. Moduli and strengths are in megapascals. Section
areas are in mm² and second moments of area are in mm⁴.