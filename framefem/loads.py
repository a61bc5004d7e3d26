"""Loads, load combinations and their conversion into calculation loads."""

from __future__ import annotations

import enum
import warnings
from collections.abc import Iterable
from dataclasses import dataclass

from framefem.equations import EquationHandler, FormulaError
from framefem.material import get_thermal_expansion_coefficient
from framefem.structure import Element, Node


class LoadType(enum.Enum):
    """The kind of a user-given load."""

    POINT = "point"
    LINE = "line"
    TRIANGULAR = "triangular"
    ROTATIONAL = "rotational"
    TRAPEZOID = "trapezoid"
    """Start and end strengths are separated with a semicolon."""
    STRAIN = "strain"
    THERMAL = "thermal"


class CalculationLoadType(enum.Enum):
    """The kind of a load as used in the calculation."""

    POINT = "point"
    LINE = "line"
    TRIANGULAR = "triangular"
    ROTATIONAL = "rotational"
    STRAIN = "strain"


@dataclass
class Load:
    """A load given by formulas and linked to elements by number.

    ``element_numbers`` is a comma separated list where ``S..E`` includes every
    element from S to E; ``-1`` links the load to all elements. Offsets are
    measured along the element's local X-axis from its start. A rotation of 0
    points along the global positive X-axis.
    """

    name: str = ""
    element_numbers: str = ""
    load_type: LoadType = LoadType.POINT
    offset_start: str = "0"
    offset_end: str = "L"
    comment: str = ""
    strength: str = "0"
    rotation: float = -90.0
    is_moving_load: bool = False
    moving_percent: float = 0.0

    @classmethod
    def point(
        cls, name: str, element_numbers: str, offset_start: str, strength: str, rotation: float
    ) -> Load:
        return cls(
            name=name,
            element_numbers=element_numbers,
            offset_start=offset_start,
            strength=strength,
            rotation=rotation,
            load_type=LoadType.POINT,
        )

    @classmethod
    def line(
        cls,
        name: str,
        element_numbers: str,
        offset_start: str,
        offset_end: str,
        strength: str,
        rotation: float,
    ) -> Load:
        return cls(
            name=name,
            element_numbers=element_numbers,
            offset_start=offset_start,
            offset_end=offset_end,
            strength=strength,
            rotation=rotation,
            load_type=LoadType.LINE,
        )

    @classmethod
    def rotational(
        cls, name: str, element_numbers: str, offset_start: str, strength: str
    ) -> Load:
        return cls(
            name=name,
            element_numbers=element_numbers,
            offset_start=offset_start,
            strength=strength,
            load_type=LoadType.ROTATIONAL,
        )

    @classmethod
    def triangular(
        cls,
        name: str,
        element_numbers: str,
        offset_start: str,
        offset_end: str,
        strength: str,
        rotation: float,
    ) -> Load:
        return cls(
            name=name,
            element_numbers=element_numbers,
            offset_start=offset_start,
            offset_end=offset_end,
            strength=strength,
            rotation=rotation,
            load_type=LoadType.TRIANGULAR,
        )

    @classmethod
    def trapezoid(
        cls,
        name: str,
        element_numbers: str,
        offset_start: str,
        offset_end: str,
        strength: str,
        rotation: float,
    ) -> Load:
        return cls(
            name=name,
            element_numbers=element_numbers,
            offset_start=offset_start,
            offset_end=offset_end,
            strength=strength,
            rotation=rotation,
            load_type=LoadType.TRAPEZOID,
        )

    @classmethod
    def strain(cls, name: str, element_numbers: str, strength: str) -> Load:
        return cls(
            name=name,
            element_numbers=element_numbers,
            strength=strength,
            load_type=LoadType.STRAIN,
        )

    @classmethod
    def thermal(cls, name: str, element_numbers: str, strength: str) -> Load:
        return cls(
            name=name,
            element_numbers=element_numbers,
            strength=strength,
            load_type=LoadType.THERMAL,
        )

    def length(self, equation_handler: EquationHandler) -> float:
        """Distance between the evaluated offsets; unparsable offsets count as 0."""
        off_end = _evaluate(equation_handler, self.offset_end)
        off_start = _evaluate(equation_handler, self.offset_start)
        return abs(off_end - off_start)


@dataclass
class CalculationLoad:
    """A load on a single element with all values evaluated."""

    load_type: CalculationLoadType
    offset_start: float
    offset_end: float
    strength: float
    rotation: float
    element_number: int

    def length(self) -> float:
        return abs(self.offset_end - self.offset_start)


@dataclass
class LoadCombination:
    """A named combination of loads."""

    name: str = ""


def _evaluate(handler: EquationHandler, formula: str) -> float:
    try:
        return handler.calculate_formula(formula)
    except FormulaError:
        return 0.0


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"invalid element number {text!r}") from None


def get_linked_element_numbers(load: Load) -> list[int]:
    """Return the element numbers the load refers to, in the given order.

    Ranges with other than exactly two ends are ignored; invalid numbers raise ValueError.
    """
    result: list[int] = []
    for part in load.element_numbers.split(","):
        if not part:
            continue
        if ".." in part:
            ends = part.split("..")
            if len(ends) != 2:
                continue
            begin, end = (_parse_int(e) for e in ends)
            result.extend(range(begin, end + 1))
        else:
            result.append(_parse_int(part))
    return result


def load_is_linked(element: Element, load: Load) -> bool:
    """Return True if the load applies to the element."""
    linked = get_linked_element_numbers(load)
    return -1 in linked or element.number in linked


def split_trapezoid_load(load: Load, equation_handler: EquationHandler) -> tuple[Load, Load]:
    """Split a trapezoid load into a (line load, triangular load) pair."""
    parts = load.strength.split(";")
    if len(parts) in (1, 2):
        start_strength = _evaluate(equation_handler, parts[0])
        end_strength = _evaluate(equation_handler, parts[0])
        return split_trapezoid_load_with_strengths(load, start_strength, end_strength)
    warnings.warn(
        "cannot parse the strength of the trapezoid load; separate the start and end "
        "strengths with a semicolon ';'",
        stacklevel=2,
    )
    return split_trapezoid_load_with_strengths(load, 0.0, 0.0)


def split_trapezoid_load_with_strengths(
    load: Load, start_strength: float, end_strength: float
) -> tuple[Load, Load]:
    """Split a trapezoid load with the given end strengths into (line load, triangular load)."""
    if start_strength < 0.0 or end_strength < 0.0:
        warnings.warn("trapezoid load can't have negative values", stacklevel=2)
    if start_strength > end_strength:
        tri_start, tri_end = load.offset_start, load.offset_end
        tri_strength = start_strength - end_strength
        line_strength = start_strength - tri_strength
    else:
        tri_start, tri_end = load.offset_end, load.offset_start
        tri_strength = end_strength - start_strength
        line_strength = end_strength - tri_strength
    line_load = Load.line(
        load.name,
        load.element_numbers,
        load.offset_start,
        load.offset_end,
        repr(line_strength),
        load.rotation,
    )
    tri_load = Load.triangular(
        load.name,
        load.element_numbers,
        tri_start,
        tri_end,
        repr(tri_strength),
        load.rotation,
    )
    return line_load, tri_load


_DIRECT_TYPES = {
    LoadType.LINE: CalculationLoadType.LINE,
    LoadType.TRIANGULAR: CalculationLoadType.TRIANGULAR,
    LoadType.ROTATIONAL: CalculationLoadType.ROTATIONAL,
    LoadType.STRAIN: CalculationLoadType.STRAIN,
}


def extract_calculation_loads(
    elements: Iterable[Element],
    nodes: dict[int, Node],
    loads: Iterable[Load],
    equation_handler: EquationHandler,
) -> list[CalculationLoad]:
    """Evaluate the loads for every element they are linked to.

    The variable ``L`` is set to each element's length before its formulas are
    evaluated; formulas that cannot be evaluated count as 0.
    """
    elements = list(elements)
    handler = equation_handler.copy()
    calc_loads: list[CalculationLoad] = []
    for load in loads:
        rotation = load.rotation
        for element in elements:
            if not load_is_linked(element, load):
                continue
            number = element.number
            el_length = element.length(nodes)
            handler.set_variable("L", el_length)
            offset_start = _evaluate(handler, load.offset_start)
            offset_end = _evaluate(handler, load.offset_end)
            strength = _evaluate(handler, load.strength)

            if load.load_type is LoadType.POINT:
                calc_loads.append(
                    CalculationLoad(
                        CalculationLoadType.POINT, offset_start, 0.0, strength, rotation, number
                    )
                )
            elif load.load_type in _DIRECT_TYPES:
                calc_loads.append(
                    CalculationLoad(
                        _DIRECT_TYPES[load.load_type],
                        offset_start,
                        offset_end,
                        strength,
                        rotation,
                        number,
                    )
                )
            elif load.load_type is LoadType.TRAPEZOID:
                line_load, tri_load = split_trapezoid_load(load, handler)
                calc_loads.append(
                    CalculationLoad(
                        CalculationLoadType.LINE,
                        offset_start,
                        offset_end,
                        _evaluate(handler, line_load.strength),
                        rotation,
                        number,
                    )
                )
                calc_loads.append(
                    CalculationLoad(
                        CalculationLoadType.TRIANGULAR,
                        _evaluate(handler, tri_load.offset_start),
                        _evaluate(handler, tri_load.offset_end),
                        _evaluate(handler, tri_load.strength),
                        rotation,
                        number,
                    )
                )
            elif load.load_type is LoadType.THERMAL:
                coefficient = get_thermal_expansion_coefficient(element.material)
                calc_loads.append(
                    CalculationLoad(
                        CalculationLoadType.STRAIN,
                        offset_start,
                        offset_end,
                        strength * coefficient * el_length,
                        rotation,
                        number,
                    )
                )
    return calc_loads