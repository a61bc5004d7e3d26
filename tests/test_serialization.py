import json

import numpy as np
import pytest

from framefem.equations import EquationHandler
from framefem.geometry import Point
from framefem.loads import Load, LoadCombination, extract_calculation_loads
from framefem.material import Concrete, Steel
from framefem.profile import CustomProfile, PolygonProfile
from framefem.serialization import dump_model, load_model, model_from_dict, model_to_dict
from framefem.settings import CalcSplitInterval, CalculationSettings
from framefem.stiffness import col_height, element_stiffness_matrix
from framefem.structure import CalculationModel, Element, Node, Release


def _model():
    nodes = {
        1: Node.fixed(1, Point(0.0, 0.0)),
        2: Node.free(2, Point(0.0, 4000.0)),
        3: Node.free(3, Point(8000.0, 4000.0)),
        4: Node.fixed(4, Point(8000.0, 0.0)),
    }
    elements = [
        Element(1, 1, 2, PolygonProfile.rectangle("R100x100", 100.0, 100.0), Steel()),
        Element(
            2,
            2,
            3,
            CustomProfile(name="TEST", custom_area=6000.0, custom_major_sec_mom_of_area=2e8),
            Concrete(),
            Release(s_ry=True),
        ),
        Element(3, 3, 4, PolygonProfile.rectangle("R100x100", 100.0, 100.0), Steel(), Release(e_ry=True)),
    ]
    loads = [
        Load.line("Lineload", "2", "0", "L", "10", -90.0),
        Load.point("Pointload", "1", "L/2", "10000", 0.0),
        Load.thermal("Thermal", "1..3", "20"),
    ]
    return CalculationModel(
        nodes=nodes,
        elements=elements,
        load_combinations=[],
        loads=loads,
        calc_settings=CalculationSettings(),
    )


def test_round_trip_keeps_counts_and_settings():
    model = _model()
    restored = load_model(dump_model(model))
    assert len(restored.elements) == len(model.elements)
    assert len(restored.nodes) == len(model.nodes)
    assert len(restored.load_combinations) == len(model.load_combinations)
    assert len(restored.loads) == len(model.loads)
    assert restored.calc_settings.calc_split_interval == model.calc_settings.calc_split_interval


def test_round_trip_is_equal():
    model = _model()
    model.load_combinations.append(LoadCombination("ULS"))
    model.calc_settings = CalculationSettings(CalcSplitInterval.absolute(50.0))
    assert load_model(dump_model(model)) == model


def test_round_trip_gives_same_calculation_inputs():
    model = _model()
    restored = load_model(dump_model(model))
    assert col_height(restored.nodes, restored.elements) == col_height(model.nodes, model.elements)
    for original, copy in zip(model.elements, restored.elements):
        np.testing.assert_array_equal(
            element_stiffness_matrix(original, model.nodes),
            element_stiffness_matrix(copy, restored.nodes),
        )
    handler = EquationHandler()
    assert extract_calculation_loads(
        restored.elements, restored.nodes, restored.loads, handler
    ) == extract_calculation_loads(model.elements, model.nodes, model.loads, handler)


def test_dict_uses_tagged_variants_and_string_node_keys():
    data = model_to_dict(_model())
    assert list(data["nodes"]) == ["1", "2", "3", "4"]
    assert list(data["elements"][0]["material"]) == ["Steel"]
    assert list(data["elements"][1]["profile"]) == ["CustomProfile"]
    assert data["loads"][0]["load_type"] == "Line"
    assert data["calc_settings"] == {"calc_split_interval": {"Relative": 0.01}}


def test_dump_is_valid_json_matching_dict():
    model = _model()
    assert json.loads(dump_model(model)) == model_to_dict(model)


def test_unknown_material_tag_raises():
    data = model_to_dict(_model())
    data["elements"][0]["material"] = {"Glass": {"elastic_modulus": 70000.0}}
    with pytest.raises(ValueError):
        model_from_dict(data)


def test_unknown_load_type_raises():
    data = model_to_dict(_model())
    data["loads"][0]["load_type"] = "Wind"
    with pytest.raises(ValueError):
        model_from_dict(data)


def test_missing_section_raises():
    data = model_to_dict(_model())
    del data["elements"]
    with pytest.raises(ValueError):
        model_from_dict(data)


def test_invalid_json_raises():
    with pytest.raises(ValueError):
        load_model("{not json")