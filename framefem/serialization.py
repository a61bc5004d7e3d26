"""Reading and writing calculation models as JSON."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from framefem.geometry import Point, Polygon
from framefem.loads import Load, LoadCombination, LoadType
from framefem.material import Concrete, Steel, Timber
from framefem.profile import CustomProfile, PolygonProfile, StandardProfile
from framefem.settings import CalcSplitInterval, CalculationSettings, SplitKind
from framefem.structure import CalculationModel, Element, Node, Release, Support

_PROFILE_TAGS: dict[str, type] = {
    "PolygonProfile": PolygonProfile,
    "StandardProfile": StandardProfile,
    "CustomProfile": CustomProfile,
}
_MATERIAL_TAGS: dict[str, type] = {
    "Concrete": Concrete,
    "Steel": Steel,
    "Timber": Timber,
}
_LOAD_TYPE_NAMES = {load_type: load_type.value.capitalize() for load_type in LoadType}
_LOAD_TYPES_BY_NAME = {name: load_type for load_type, name in _LOAD_TYPE_NAMES.items()}
_SPLIT_NAMES = {kind: kind.value.capitalize() for kind in SplitKind}
_SPLITS_BY_NAME = {name: kind for kind, name in _SPLIT_NAMES.items()}


def _tag_of(value: object, tags: dict[str, type]) -> str:
    for tag, cls in tags.items():
        if isinstance(value, cls):
            return tag
    raise TypeError(f"cannot serialize {value!r}")


def _untag(data: Any, tags: dict[str, type]) -> tuple[type, dict[str, Any]]:
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"expected a single-key tagged object, got {data!r}")
    ((tag, body),) = data.items()
    if tag not in tags:
        raise ValueError(f"unknown tag {tag!r}")
    if not isinstance(body, dict):
        raise ValueError(f"expected an object under {tag!r}")
    return tags[tag], dict(body)


def _point_from_dict(data: dict[str, Any]) -> Point:
    return Point(float(data["x"]), float(data["y"]))


def _polygon_from_dict(data: dict[str, Any]) -> Polygon:
    return Polygon([_point_from_dict(p) for p in data["points"]])


def _element_to_dict(element: Element) -> dict[str, Any]:
    return {
        "number": element.number,
        "node_start": element.node_start,
        "node_end": element.node_end,
        "material": {_tag_of(element.material, _MATERIAL_TAGS): asdict(element.material)},
        "profile": {_tag_of(element.profile, _PROFILE_TAGS): asdict(element.profile)},
        "releases": asdict(element.releases),
    }


def _element_from_dict(data: dict[str, Any]) -> Element:
    material_cls, material_body = _untag(data["material"], _MATERIAL_TAGS)
    profile_cls, profile_body = _untag(data["profile"], _PROFILE_TAGS)
    if "polygon" in profile_body:
        profile_body["polygon"] = _polygon_from_dict(profile_body["polygon"])
    return Element(
        number=int(data["number"]),
        node_start=int(data["node_start"]),
        node_end=int(data["node_end"]),
        profile=profile_cls(**profile_body),
        material=material_cls(**material_body),
        releases=Release(**data["releases"]),
    )


def _node_from_dict(data: dict[str, Any]) -> Node:
    return Node(
        number=int(data["number"]),
        point=_point_from_dict(data["point"]),
        support=Support(**data["support"]),
    )


def _load_to_dict(load: Load) -> dict[str, Any]:
    body = asdict(load)
    body["load_type"] = _LOAD_TYPE_NAMES[load.load_type]
    return body


def _load_from_dict(data: dict[str, Any]) -> Load:
    body = dict(data)
    name = body["load_type"]
    if name not in _LOAD_TYPES_BY_NAME:
        raise ValueError(f"unknown load type {name!r}")
    body["load_type"] = _LOAD_TYPES_BY_NAME[name]
    return Load(**body)


def _settings_to_dict(settings: CalculationSettings) -> dict[str, Any]:
    interval = settings.calc_split_interval
    return {"calc_split_interval": {_SPLIT_NAMES[interval.kind]: interval.value}}


def _settings_from_dict(data: dict[str, Any]) -> CalculationSettings:
    interval = data["calc_split_interval"]
    if not isinstance(interval, dict) or len(interval) != 1:
        raise ValueError(f"invalid split interval {interval!r}")
    ((name, value),) = interval.items()
    if name not in _SPLITS_BY_NAME:
        raise ValueError(f"unknown split interval {name!r}")
    return CalculationSettings(CalcSplitInterval(_SPLITS_BY_NAME[name], float(value)))


def model_to_dict(model: CalculationModel) -> dict[str, Any]:
    """Return the model as plain JSON-compatible data; node keys become strings."""
    return {
        "nodes": {
            str(number): asdict(node) for number, node in sorted(model.nodes.items())
        },
        "elements": [_element_to_dict(e) for e in model.elements],
        "load_combinations": [asdict(c) for c in model.load_combinations],
        "loads": [_load_to_dict(load) for load in model.loads],
        "calc_settings": _settings_to_dict(model.calc_settings),
    }


def model_from_dict(data: dict[str, Any]) -> CalculationModel:
    """Build a model from data made by model_to_dict; raise ValueError if it is invalid."""
    try:
        nodes = {int(key): _node_from_dict(value) for key, value in data["nodes"].items()}
        return CalculationModel(
            nodes=dict(sorted(nodes.items())),
            elements=[_element_from_dict(e) for e in data["elements"]],
            load_combinations=[LoadCombination(**c) for c in data["load_combinations"]],
            loads=[_load_from_dict(load) for load in data["loads"]],
            calc_settings=_settings_from_dict(data["calc_settings"]),
        )
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise ValueError(f"invalid model data: {exc}") from exc


def dump_model(model: CalculationModel) -> str:
    """Serialize the model to indented JSON text."""
    return json.dumps(model_to_dict(model), indent=2)


def load_model(text: str) -> CalculationModel:
    """Parse a model from JSON text; raise ValueError if it is invalid."""
    return model_from_dict(json.loads(text))