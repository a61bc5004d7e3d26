"""Plane-frame finite element modelling: geometry, materials, profiles, structure, loads, element stiffness and JSON models."""

__version__ = "0.1.0"

__all__ = [
    "equations",
    "geometry",
    "loads",
    "material",
    "profile",
    "results",
    "serialization",
    "settings",
    "stiffness",
    "structure",
]