"""Structural materials and their elastic properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass
class Concrete:
    """Concrete material; elastic modulus in MPa."""

    elastic_modulus: float = 27e3
    thermal_expansion_coefficient: float = 14.0e-6


@dataclass
class Steel:
    """Steel material; defaults are those of S355."""

    elastic_modulus: float = 210e3
    thermal_expansion_coefficient: float = 12.5e-6
    yield_strength: float = 355.0
    break_strength: float = 510.0

    @classmethod
    def s355(cls) -> Steel:
        return cls()

    @classmethod
    def s235(cls) -> Steel:
        return cls(yield_strength=235.0, break_strength=360.0)

    @classmethod
    def aisi304(cls) -> Steel:
        return cls(
            elastic_modulus=193.0,
            yield_strength=205.0,
            break_strength=515.0,
            thermal_expansion_coefficient=17.3,
        )

    @classmethod
    def aisi314(cls) -> Steel:
        return cls(
            elastic_modulus=196.0,
            yield_strength=230.0,
            break_strength=550.0,
            thermal_expansion_coefficient=17.3,
        )


@dataclass
class Timber:
    """Timber material; defaults are those of sawn timber C18."""

    elastic_modulus: float = 9e3
    thermal_expansion_coefficient: float = 5.0e-6

    @classmethod
    def c18(cls) -> Timber:
        return cls()

    @classmethod
    def c24(cls) -> Timber:
        return cls(elastic_modulus=11e3)


Material = Union[Concrete, Steel, Timber]


def _check(material: object) -> None:
    if not isinstance(material, (Concrete, Steel, Timber)):
        raise TypeError(f"not a material: {material!r}")


def get_elastic_modulus(material: Material) -> float:
    """Return the elastic modulus of the material."""
    _check(material)
    return material.elastic_modulus


def get_thermal_expansion_coefficient(material: Material) -> float:
    """Return the thermal expansion coefficient of the material."""
    _check(material)
    return material.thermal_expansion_coefficient