"""Calculation settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class SplitKind(enum.Enum):
    """How an element is divided into calculation points."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


@dataclass(frozen=True)
class CalcSplitInterval:
    """Interval of calculation points along an element.

    ABSOLUTE intervals are a fixed length; RELATIVE ones are a fraction of the element length.
    """

    kind: SplitKind
    value: float

    @classmethod
    def absolute(cls, value: float) -> CalcSplitInterval:
        return cls(SplitKind.ABSOLUTE, value)

    @classmethod
    def relative(cls, value: float) -> CalcSplitInterval:
        return cls(SplitKind.RELATIVE, value)


def _default_interval() -> CalcSplitInterval:
    return CalcSplitInterval.relative(0.01)


@dataclass
class CalculationSettings:
    """Settings that control a calculation."""

    calc_split_interval: CalcSplitInterval = field(default_factory=_default_interval)