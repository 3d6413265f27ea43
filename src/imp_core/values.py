"""Runtime value types for imp_core."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class VNumber:
    value: float

    def __str__(self) -> str:
        v = self.value
        if math.isnan(v):
            return "NaN"
        if math.isinf(v):
            return "Infinity" if v > 0 else "-Infinity"
        if v == int(v):
            return str(int(v))
        return str(v)


@dataclass(frozen=True, slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


Value = Union[VNumber, VBool]


def values_equal(left: Value, right: Value) -> bool:
    """Strict equality: same variant and same payload.

    Float comparison is used for numbers so ``NaN`` never equals itself.
    """
    if isinstance(left, VNumber) and isinstance(right, VNumber):
        return left.value == right.value
    if isinstance(left, VBool) and isinstance(right, VBool):
        return left.value == right.value
    return False


def to_python(value: Value) -> float | bool:
    """Unwrap a runtime value to its plain Python payload."""
    return value.value
