"""Type tags for bindable fields, and their representable ranges."""

from __future__ import annotations

import enum
import sys

from typing_extensions import Literal

# Largest finite IEEE-754 binary32 value.
_FLOAT32_MAX = (2 - 2**-23) * 2.0**127


class Kind(enum.Enum):
    """Declared type of a field. The member value is the canonical type name."""

    STRING = "string"
    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"

    def __str__(self) -> str:
        return self.value

    @property
    def family(self) -> Literal["string", "bool", "int", "uint", "float"]:
        if self in _SIGNED_WIDTH:
            return "int"
        elif self in _UNSIGNED_WIDTH:
            return "uint"
        elif self in (Kind.FLOAT32, Kind.FLOAT64):
            return "float"
        elif self is Kind.BOOL:
            return "bool"
        return "string"

    @property
    def bounds(self) -> tuple[float, float]:
        """Inclusive `(min, max)` of the values this kind can hold.

        Only defined for numeric kinds. Float bounds are the largest finite
        magnitudes, negated for the minimum.
        """
        if self in _SIGNED_WIDTH:
            width = _SIGNED_WIDTH[self]
            return (-(2 ** (width - 1)), 2 ** (width - 1) - 1)
        elif self in _UNSIGNED_WIDTH:
            return (0, 2 ** _UNSIGNED_WIDTH[self] - 1)
        elif self is Kind.FLOAT32:
            return (-_FLOAT32_MAX, _FLOAT32_MAX)
        elif self is Kind.FLOAT64:
            return (-sys.float_info.max, sys.float_info.max)
        raise ValueError(f"{self} is not a numeric kind")

    def fits(self, value: float) -> bool:
        lo, hi = self.bounds
        return lo <= value <= hi


_SIGNED_WIDTH = {Kind.INT8: 8, Kind.INT16: 16, Kind.INT32: 32, Kind.INT64: 64}
_UNSIGNED_WIDTH = {Kind.UINT8: 8, Kind.UINT16: 16, Kind.UINT32: 32, Kind.UINT64: 64}
