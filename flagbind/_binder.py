"""Binder: coerces raw flag values and writes them through per-field setters.

A destination is described by a binding table, an ordered sequence of
:class:`Binding` entries. Binding is fail-fast: the first value that can't be
coerced raises, and setters for the remaining entries are never called.
"""

from __future__ import annotations

import dataclasses
import math
import re
import struct
import warnings
from typing import Any, Callable, Dict, Mapping, Sequence

from ._errors import (
    MalformedLiteralError,
    UnderflowError,
    UnsupportedTypeError,
    ValueOverflowError,
)
from ._kinds import Kind
from ._warnings import FlagbindWarning

_SIGNED_LITERAL = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_LITERAL = re.compile(r"[0-9]+")


@dataclasses.dataclass(frozen=True)
class Binding:
    """One entry of a binding table."""

    name: str
    """Field name. Matched exactly (case-sensitive) against flag names."""
    kind: Kind
    """Declared type of the field."""
    setter: Callable[[Any], None]
    """Called once with the coerced value."""

    def __post_init__(self) -> None:
        if not isinstance(self.kind, Kind):
            raise UnsupportedTypeError(self.name, self.kind)


def _coerce_signed(binding: Binding, raw: str) -> int:
    if _SIGNED_LITERAL.fullmatch(raw) is None:
        raise MalformedLiteralError(
            f"cannot parse '{raw}' as {binding.kind} for field '{binding.name}'",
            binding.name,
            binding.kind,
            raw,
        )
    n = int(raw)
    if not binding.kind.fits(n):
        raise ValueOverflowError(
            f"overflow detected, cannot fit {n} into {binding.kind}",
            binding.name,
            binding.kind,
            raw,
        )
    return n


def _coerce_unsigned(binding: Binding, raw: str) -> int:
    # Textual check: this runs before, and regardless of, numeric parsing.
    if "-" in raw:
        raise UnderflowError(
            f"underflow detected, cannot fit '{raw}' into '{binding.kind}'",
            binding.name,
            binding.kind,
            raw,
        )
    if _UNSIGNED_LITERAL.fullmatch(raw) is None:
        raise MalformedLiteralError(
            f"cannot parse '{raw}' as {binding.kind} for field '{binding.name}'",
            binding.name,
            binding.kind,
            raw,
        )
    n = int(raw)
    if not binding.kind.fits(n):
        raise ValueOverflowError(
            f"overflow detected, cannot fit {n} into {binding.kind}",
            binding.name,
            binding.kind,
            raw,
        )
    return n


def _coerce_float(binding: Binding, raw: str) -> float:
    # `float()` also accepts surrounding whitespace, digit-group underscores and
    # non-ASCII digits, which aren't valid literals on the command line.
    try:
        if not raw.isascii() or raw != raw.strip() or "_" in raw:
            raise ValueError(raw)
        n = float(raw)
    except ValueError:
        raise MalformedLiteralError(
            f"cannot parse '{raw}' as {binding.kind} for field '{binding.name}'",
            binding.name,
            binding.kind,
            raw,
        ) from None

    if math.isnan(n):
        return n
    if not binding.kind.fits(n):
        raise ValueOverflowError(
            f"overflow detected, cannot fit {raw} into {binding.kind}",
            binding.name,
            binding.kind,
            raw,
        )
    if binding.kind is Kind.FLOAT32:
        n = struct.unpack("f", struct.pack("f", n))[0]
    return n


def coerce(binding: Binding, raw: str) -> Any:
    """Convert one raw value to the binding's declared kind, or raise."""
    family = binding.kind.family
    if family == "string":
        return raw
    elif family == "bool":
        return raw.casefold() == "true"
    elif family == "int":
        return _coerce_signed(binding, raw)
    elif family == "uint":
        return _coerce_unsigned(binding, raw)
    elif family == "float":
        return _coerce_float(binding, raw)
    raise UnsupportedTypeError(binding.name, binding.kind)


def check_bindings(bindings: Sequence[Binding]) -> None:
    """Warn about names that appear more than once in a binding table."""
    seen: Dict[str, Binding] = {}
    for binding in bindings:
        if binding.name in seen:
            warnings.warn(
                f"Field name '{binding.name}' appears more than once; every"
                " binding with this name will receive the same value.",
                category=FlagbindWarning,
                stacklevel=3,
            )
        seen[binding.name] = binding


def bind(bindings: Sequence[Binding], flag_map: Mapping[str, str]) -> None:
    """Assign every binding from a flag map.

    Missing flags are treated as present with an empty value: strings become
    `""`, booleans become `False`, and numeric fields fail to parse.

    Raises:
        MalformedLiteralError: A value isn't a literal of the field's kind.
        ValueOverflowError: A parsed number doesn't fit the field's width.
        UnderflowError: A value for an unsigned field contains `-`.
    """
    check_bindings(bindings)
    for binding in bindings:
        binding.setter(coerce(binding, flag_map.get(binding.name, "")))
