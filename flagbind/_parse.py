"""Entry points that read arguments and bind them."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TypeVar

from . import _binder, _struct, _tokenizer
from .conf import Config

StructT = TypeVar("StructT")


def _get_args(args: Optional[Sequence[str]]) -> Sequence[str]:
    return sys.argv[1:] if args is None else args


def bind_args(
    bindings: Sequence[_binder.Binding],
    args: Optional[Sequence[str]] = None,
) -> None:
    """Tokenize arguments and bind them through an explicit binding table.

    Args:
        bindings: Table of `(name, kind, setter)` entries describing the
            destination.
        args: Arguments to parse, excluding the program name. Defaults to
            `sys.argv[1:]`.
    """
    _binder.bind(bindings, _tokenizer.tokenize(_get_args(args)))


def parse(
    dest: StructT,
    config: Optional[Config] = None,
    *,
    args: Optional[Sequence[str]] = None,
) -> StructT:
    """Populate the fields of a dataclass or attrs instance from command-line
    arguments.

    Field names are matched exactly against flag names. `str`, `bool`, `int`
    and `float` fields are supported; `int` and `float` default to 64 bits,
    and narrower widths are declared with the markers in :mod:`flagbind.conf`.
    Numbers that don't fit the declared width are rejected rather than
    truncated.

    Args:
        dest: Struct instance to write into. Fields are assigned in declaration
            order; if a field fails, later fields are left untouched.
        config: Reserved for future use. Currently ignored.
        args: If set, parse these strings instead of `sys.argv[1:]`.

    Returns:
        `dest`, for convenience.

    Raises:
        InvalidDestinationError: `dest` isn't a non-None, mutable struct
            instance. Raised before arguments are read.
        UnsupportedTypeError: A field's annotation isn't a supported type.
        MalformedLiteralError: A value isn't a literal of its field's type.
        ValueOverflowError: A number doesn't fit its field's width.
        UnderflowError: A value for an unsigned field contains `-`.
    """
    del config
    bindings = _struct.bindings_from_struct(dest)
    bind_args(bindings, args)
    return dest
