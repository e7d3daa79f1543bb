"""Helpers for deriving binding tables from struct types.

Structs are dataclasses or attrs classes. Each field's annotation is resolved
to a :class:`Kind` once, before any argument is read, so unsupported field
types are reported up front rather than partway through binding.
"""

from __future__ import annotations

import dataclasses
import functools
import sys
from typing import Any, Callable, Dict, List, Tuple, Type

from typing_extensions import Annotated, get_args, get_origin, get_type_hints

from ._binder import Binding
from ._errors import InvalidDestinationError, UnsupportedTypeError
from ._kinds import Kind

_kind_from_builtin: Dict[Any, Kind] = {
    str: Kind.STRING,
    bool: Kind.BOOL,
    int: Kind.INT64,
    float: Kind.FLOAT64,
}
_builtin_from_family: Dict[str, Any] = {
    "string": str,
    "bool": bool,
    "int": int,
    "uint": int,
    "float": float,
}


def _attrs_module() -> Any:
    # attr will already be imported if it's used.
    if "attr" not in sys.modules.keys():
        return None
    import attr

    return attr


def is_struct_type(cls: Any) -> bool:
    if not isinstance(cls, type):
        return False
    if dataclasses.is_dataclass(cls):
        return True
    attr = _attrs_module()
    return attr is not None and attr.has(cls)


def kind_from_annotation(field_name: str, typ: Any) -> Kind:
    """Resolve a field annotation to a kind.

    Examples:
        str                                  => Kind.STRING
        int                                  => Kind.INT64
        Annotated[int, Kind.UINT16]          => Kind.UINT16
        Annotated[float, "doc", Kind.FLOAT32] => Kind.FLOAT32
    """
    if get_origin(typ) is Annotated:
        base, *metadata = get_args(typ)
        kinds = [m for m in metadata if isinstance(m, Kind)]
        if len(kinds) == 0:
            return kind_from_annotation(field_name, base)

        # Nested Annotated types are flattened; the outermost marker wins.
        kind = kinds[-1]
        if _builtin_from_family[kind.family] is not base:
            raise UnsupportedTypeError(field_name, typ)
        return kind

    for builtin, kind in _kind_from_builtin.items():
        if typ is builtin:
            return kind
    raise UnsupportedTypeError(field_name, typ)


def struct_fields(cls: Type) -> List[Tuple[str, Kind]]:
    """Get `(name, kind)` pairs for every init-able field of a struct type, in
    declaration order."""
    assert is_struct_type(cls)

    hints = get_type_hints(cls, include_extras=True)
    out: List[Tuple[str, Kind]] = []

    if dataclasses.is_dataclass(cls):
        for field in dataclasses.fields(cls):
            if not field.init:
                continue
            kind = kind_from_annotation(field.name, hints[field.name])
            out.append((field.name, kind))
        return out

    attr = _attrs_module()
    for attr_field in attr.fields(cls):
        if not attr_field.init:
            continue
        typ = hints.get(attr_field.name, attr_field.type)
        out.append((attr_field.name, kind_from_annotation(attr_field.name, typ)))
    return out


def _init_names(cls: Type) -> Dict[str, str]:
    """Map field names to constructor parameter names. These differ for private
    attrs attributes: `_x` is passed to `__init__` as `x`."""
    if dataclasses.is_dataclass(cls):
        return {field.name: field.name for field in dataclasses.fields(cls)}

    attr = _attrs_module()
    return {
        attr_field.name: getattr(attr_field, "alias", None)
        or attr_field.name.lstrip("_")
        for attr_field in attr.fields(cls)
    }


def check_destination(dest: Any) -> None:
    """Raise :class:`InvalidDestinationError` unless `dest` is a non-None,
    mutable struct instance."""
    if dest is None:
        raise InvalidDestinationError("destination cannot be None")
    if isinstance(dest, type):
        raise InvalidDestinationError(
            f"expected a struct instance, received the class {dest.__name__}"
        )
    if not is_struct_type(type(dest)):
        raise InvalidDestinationError(
            "expected a dataclass or attrs instance, received"
            f" {type(dest).__name__}"
        )
    params = getattr(type(dest), "__dataclass_params__", None)
    if params is not None and params.frozen:
        raise InvalidDestinationError(
            f"destination {type(dest).__name__} is a frozen dataclass"
        )

    attr = _attrs_module()
    if attr is not None and attr.has(type(dest)):
        fields = attr.fields(type(dest))
        if len(fields) > 0:
            # attrs doesn't expose frozenness; a no-op assignment reveals it.
            name = fields[0].name
            try:
                setattr(dest, name, getattr(dest, name))
            except attr.exceptions.FrozenInstanceError:
                raise InvalidDestinationError(
                    f"destination {type(dest).__name__} is a frozen attrs instance"
                ) from None


def make_bindings(
    cls: Type, setter_from_name: Callable[[str], Callable[[Any], None]]
) -> List[Binding]:
    return [
        Binding(name=name, kind=kind, setter=setter_from_name(name))
        for name, kind in struct_fields(cls)
    ]


def bindings_from_struct(dest: Any) -> List[Binding]:
    """Build a binding table that writes into the fields of a struct instance."""
    check_destination(dest)
    return make_bindings(
        type(dest), lambda name: functools.partial(setattr, dest, name)
    )


def bindings_from_struct_type(cls: Type, kwargs: Dict[str, Any]) -> List[Binding]:
    """Build a binding table that collects values into `kwargs`, for calling a
    struct type's constructor."""
    if not is_struct_type(cls):
        raise InvalidDestinationError(
            f"expected a dataclass or attrs class, received {cls}"
        )
    init_names = _init_names(cls)
    return make_bindings(
        cls, lambda name: functools.partial(kwargs.__setitem__, init_names[name])
    )
