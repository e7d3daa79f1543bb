"""Helpers for turning populated structs back into command-line arguments."""

from __future__ import annotations

from typing import Any, List

from .. import _struct
from .._errors import InvalidDestinationError
from .._kinds import Kind


def _format_value(kind: Kind, value: Any) -> str:
    if kind is Kind.BOOL:
        return "true" if value else "false"
    elif kind.family == "float":
        return repr(float(value))
    return str(value)


def to_args(record: Any) -> List[str]:
    """Serialize a struct instance to `--name=value` arguments.

    Parsing the output with :func:`flagbind.parse()` reproduces the record's
    field values. Every value is attached with `=`, so strings that start with
    a dash or are empty survive the round trip.

    .. code-block:: python

        args = flagbind.extras.to_args(config)
        subprocess.run(["python", "train.py", *args])
    """
    if not _struct.is_struct_type(type(record)):
        raise InvalidDestinationError(
            "expected a dataclass or attrs instance, received"
            f" {type(record).__name__}"
        )
    return [
        f"--{name}={_format_value(kind, getattr(record, name))}"
        for name, kind in _struct.struct_fields(type(record))
    ]
