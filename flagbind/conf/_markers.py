"""Annotations for declaring the width of numeric fields.

Plain `int` and `float` annotations are bound as 64-bit values. Narrower
fields are declared with the aliases below, which attach a :class:`Kind` to
the annotation via :data:`typing.Annotated`:

.. code-block:: python

    @dataclasses.dataclass
    class Args:
        port: flagbind.conf.UInt16
        retries: flagbind.conf.Int8 = 3
"""

from typing_extensions import Annotated

from .._kinds import Kind

Int8 = Annotated[int, Kind.INT8]
Int16 = Annotated[int, Kind.INT16]
Int32 = Annotated[int, Kind.INT32]
Int64 = Annotated[int, Kind.INT64]

UInt8 = Annotated[int, Kind.UINT8]
UInt16 = Annotated[int, Kind.UINT16]
UInt32 = Annotated[int, Kind.UINT32]
UInt64 = Annotated[int, Kind.UINT64]
"""Unsigned fields. Values containing `-` are rejected before parsing."""

Float32 = Annotated[float, Kind.FLOAT32]
"""Single-precision field. Values are range-checked, then rounded to float32."""
Float64 = Annotated[float, Kind.FLOAT64]
