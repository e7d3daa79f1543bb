"""Exceptions raised by flagbind.

Every error derives from :class:`FlagbindError`. Each one also subclasses the
closest builtin exception, so callers can catch a `ValueError` for bad literals
or a `TypeError` for bad destinations without importing flagbind.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ._kinds import Kind


class FlagbindError(Exception):
    """Base class for all flagbind errors."""


class InvalidDestinationError(FlagbindError, TypeError):
    """Raised when the destination is not a non-None, mutable struct instance."""


class UnsupportedTypeError(FlagbindError, TypeError):
    """Raised when a field's declared type is outside the supported set."""

    def __init__(self, field_name: str, typ: Any) -> None:
        self.field_name = field_name
        self.typ = typ
        super().__init__(f"unsupported type '{typ}' in field '{field_name}'")


class BindingError(FlagbindError):
    """Raised when a raw value cannot be bound to a field."""

    def __init__(self, message: str, field_name: str, kind: Kind, raw_value: str):
        self.field_name = field_name
        self.kind = kind
        self.raw_value = raw_value
        super().__init__(message)


class MalformedLiteralError(BindingError, ValueError):
    """The raw value is not a literal of the field's numeric kind."""


class ValueOverflowError(BindingError, OverflowError):
    """The parsed value lies outside the field's representable range."""


class UnderflowError(BindingError, ValueError):
    """A negative sign was found in a value for an unsigned field."""
