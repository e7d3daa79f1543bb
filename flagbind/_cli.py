"""Core public API for scripts."""

from __future__ import annotations

import sys
from typing import (
    Any,
    Dict,
    NoReturn,
    Optional,
    Sequence,
    Type,
    TypeVar,
    Union,
    overload,
)

from . import _errors, _parse, _strings, _struct
from ._kinds import Kind
from .conf import Config

OutT = TypeVar("OutT")


def _describe_kind(kind: Kind) -> str:
    if kind.family in ("int", "uint"):
        lo, hi = kind.bounds
        return f"{kind} (between {lo} and {hi})"
    elif kind.family == "float":
        return f"{kind} (magnitude at most {kind.bounds[1]:g})"
    return str(kind)


def error_and_exit(e: _errors.BindingError, console_outputs: bool) -> NoReturn:
    if console_outputs:
        if isinstance(e, _errors.ValueOverflowError):
            title = "Value out of range"
        elif isinstance(e, _errors.UnderflowError):
            title = "Negative value for unsigned argument"
        else:
            title = "Invalid value"
        print(
            _strings.boxed(
                title,
                f"Argument {_strings.format_flag(e.field_name)}: {e.args[0]}",
                f"Received: '{e.raw_value}'",
                f"Expected: {_describe_kind(e.kind)}",
            ),
            file=sys.stderr,
            flush=True,
        )
    sys.exit(2)


@overload
def cli(
    target: Type[OutT],
    *,
    args: Optional[Sequence[str]] = None,
    config: Optional[Config] = None,
    console_outputs: bool = True,
) -> OutT: ...


@overload
def cli(
    target: OutT,
    *,
    args: Optional[Sequence[str]] = None,
    config: Optional[Config] = None,
    console_outputs: bool = True,
) -> OutT: ...


def cli(
    target: Union[Type[OutT], OutT],
    *,
    args: Optional[Sequence[str]] = None,
    config: Optional[Config] = None,
    console_outputs: bool = True,
) -> OutT:
    """Populate a struct from command-line arguments, exiting on bad input.

    Unlike :func:`flagbind.parse()`, values that can't be bound are reported as
    a formatted message on stderr, followed by `SystemExit(2)`. Errors in the
    struct definition itself are still raised.

    .. code-block:: python

        @dataclasses.dataclass
        class Args:
            name: str
            port: flagbind.conf.UInt16
            verbose: bool

        if __name__ == "__main__":
            args = flagbind.cli(Args)

    Args:
        target: A dataclass or attrs class, which is instantiated from the
            bound values, or an instance of one, which is populated in place.
        args: If set, parse these strings instead of `sys.argv[1:]`.
        config: Reserved for future use. Currently ignored.
        console_outputs: If False, errors are not printed before exiting.

    Returns:
        The populated struct.
    """
    try:
        if isinstance(target, type):
            kwargs: Dict[str, Any] = {}
            bindings = _struct.bindings_from_struct_type(target, kwargs)
            _parse.bind_args(bindings, args)
            return target(**kwargs)  # type: ignore
        return _parse.parse(target, config, args=args)
    except _errors.BindingError as e:
        error_and_exit(e, console_outputs=console_outputs)
