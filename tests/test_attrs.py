import sys

import attr
import pytest

import flagbind
from flagbind import conf


def test_attrs_negative_value_needs_equals() -> None:
    @attr.s(auto_attribs=True)
    class Args:
        x: conf.Int32 = 0

    # `-3` is read as a short flag, leaving `--x` without a value.
    with pytest.raises(flagbind.MalformedLiteralError):
        flagbind.parse(Args(), args=["--x", "-3"])


def test_attrs_values() -> None:
    @attr.s(auto_attribs=True)
    class Args:
        x: conf.Int32 = 0
        name: str = ""

    args = flagbind.parse(Args(), args=["--x=-3", "--name", "a"])
    assert args == Args(x=-3, name="a")


def test_attrs_untyped_attribute() -> None:
    @attr.s
    class Args:
        x = attr.ib(type=int, default=0)

    assert flagbind.parse(Args(), args=["--x=12"]) == Args(x=12)


def test_attrs_class_with_cli() -> None:
    @attr.s(auto_attribs=True)
    class Args:
        port: conf.UInt16
        host: str = "localhost"

    assert flagbind.cli(Args, args=["--port=80", "--host=example.com"]) == Args(
        port=80, host="example.com"
    )


def test_attrs_overflow() -> None:
    @attr.s(auto_attribs=True)
    class Args:
        port: conf.UInt16 = 0

    with pytest.raises(flagbind.ValueOverflowError):
        flagbind.parse(Args(), args=["--port=65536"])


def test_attrs_frozen_instance(monkeypatch: pytest.MonkeyPatch) -> None:
    @attr.s(auto_attribs=True, frozen=True)
    class Args:
        x: int = 0

    # Arguments must not be read for invalid destinations.
    monkeypatch.delattr(sys, "argv")
    with pytest.raises(flagbind.InvalidDestinationError):
        flagbind.parse(Args())
    with pytest.raises(flagbind.InvalidDestinationError):
        flagbind.cli(Args())


def test_attrs_frozen_instance_with_args() -> None:
    @attr.s(auto_attribs=True, frozen=True)
    class Args:
        x: int = 0

    args = Args()
    with pytest.raises(flagbind.InvalidDestinationError):
        flagbind.parse(args, args=["--x=1"])
    assert args.x == 0


def test_attrs_private_attribute() -> None:
    @attr.s(auto_attribs=True)
    class Args:
        _x: conf.UInt8 = 0
        name: str = ""

    # Flags use the attribute name; the constructor takes the alias.
    out = flagbind.cli(Args, args=["--_x=7", "--name=n"])
    assert out == Args(x=7, name="n")
    assert flagbind.parse(Args(), args=["--_x=9", "--name=m"]) == Args(x=9, name="m")
