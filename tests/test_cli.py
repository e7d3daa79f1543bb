import contextlib
import dataclasses
import io

import pytest

import flagbind
from flagbind import _strings, conf


@dataclasses.dataclass
class Args:
    name: str
    port: conf.UInt16
    verbose: bool = False


def test_cli_from_class() -> None:
    assert flagbind.cli(Args, args=["--name=db", "--port", "5432"]) == Args(
        name="db", port=5432, verbose=False
    )


def test_cli_from_instance() -> None:
    args = Args(name="x", port=1)
    out = flagbind.cli(args, args=["--name", "y", "--port=2", "--verbose=true"])
    assert out is args
    assert args == Args(name="y", port=2, verbose=True)


@pytest.mark.parametrize(
    "argv,title",
    [
        (["--name=a", "--port=70000"], "Value out of range"),
        (["--name=a", "--port=-1"], "Negative value for unsigned argument"),
        (["--name=a", "--port=abc"], "Invalid value"),
        (["--name=a"], "Invalid value"),
    ],
)
def test_cli_error_exits(argv, title: str) -> None:
    target = io.StringIO()
    with pytest.raises(SystemExit) as e, contextlib.redirect_stderr(target):
        flagbind.cli(Args, args=argv)
    assert e.value.code == 2

    message = _strings.strip_ansi_sequences(target.getvalue())
    assert title in message
    assert "--port" in message
    assert "uint16" in message


def test_cli_no_console_outputs() -> None:
    target = io.StringIO()
    with pytest.raises(SystemExit), contextlib.redirect_stderr(target):
        flagbind.cli(Args, args=["--port=x"], console_outputs=False)
    assert target.getvalue() == ""


def test_cli_definition_errors_are_raised() -> None:
    @dataclasses.dataclass
    class Bad:
        x: complex = 0j

    with pytest.raises(flagbind.UnsupportedTypeError):
        flagbind.cli(Bad, args=[])
    with pytest.raises(flagbind.InvalidDestinationError):
        flagbind.cli(int, args=[])
    with pytest.raises(flagbind.InvalidDestinationError):
        flagbind.cli(None, args=[])


def test_boxed() -> None:
    out = _strings.strip_ansi_sequences(_strings.boxed("Title", "line one", "two"))
    lines = out.split("\n")
    assert "Title" in lines[0]
    assert lines[1].startswith("│ line one")
    assert len({len(line) for line in lines}) == 1
