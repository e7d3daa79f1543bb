"""Utilities for formatting terminal output."""

from __future__ import annotations

import functools
import re
import shutil
from typing import List

import termcolor


@functools.lru_cache(maxsize=None)
def _get_ansi_pattern() -> re.Pattern:
    # https://stackoverflow.com/a/14693789
    return re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


def strip_ansi_sequences(x: str) -> str:
    return _get_ansi_pattern().sub("", x)


def format_flag(name: str) -> str:
    return termcolor.colored(f"--{name}", attrs=["bold"])


def boxed(title: str, *lines: str, color: str = "red") -> str:
    """Draw a box around some lines of text, with a bold title on the top
    border."""
    width = min(
        shutil.get_terminal_size((80, 24)).columns,
        max(
            [len(strip_ansi_sequences(line)) for line in lines]
            + [len(strip_ansi_sequences(title)) + 2]
        )
        + 4,
    )

    def border(x: str) -> str:
        return termcolor.colored(x, color)

    title_part = " " + termcolor.colored(title, color, attrs=["bold"]) + " "
    title_len = len(strip_ansi_sequences(title_part))
    out: List[str] = [
        border("╭─") + title_part + border("─" * max(0, width - title_len - 3) + "╮")
    ]
    for line in lines:
        pad = max(0, width - len(strip_ansi_sequences(line)) - 4)
        out.append(border("│ ") + line + " " * pad + border(" │"))
    out.append(border("╰" + "─" * (width - 2) + "╯"))
    return "\n".join(out)
