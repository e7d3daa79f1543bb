"""Tokenizer: maps a flat sequence of argument strings to raw flag values.

Supported forms:
```
    --name=value    name -> "value"
    --name value    name -> "value"
    --name          name -> ""
    -abc            a -> "", b -> "", c -> ""
    junk            junk -> ""
```
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Optional, Sequence

FlagMap = Dict[str, str]


def _peek(args_deque: deque[str]) -> Optional[str]:
    return args_deque[0] if len(args_deque) > 0 else None


def tokenize(args: Sequence[str]) -> FlagMap:
    """Convert argument strings (excluding the program name) into a flag map.

    Values are never interpreted here; flags that aren't recognized by the
    destination are simply carried along and ignored later. When a name
    appears more than once, the last occurrence wins.
    """
    out: FlagMap = {}
    args_deque: deque[str] = deque(args)

    while len(args_deque) > 0:
        arg = args_deque.popleft()

        # Long flags, with the value either attached by `=` or in the next token.
        if arg.startswith("--"):
            name, sep, value = arg[2:].partition("=")
            if sep:
                out[name] = value
                continue

            next_arg = _peek(args_deque)
            if next_arg is None or next_arg.startswith("-"):
                out[name] = ""
            else:
                out[name] = args_deque.popleft()
            continue

        # Clusters of single-character flags.
        if arg.startswith("-"):
            for char in arg[1:]:
                out[char] = ""
            continue

        # Junk.
        out[arg] = ""

    return out
