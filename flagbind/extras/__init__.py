"""The :mod:`flagbind.extras` submodule contains helpers that complement
:func:`flagbind.parse()`, but aren't needed for binding arguments."""

from ._serialization import to_args as to_args
