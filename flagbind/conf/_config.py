from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Config:
    """Parser-wide configuration.

    Reserved for future options. An instance can be passed to
    :func:`flagbind.parse()` and :func:`flagbind.cli()` today and is ignored.
    """
