"""The :mod:`flagbind.conf` submodule contains the reserved parser
configuration object and annotations for declaring numeric field widths."""

from ._config import Config as Config
from ._markers import Float32 as Float32
from ._markers import Float64 as Float64
from ._markers import Int8 as Int8
from ._markers import Int16 as Int16
from ._markers import Int32 as Int32
from ._markers import Int64 as Int64
from ._markers import UInt8 as UInt8
from ._markers import UInt16 as UInt16
from ._markers import UInt32 as UInt32
from ._markers import UInt64 as UInt64
