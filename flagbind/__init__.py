"""Bind command-line flags to typed struct fields, with strict range checks."""

from . import conf as conf
from . import extras as extras
from ._binder import Binding as Binding
from ._binder import bind as bind
from ._cli import cli as cli
from ._errors import BindingError as BindingError
from ._errors import FlagbindError as FlagbindError
from ._errors import InvalidDestinationError as InvalidDestinationError
from ._errors import MalformedLiteralError as MalformedLiteralError
from ._errors import UnderflowError as UnderflowError
from ._errors import UnsupportedTypeError as UnsupportedTypeError
from ._errors import ValueOverflowError as ValueOverflowError
from ._kinds import Kind as Kind
from ._parse import bind_args as bind_args
from ._parse import parse as parse
from ._struct import bindings_from_struct as bindings_from_struct
from ._tokenizer import tokenize as tokenize
from ._warnings import FlagbindWarning as FlagbindWarning

__version__ = "0.1.0"
