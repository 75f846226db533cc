"""paramstore — typed parameter store with a line-based text format."""

from .config import DEFAULT_CONFIG, LEGACY_CONFIG, FormatConfig
from .entry import Entry
from .errors import (
    EmptyValueError,
    MalformedLineError,
    ParamStoreError,
    TypeCoercionError,
)
from .fileio import create, dumps, entry, load, loads, save
from .coerce import CoercedList
from .store import ParamStore
from .values import Empty, Value, VList, VScalar, _Empty, to_python, to_value
from .repl import ParamShell

__all__ = [
    "load",
    "loads",
    "save",
    "dumps",
    "create",
    "entry",
    "Entry",
    "ParamStore",
    "CoercedList",
    "Empty",
    "Value",
    "VList",
    "VScalar",
    "to_python",
    "to_value",
    "FormatConfig",
    "DEFAULT_CONFIG",
    "LEGACY_CONFIG",
    "ParamStoreError",
    "MalformedLineError",
    "TypeCoercionError",
    "EmptyValueError",
    "ParamShell",
]
