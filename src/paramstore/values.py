"""Value types for paramstore."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class VScalar:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass
class VList:
    items: list["Value"] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def __len__(self) -> int:
        return len(self.items)


class _Empty:
    """Singleton for missing keys."""

    _instance: "_Empty | None" = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Empty"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""


Empty = _Empty()

Value = Union[VScalar, VList]


def to_value(obj: Any) -> Value:
    """Convert a plain Python object to a Value.

    - Value instances are returned unchanged
    - ``bool`` → ``"true"`` / ``"false"``
    - list / tuple → VList, recursively
    - everything else → VScalar of ``str(obj)``
    """
    if isinstance(obj, (VScalar, VList)):
        return obj
    if isinstance(obj, bool):
        return VScalar("true" if obj else "false")
    if isinstance(obj, (list, tuple)):
        return VList([to_value(o) for o in obj])
    return VScalar(str(obj))


def to_python(value: Value) -> Any:
    """Return *value* as plain ``str`` / nested ``list`` objects."""
    if isinstance(value, VList):
        return [to_python(v) for v in value.items]
    if isinstance(value, _Empty):
        return None
    return value.text
