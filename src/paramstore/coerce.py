"""Read-time coercion of stored text into primitive types.

Stored values are always text (see :mod:`paramstore.values`). These pure
functions turn that text into the type a caller asks for and raise
:class:`~paramstore.errors.TypeCoercionError` when the text is not a valid
literal of that type. Nothing is clamped or defaulted.
"""

from __future__ import annotations

import re
import struct
from collections.abc import Callable, Iterator, Sequence
from typing import Any

from .errors import EmptyValueError, TypeCoercionError
from .values import Value, VScalar, _Empty

_INTEGER_RE = re.compile(r"[+-]?\d+")

# Signed ranges of the fixed-width integer accessors.
_INT_RANGES: dict[str, tuple[int, int]] = {
    "byte": (-(2**7), 2**7 - 1),
    "short": (-(2**15), 2**15 - 1),
    "integer": (-(2**31), 2**31 - 1),
    "long": (-(2**63), 2**63 - 1),
}


def to_string(value: Value | _Empty | str, key: str | None = None) -> str:
    """Return the text form of any value. Never raises."""
    if isinstance(value, str):
        return value
    if isinstance(value, VScalar):
        return value.text
    return str(value)


def _to_int(value, kind: str, key: str | None) -> int:
    text = to_string(value)
    if not _INTEGER_RE.fullmatch(text):
        raise TypeCoercionError(text, kind, key=key)
    number = int(text)
    low, high = _INT_RANGES[kind]
    if not low <= number <= high:
        raise TypeCoercionError(text, kind, key=key)
    return number


def to_byte(value, key: str | None = None) -> int:
    return _to_int(value, "byte", key)


def to_short(value, key: str | None = None) -> int:
    return _to_int(value, "short", key)


def to_integer(value, key: str | None = None) -> int:
    return _to_int(value, "integer", key)


def to_long(value, key: str | None = None) -> int:
    return _to_int(value, "long", key)


def _to_floating(value, kind: str, key: str | None) -> float:
    text = to_string(value)
    # float() also takes digit separators, which the integer accessors reject
    if "_" in text:
        raise TypeCoercionError(text, kind, key=key)
    try:
        return float(text)
    except ValueError:
        raise TypeCoercionError(text, kind, key=key) from None


def to_double(value, key: str | None = None) -> float:
    return _to_floating(value, "double", key)


def to_float(value, key: str | None = None) -> float:
    """Like :func:`to_double` but rounded to single precision."""
    number = _to_floating(value, "float", key)
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        # Out of single-precision range
        return float("inf") if number > 0 else float("-inf")


def to_boolean(value, key: str | None = None) -> bool:
    """Only ``"true"`` (any case) is True; everything else is False."""
    return to_string(value).lower() == "true"


def to_character(value, key: str | None = None) -> str:
    text = to_string(value)
    if not text:
        raise EmptyValueError(text, "character", key=key)
    return text[0]


class CoercedList(Sequence):
    """Read-only view over list items that coerces each item on access.

    Building the view never validates the items; a bad item only raises
    when it is read.
    """

    def __init__(
        self,
        items: Sequence[Value],
        convert: Callable[..., Any],
        key: str | None = None,
    ) -> None:
        self._items = items
        self._convert = convert
        self._key = key

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return CoercedList(self._items[index], self._convert, self._key)
        return self._convert(self._items[index], key=self._key)

    def __iter__(self) -> Iterator[Any]:
        for item in self._items:
            yield self._convert(item, key=self._key)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (list, tuple, CoercedList)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        name = getattr(self._convert, "__name__", "convert")
        return f"CoercedList({name}, {self._items!r})"

    def to_list(self) -> list[Any]:
        """Coerce every item now and return a plain list."""
        return list(self)
