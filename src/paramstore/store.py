"""ParamStore — the key → Value mapping with typed accessors."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from . import coerce
from .coerce import CoercedList
from .entry import Entry
from .errors import TypeCoercionError
from .values import Empty, Value, VList, _Empty, to_value


def _ignore(key: str) -> None:
    pass


@dataclass
class ParamStore:
    """Holds parameters keyed by name.

    Values are kept as text (:class:`VScalar`) or nested lists of text
    (:class:`VList`); the ``get_*`` accessors coerce on every read.

    ``on_invalid`` is called with the first missing key found by
    :meth:`validate`.
    """

    parameters: dict[str, Value] = field(default_factory=dict)
    on_invalid: Callable[[str], Any] = field(default=_ignore, repr=False, compare=False)

    # -- Mapping protocol -----------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self.parameters

    def __len__(self) -> int:
        return len(self.parameters)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.parameters))

    # -- Iteration ------------------------------------------------------

    def is_empty(self) -> bool:
        return not self.parameters

    def items(self, sort: bool = True) -> list[tuple[str, Value]]:
        """Return a copied list of ``(key, value)`` pairs, sorted by key."""
        pairs = list(self.parameters.items())
        if sort:
            pairs.sort(key=lambda kv: kv[0])
        return pairs

    def entries(self, sort: bool = True) -> list[Entry]:
        """Like :meth:`items` but wrapped in :class:`Entry` objects."""
        return [Entry(k, v) for k, v in self.items(sort)]

    def for_each(self, fn: Callable[[Entry], Any]) -> None:
        for e in self.entries():
            fn(e)

    def for_each_pair(self, fn: Callable[[str, Value], Any]) -> None:
        for k, v in self.items():
            fn(k, v)

    # -- Validation -----------------------------------------------------

    def validate(self, *keys: str) -> bool:
        """Return True if every key is present.

        Stops at the first missing key and passes it to ``on_invalid``.
        """
        for key in keys:
            if key not in self.parameters:
                self.on_invalid(key)
                return False
        return True

    # -- Mutation -------------------------------------------------------

    def set(self, key: str, value: Any) -> ParamStore:
        """Store *value* under *key*, converting plain objects to text."""
        self.parameters[key] = to_value(value)
        return self

    def set_entry(self, entry: Entry) -> ParamStore:
        return self.set(entry.key, entry.value)

    def set_all(self, other: ParamStore) -> ParamStore:
        for key, value in other.parameters.items():
            self.set(key, copy.deepcopy(value))
        return self

    def remove(self, key: str) -> ParamStore:
        self.parameters.pop(key, None)
        return self

    def remove_all(self, other: ParamStore) -> ParamStore:
        for key in other.parameters:
            self.remove(key)
        return self

    def clear(self) -> ParamStore:
        self.parameters.clear()
        return self

    def clone(self) -> ParamStore:
        """Return an independent deep copy sharing the same ``on_invalid``."""
        return ParamStore(on_invalid=self.on_invalid).set_all(self)

    # -- Untyped access -------------------------------------------------

    def contains(self, key: str) -> bool:
        return key in self.parameters

    def get(self, key: str) -> Value | _Empty:
        return self.parameters.get(key, Empty)

    def get_list(self, key: str) -> list[Value]:
        return list(self._require_list(key).items)

    def _require_list(self, key: str) -> VList:
        value = self.get(key)
        if not isinstance(value, VList):
            raise TypeCoercionError(coerce.to_string(value), "list", key=key)
        return value

    def _list_view(self, key: str, convert) -> CoercedList:
        return CoercedList(self._require_list(key).items, convert, key)

    # -- Typed access ---------------------------------------------------

    def get_string(self, key: str) -> str:
        return coerce.to_string(self.get(key))

    def get_boolean(self, key: str) -> bool:
        return coerce.to_boolean(self.get(key), key=key)

    def get_character(self, key: str) -> str:
        return coerce.to_character(self.get(key), key=key)

    def get_byte(self, key: str) -> int:
        return coerce.to_byte(self.get(key), key=key)

    def get_short(self, key: str) -> int:
        return coerce.to_short(self.get(key), key=key)

    def get_integer(self, key: str) -> int:
        return coerce.to_integer(self.get(key), key=key)

    def get_long(self, key: str) -> int:
        return coerce.to_long(self.get(key), key=key)

    def get_float(self, key: str) -> float:
        return coerce.to_float(self.get(key), key=key)

    def get_double(self, key: str) -> float:
        return coerce.to_double(self.get(key), key=key)

    # -- Typed list views -----------------------------------------------

    def get_string_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_string)

    def get_boolean_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_boolean)

    def get_character_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_character)

    def get_byte_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_byte)

    def get_short_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_short)

    def get_integer_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_integer)

    def get_long_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_long)

    def get_float_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_float)

    def get_double_list(self, key: str) -> CoercedList:
        return self._list_view(key, coerce.to_double)
