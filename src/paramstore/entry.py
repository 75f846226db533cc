"""Entry — a single key/value pair of a ParamStore."""

from __future__ import annotations

from dataclasses import dataclass

from .values import Value


@dataclass
class Entry:
    key: str
    value: Value
