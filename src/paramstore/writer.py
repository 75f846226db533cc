"""Writer layer: renders Values and stores back to the persisted text form."""

from __future__ import annotations

from collections.abc import Iterable

from .config import DEFAULT_CONFIG, FormatConfig
from .entry import Entry
from .values import Value, VList


def render_value(value: Value, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Render a scalar as its text and a list as ``LIST-[e1, e2, ...]``.

    Nested lists render to their own ``LIST-[...]`` substring before the
    parent joins them.
    """
    if isinstance(value, VList):
        inner = config.element_separator.join(render_value(v, config) for v in value.items)
        return f"{config.list_prefix}{inner}{config.list_suffix}"
    return str(value)


def render_entry(key: str, value: Value, config: FormatConfig = DEFAULT_CONFIG) -> str:
    return f"{key}{config.key_separator}{render_value(value, config)}\n"


def render_entries(entries: Iterable[Entry], config: FormatConfig = DEFAULT_CONFIG) -> str:
    return "".join(render_entry(e.key, e.value, config) for e in entries)
