"""Reader layer: converts persisted text into Values and store entries."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .config import DEFAULT_CONFIG, FormatConfig
from .entry import Entry
from .errors import MalformedLineError
from .values import Value, VList, VScalar


_ELEMENT_SEP_RE = re.compile(r"\s*,\s*")


# ---------------------------------------------------------------------------
# List literals
# ---------------------------------------------------------------------------

def is_list(raw: str, config: FormatConfig = DEFAULT_CONFIG) -> bool:
    """Return True if *raw* carries the list prefix and suffix."""
    return (
        len(raw) >= len(config.list_prefix) + len(config.list_suffix)
        and raw.startswith(config.list_prefix)
        and raw.endswith(config.list_suffix)
    )


def split_elements(interior: str, config: FormatConfig = DEFAULT_CONFIG) -> list[str]:
    """Split a list interior on commas at nesting depth zero.

    Depth goes up on the list prefix and down on the list suffix, so a
    nested ``LIST-[...]`` group stays one token.  Elements are not escaped:
    a scalar containing a comma is split in two, and a ``]`` inside a
    nested group closes it early.

    Whitespace around each comma is dropped.  Trailing empty tokens are
    dropped as well, which keeps files written with a trailing ``", "``
    loadable.
    """
    prefix, suffix = config.list_prefix, config.list_suffix
    tokens: list[str] = []
    depth = 0
    start = 0
    i = 0
    while i < len(interior):
        if interior.startswith(prefix, i):
            depth += 1
            i += len(prefix)
            continue
        if interior.startswith(suffix, i) and depth > 0:
            depth -= 1
            i += len(suffix)
            continue
        if depth == 0:
            m = _ELEMENT_SEP_RE.match(interior, i)
            if m:
                tokens.append(interior[start:i])
                start = i = m.end()
                continue
        i += 1
    tokens.append(interior[start:])

    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_list(raw: str, config: FormatConfig = DEFAULT_CONFIG) -> VList:
    """Decompose a ``LIST-[...]`` literal into a VList, recursing into nested groups."""
    interior = raw[len(config.list_prefix):len(raw) - len(config.list_suffix)]
    items: list[Value] = []
    for token in split_elements(interior, config):
        if is_list(token, config):
            items.append(parse_list(token, config))
        else:
            items.append(VScalar(token))
    return VList(items)


def parse_value(raw: str, config: FormatConfig = DEFAULT_CONFIG) -> Value:
    """Classify raw value text as list or scalar."""
    if is_list(raw, config):
        return parse_list(raw, config)
    return VScalar(raw)


# ---------------------------------------------------------------------------
# Lines
# ---------------------------------------------------------------------------

def split_line(
    line: str,
    config: FormatConfig = DEFAULT_CONFIG,
    *,
    line_number: int = 0,
) -> tuple[str, str]:
    """Split *line* on the first key separator into ``(key, raw_value)``."""
    parts = line.split(config.key_separator, 1)
    if len(parts) != 2:
        raise MalformedLineError(line, line_number=line_number)
    return parts[0], parts[1]


def parse_line(
    line: str,
    config: FormatConfig = DEFAULT_CONFIG,
    *,
    line_number: int = 0,
) -> Entry:
    key, raw = split_line(line, config, line_number=line_number)
    return Entry(key, parse_value(raw, config))


def iter_entries(
    lines: Iterable[str],
    config: FormatConfig = DEFAULT_CONFIG,
):
    """Yield an Entry per line.

    Line endings are stripped; blank lines are skipped when the config
    allows it.  Raises MalformedLineError at the first bad line, after
    every earlier entry has been yielded.
    """
    for number, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")
        if config.skip_blank_lines and not line.strip():
            continue
        yield parse_line(line, config, line_number=number)
