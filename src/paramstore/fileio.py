"""Loading and saving ParamStores.

Usage::

    store = load("settings.txt")        # empty store if the file is missing
    store.get_integer("age")
    store.set("tags", ["x", "y"])
    save(store, "settings.txt")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable

from .config import DEFAULT_CONFIG, FormatConfig
from .entry import Entry
from .errors import MalformedLineError
from .reader import iter_entries
from .store import ParamStore
from .values import to_value
from .writer import render_entries

_logger = logging.getLogger(__name__)

PathLike = str | os.PathLike


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------

def entry(key: str, value: Any) -> Entry:
    """Create an Entry, converting *value* to a Value."""
    return Entry(key, to_value(value))


def create(*entries: Entry, on_invalid: Callable[[str], Any] | None = None) -> ParamStore:
    """Create a ParamStore holding *entries*."""
    store = ParamStore() if on_invalid is None else ParamStore(on_invalid=on_invalid)
    for e in entries:
        store.set_entry(e)
    return store


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def _split_lines(text: str) -> list[str]:
    """Split on ``\\n`` only; other Unicode line breaks belong to the value."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _read_into(store: ParamStore, lines, config: FormatConfig, strict: bool, source: str) -> ParamStore:
    try:
        for e in iter_entries(lines, config):
            store.set_entry(e)
    except MalformedLineError as exc:
        if strict:
            raise
        _logger.warning(
            "Invalid syntax in %s at line %d: %r", source, exc.line_number, exc.line
        )
    return store


def loads(
    text: str,
    config: FormatConfig = DEFAULT_CONFIG,
    *,
    strict: bool = False,
    on_invalid: Callable[[str], Any] | None = None,
) -> ParamStore:
    """Parse *text* into a ParamStore.

    Parsing stops at the first line without a key separator; the entries
    read before it are kept.  With ``strict=True`` the
    :class:`MalformedLineError` is raised instead.
    """
    return _read_into(create(on_invalid=on_invalid), _split_lines(text), config, strict, "<string>")


def dumps(store: ParamStore, config: FormatConfig = DEFAULT_CONFIG) -> str:
    """Render *store* as persisted text, one line per entry."""
    return render_entries(store.entries(sort=config.sort_keys), config)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

def load(
    path: PathLike,
    config: FormatConfig = DEFAULT_CONFIG,
    *,
    strict: bool = False,
    on_invalid: Callable[[str], Any] | None = None,
) -> ParamStore:
    """Load a ParamStore from *path*.

    A missing file yields an empty store.  Other I/O errors propagate.
    """
    path = Path(path)
    store = create(on_invalid=on_invalid)
    if not path.exists():
        _logger.debug("No parameter file at %s; starting empty", path)
        return store
    with path.open(encoding=config.encoding, newline="") as fh:
        _read_into(store, _split_lines(fh.read()), config, strict, str(path))
    _logger.debug("Loaded %d entries from %s", len(store), path)
    return store


def save(store: ParamStore, path: PathLike, config: FormatConfig = DEFAULT_CONFIG) -> Path:
    """Write *store* to *path*, replacing any existing file.

    I/O failures are logged and swallowed; the path is returned either way.
    """
    path = Path(path)
    try:
        with path.open("w", encoding=config.encoding, newline="\n") as fh:
            fh.write(dumps(store, config))
    except OSError:
        _logger.exception("Could not save parameters to %s", path)
        return path
    _logger.debug("Saved %d entries to %s", len(store), path)
    return path
