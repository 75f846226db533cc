"""Format configuration for paramstore."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class FormatConfig:
    """Grammar tokens and loader policy.

    Parameters
    ----------
    key_separator : str
        Separator between key and value. The first occurrence splits the
        line, so values may contain it again.
    list_prefix : str
        Opening token of a list literal.
    list_suffix : str
        Closing token of a list literal.
    element_separator : str
        Separator written between list elements. The reader splits on the
        comma with any surrounding whitespace.
    skip_blank_lines : bool
        Ignore blank lines on load. When False a blank line is a syntax
        error, as in the older file variant.
    sort_keys : bool
        Write entries in lexicographic key order.
    encoding : str
        Text encoding of persisted files.
    """

    key_separator: str = ": "
    list_prefix: str = "LIST-["
    list_suffix: str = "]"
    element_separator: str = ", "
    skip_blank_lines: bool = True
    sort_keys: bool = True
    encoding: str = "utf-8"


DEFAULT_CONFIG = FormatConfig()

# Files written before list support: " : " separator, no blank lines.
LEGACY_CONFIG = FormatConfig(key_separator=" : ", skip_blank_lines=False)
