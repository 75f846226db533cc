"""Exception hierarchy for paramstore."""

from __future__ import annotations


class ParamStoreError(Exception):
    """Base exception for all paramstore errors."""


class MalformedLineError(ParamStoreError):
    """A line has no key/value separator.

    The loader stops at the first such line and keeps what it has read so
    far unless it runs in strict mode.
    """

    def __init__(self, line: str, *, line_number: int = 0) -> None:
        self.line = line
        self.line_number = line_number
        super().__init__(f"Invalid syntax at line {line_number}: {line!r}")


class TypeCoercionError(ParamStoreError, ValueError):
    """Stored text cannot be read as the requested type."""

    def __init__(self, text: str, target: str, *, key: str | None = None) -> None:
        self.text = text
        self.target = target
        self.key = key
        where = f" for key {key!r}" if key is not None else ""
        super().__init__(f"Cannot read {text!r} as {target}{where}")


class EmptyValueError(TypeCoercionError, IndexError):
    """Character access on empty text."""
