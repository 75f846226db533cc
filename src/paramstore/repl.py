"""ParamShell — interactive editing of a ParamStore.

Also provides the ``paramstore-shell`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import sys
from typing import IO

from .fileio import load, save
from .reader import parse_value
from .store import ParamStore
from .values import Value, VList, VScalar, _Empty
from .writer import render_value


# ---------------------------------------------------------------------------
# ParamShell class (programmatic use)
# ---------------------------------------------------------------------------

class ParamShell:
    """Stateful shell around a single ParamStore.

    Usage::

        shell = ParamShell()
        shell.set("tags", "LIST-[x, y]")
        shell.get("tags")        # → VList([VScalar("x"), VScalar("y")])
        shell.store              # the edited store
        shell.reset()            # drop all entries
        shell.close()            # hand the store back

    While attached, the shell collects missing keys reported by the
    store's ``on_invalid`` in ``missing``.  :meth:`close` (or leaving a
    ``with`` block) restores the callback the store had before.
    """

    def __init__(self, store: ParamStore | None = None) -> None:
        self.missing: list[str] = []
        self._attach(store if store is not None else ParamStore())

    def __enter__(self) -> ParamShell:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _attach(self, store: ParamStore) -> None:
        self.store = store
        self._previous_on_invalid = store.on_invalid
        store.on_invalid = self.missing.append

    def close(self) -> None:
        """Restore the store's own ``on_invalid`` callback."""
        self.store.on_invalid = self._previous_on_invalid

    def set(self, key: str, raw: str) -> Value:
        """Parse *raw* with the file grammar and store it under *key*."""
        value = parse_value(raw)
        self.store.set(key, value)
        return value

    def get(self, key: str) -> Value | _Empty:
        return self.store.get(key)

    def load(self, path: str) -> None:
        loaded = load(path)
        self.close()
        self._attach(loaded)

    def reset(self) -> None:
        self.store.clear()
        self.missing.clear()


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_inspect(value: Value | _Empty, indent: int = 0) -> str:
    """Pretty-print a value for inspect() / i()."""
    pad = "  " * indent
    if isinstance(value, _Empty):
        return f"{pad}Empty"
    if isinstance(value, VScalar):
        return f'{pad}"{value.text}"'
    if not value.items:
        return f"{pad}VList []"
    lines = [f"{pad}VList ["]
    for i, v in enumerate(value.items, 1):
        if isinstance(v, VList):
            lines.append(f"{pad}  {i}:")
            lines.append(_fmt_inspect(v, indent + 2))
        else:
            lines.append(f'{pad}  {i}: "{v.text}"')
    lines.append(f"{pad}]")
    return "\n".join(lines)


def _show_keys(shell: ParamShell, dest: IO[str]) -> None:
    if shell.store.is_empty():
        print("  (no parameters defined)", file=dest)
        return
    width = max(len(k) for k in shell.store)
    for key, value in shell.store.items():
        print(f"  {key:<{width}} : {render_value(value)}", file=dest)


def _check_keys(shell: ParamShell, keys: list[str], dest: IO[str]) -> None:
    shell.missing.clear()
    if shell.store.validate(*keys):
        print("  ok", file=dest)
    else:
        print(f"  missing: {', '.join(shell.missing)}", file=dest)


def _process_line(shell: ParamShell, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":keys":
        _show_keys(shell, dest)
        return True

    if line == ":reset":
        shell.reset()
        return True

    if line.startswith(":load "):
        filepath = line[6:].strip()
        try:
            shell.load(filepath)
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return True

    if line.startswith(":save "):
        save(shell.store, line[6:].strip())
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if line.startswith(prefix) and line.endswith(")"):
            key = line[len(prefix):-1].strip()
            print(_fmt_inspect(shell.get(key)), file=dest)
            return True

    # ── Entry commands ────────────────────────────────────────────────────
    command, _, rest = line.partition(" ")
    rest = rest.strip()

    if command == "get" and rest:
        print(shell.store.get_string(rest), file=dest)
        return True

    if command == "set" and rest:
        key, _, raw = rest.partition(" ")
        shell.set(key, raw.strip())
        return True

    if command == "del" and rest:
        shell.store.remove(rest)
        return True

    if command == "check" and rest:
        _check_keys(shell, rest.split(), dest)
        return True

    print(f"Unknown command: {line}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Interactive shell (``paramstore-shell`` / ``python -m paramstore.repl``)."""
    shell = ParamShell()
    if len(sys.argv) > 1:
        shell.load(sys.argv[1])

    print("paramstore  (:q to quit  |  :keys  :reset  :load <path>  :save <path>  |  get/set/del/check  i(<key>))")

    while True:
        try:
            line = input("PARAM> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(shell, line, sys.stdout):
            break


if __name__ == "__main__":
    main()
