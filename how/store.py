"""TOML-backed storage for saved command snippets.

Entries live in ``how-db.toml`` as an array of tables::

    [[entries]]
    title = "Diff against main"
    code = "git diff [main#from]..[#to]"
    description = "Compare two refs"
    used = 3

Every mutating call rewrites the file straight away, so the file on disk
always matches the in-memory entries.

Example
-------
.. code-block:: python

    from pathlib import Path
    from how.store import Entry, SnippetStore

    store = SnippetStore.load(Path("how-db.toml"))
    store.add(Entry(title="List ports", code="ss -tlnp"))
    for entry in store.entries:
        print(entry.title)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

import tomlkit
from tomlkit.exceptions import TOMLKitError

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when the snippet database cannot be read or updated."""


@dc.dataclass(slots=True)
class Entry:
    """A saved snippet.

    Attributes
    ----------
    title : str
        Short name shown in listings and weighted highest when searching.
    code : str
        Template line, possibly containing ``[default#description#order]``
        fields.
    description : str
        Free-form notes about the snippet; may be empty.
    used : int
        How many times the snippet has been filled in.
    """

    title: str
    code: str
    description: str = ""
    used: int = 0


class SnippetStore:
    """Ordered collection of entries persisted to a TOML file."""

    def __init__(self, path: Path, entries: cabc.Iterable[Entry] = ()) -> None:
        self.path = path
        self._entries = list(entries)

    @classmethod
    def load(cls, path: Path) -> SnippetStore:
        """Read entries from ``path``.

        A missing or blank file yields an empty store; the file is only
        created on the first write.

        Raises
        ------
        StoreError
            If the file is not UTF-8 TOML or an entry is malformed.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No snippet database at %s yet", path)
            return cls(path)
        except UnicodeDecodeError as exc:
            msg = f"Snippet database at {path} is not valid UTF-8: {exc}"
            raise StoreError(msg) from exc
        if not text.strip():
            return cls(path)

        try:
            document = tomlkit.parse(text)
        except TOMLKitError as exc:
            msg = f"Unable to parse snippet database at {path}: {exc}"
            raise StoreError(msg) from exc

        raw_entries = document.get("entries", [])
        if not isinstance(raw_entries, cabc.Sequence):
            msg = f"'entries' in {path} must be an array of tables."
            raise StoreError(msg)
        entries = [
            _entry_from_table(payload, position=position, path=path)
            for position, payload in enumerate(raw_entries)
        ]
        logger.debug("Loaded %d entries from %s", len(entries), path)
        return cls(path, entries)

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Snapshot of the stored entries in insertion order."""
        return tuple(self._entries)

    def get(self, index: int) -> Entry:
        """Return the entry at ``index`` or raise StoreError."""
        self._check_index(index)
        return self._entries[index]

    def add(self, entry: Entry) -> None:
        """Append ``entry`` and persist the database."""
        self._entries.append(entry)
        self._write()

    def remove(self, index: int) -> Entry:
        """Delete and return the entry at ``index``, persisting the change."""
        self._check_index(index)
        removed = self._entries.pop(index)
        self._write()
        return removed

    def record_use(self, index: int) -> Entry:
        """Increment the usage counter of the entry at ``index``."""
        entry = self.get(index)
        entry.used += 1
        self._write()
        return entry

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            msg = f"No entry at index {index}; {len(self._entries)} entries stored."
            raise StoreError(msg)

    def _write(self) -> None:
        document = tomlkit.document()
        tables = tomlkit.aot()
        for entry in self._entries:
            table = tomlkit.table()
            table.update(dc.asdict(entry))
            tables.append(table)
        document["entries"] = tables

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(tomlkit.dumps(document), encoding="utf-8")
        logger.debug("Wrote %d entries to %s", len(self._entries), self.path)


def _entry_from_table(payload: object, *, position: int, path: Path) -> Entry:
    """Build an Entry from one ``[[entries]]`` table."""
    if not isinstance(payload, cabc.Mapping):
        msg = f"Entry {position} in {path} must be a table."
        raise StoreError(msg)
    title = payload.get("title")
    code = payload.get("code")
    if not isinstance(title, str) or not isinstance(code, str):
        msg = f"Entry {position} in {path} needs string 'title' and 'code' keys."
        raise StoreError(msg)
    description = payload.get("description", "")
    used = payload.get("used", 0)
    if (
        not isinstance(description, str)
        or isinstance(used, bool)
        or not isinstance(used, int)
        or used < 0
    ):
        msg = f"Entry {position} in {path} has a malformed 'description' or 'used'."
        raise StoreError(msg)
    return Entry(
        title=str(title),
        code=str(code),
        description=str(description),
        used=int(used),
    )


__all__ = ["Entry", "SnippetStore", "StoreError"]
