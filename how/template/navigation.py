"""Step focus through a document's field groups with wrap-around."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from .models import Document


@dc.dataclass(frozen=True, slots=True)
class FieldCursor:
    """Focus position within ``document.navigation_order``.

    Moving past the last group wraps to the first and vice versa. Documents
    without fields have nothing to focus, so the cursor stays put.

    Examples
    --------
    >>> from how.template import parse
    >>> cursor = FieldCursor(parse("cp [src] [dst]"))
    >>> cursor.next().next().current()
    (1,)
    """

    document: Document
    position: int = 0

    def current(self) -> tuple[int, ...]:
        """Return the section indices of the focused group."""
        if not self.document.navigation_order:
            return ()
        return self.document.navigation_order[self.position]

    def next(self) -> FieldCursor:
        """Return a cursor focused on the following group."""
        return self._moved(1)

    def prev(self) -> FieldCursor:
        """Return a cursor focused on the preceding group."""
        return self._moved(-1)

    def _moved(self, delta: int) -> FieldCursor:
        size = len(self.document.navigation_order)
        if not size:
            return self
        return dc.replace(self, position=(self.position + delta) % size)


__all__ = ["FieldCursor"]
