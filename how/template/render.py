"""Plain-text summaries of a document's fields for terminal output."""

from __future__ import annotations

import typing as typ

from .models import Input

if typ.TYPE_CHECKING:
    from .models import Document


def describe_fields(document: Document) -> list[str]:
    """Return one line per navigation group, in navigation order.

    Each line shows the group's 1-based position, the quoted default text of
    its fields and, when present, their descriptions in parentheses.

    Examples
    --------
    >>> from how.template import parse
    >>> describe_fields(parse("git diff [main#from]..[#to]"))
    ["1. 'main' (from)", "2. '' (to)"]
    """
    lines: list[str] = []
    for position, group in enumerate(document.navigation_order, start=1):
        defaults = ", ".join(repr(document.text(index)) for index in group)
        descriptions = [
            section.description
            for section in (document.sections[index] for index in group)
            if isinstance(section, Input) and section.description
        ]
        line = f"{position}. {defaults}"
        if descriptions:
            line = f"{line} ({'; '.join(descriptions)})"
        lines.append(line)
    return lines


__all__ = ["describe_fields"]
