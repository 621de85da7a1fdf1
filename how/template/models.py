"""Typed dataclasses and errors describing a parsed snippet template."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc


class TemplateError(ValueError):
    """Raised when a snippet template cannot be parsed.

    Attributes
    ----------
    position : int or None
        Offset of the offending character in the template source, or ``None``
        when the problem was only detectable at the end of the input.
    """

    reason = "invalid template"

    def __init__(self, position: int | None = None) -> None:
        self.position = position
        where = "end of input" if position is None else f"position {position}"
        super().__init__(f"{self.reason} (at {where})")


class NestedFieldError(TemplateError):
    """An opening bracket appeared inside a field."""

    reason = "found bracket within bracket: escape at least one to clarify intent"


class UnbalancedDelimitersError(TemplateError):
    """A closing bracket had no opener, or a field was never closed."""

    reason = (
        "unbalanced bracket templates: escape brackets that are to be treated "
        "as literals"
    )


class InvalidNumberError(TemplateError):
    """The tab order contained a non-digit or was explicitly zero."""

    reason = "invalid input index: must be a positive integer"


class NumberOverflowError(TemplateError):
    """The tab order exceeded the supported range."""

    reason = "invalid input index: number too large"


class MissingNumberError(TemplateError):
    """A second ``#`` was not followed by any digits."""

    reason = "no input index given: remove the second '#' for automatic index"


class TooManyFieldsError(TemplateError):
    """A field contained a third ``#`` separator."""

    reason = "too many hashes in input: escape #'s that are to be treated as literals"


@dc.dataclass(frozen=True, slots=True)
class Span:
    """Half-open character range ``[start, end)`` within the display string."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def of(self, text: str) -> str:
        """Return the slice of ``text`` covered by this span."""
        return text[self.start : self.end]


@dc.dataclass(frozen=True, slots=True)
class Literal:
    """Text copied verbatim into the rendered command."""

    span: Span


@dc.dataclass(frozen=True, slots=True)
class Input:
    """Editable field whose span holds the default value.

    Attributes
    ----------
    span : Span
        Location of the default text in the display string; may be empty.
    description : str
        Human-readable label, empty when the template gave none.
    """

    span: Span
    description: str = ""


Section = Literal | Input


@dc.dataclass(frozen=True, slots=True)
class Document:
    """Parsed template: display text, sections and field navigation order.

    Attributes
    ----------
    display : str
        Template text with escapes resolved and field syntax removed.
    sections : tuple[Section, ...]
        Literal and input sections partitioning ``display`` left to right.
    navigation_order : tuple[tuple[int, ...], ...]
        Groups of indices into ``sections``. Each group is edited together
        and every input section appears in exactly one group.
    """

    display: str
    sections: tuple[Section, ...] = ()
    navigation_order: tuple[tuple[int, ...], ...] = ()

    def text(self, index: int) -> str:
        """Return the display text of the section at ``index``."""
        return self.sections[index].span.of(self.display)

    def inputs(self) -> list[int]:
        """Return indices of the input sections in declaration order."""
        return [
            index
            for index, section in enumerate(self.sections)
            if isinstance(section, Input)
        ]

    def fill(self, values: cabc.Sequence[str | None] = ()) -> str:
        """Render the document, replacing field groups with ``values``.

        Parameters
        ----------
        values : Sequence[str | None], optional
            One value per navigation group, in navigation order. ``None`` or
            an omitted trailing value keeps the field's default text.

        Returns
        -------
        str
            The display string with each input's default swapped for the
            value supplied for its group.

        Raises
        ------
        ValueError
            If more values are supplied than the document has groups.

        Examples
        --------
        >>> from how.template import parse
        >>> parse("git diff [main#from]..[HEAD#to]").fill(["dev"])
        'git diff dev..HEAD'
        """
        if len(values) > len(self.navigation_order):
            msg = (
                f"Got {len(values)} values for "
                f"{len(self.navigation_order)} field groups."
            )
            raise ValueError(msg)

        replacements: dict[int, str] = {}
        for group, value in zip(self.navigation_order, values):
            if value is None:
                continue
            for index in group:
                replacements[index] = value

        return "".join(
            replacements.get(index, section.span.of(self.display))
            for index, section in enumerate(self.sections)
        )


__all__ = [
    "Document",
    "Input",
    "InvalidNumberError",
    "Literal",
    "MissingNumberError",
    "NestedFieldError",
    "NumberOverflowError",
    "Section",
    "Span",
    "TemplateError",
    "TooManyFieldsError",
    "UnbalancedDelimitersError",
]
