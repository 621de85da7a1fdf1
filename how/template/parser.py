r"""Parse a one-line snippet template into a :class:`Document`.

Templates mark editable fields with square brackets::

    git diff [main#from#1]..[#to]

- The text before the first ``#`` is the field's default value.
- The text after the first ``#`` is an optional description.
- A second ``#`` introduces the field's tab order, a number from 1 to 255.
  Fields without a number are visited left to right, filling the gaps
  between numbered ones, so ``cmd [a] [b##3] [c] [d]`` cycles ``a``, ``c``,
  ``b``, ``d``. Fields sharing a number are edited together.
- ``[``, ``]``, ``#`` and ``\`` are escaped with a backslash. A backslash
  before any other character is kept as a literal backslash.

The parser is a pure reducer: :func:`step` maps a :class:`ScanState` and one
character to the next state, and :func:`finish` turns the final state into a
document. :func:`parse` folds the two over a whole string.

Example
-------
>>> from how.template.parser import parse
>>> document = parse(r"echo \[[hello#greeting]\]")
>>> document.display
'echo [hello]'
>>> document.text(1)
'hello'
"""

from __future__ import annotations

import dataclasses as dc

from .models import (
    Document,
    Input,
    InvalidNumberError,
    Literal,
    MissingNumberError,
    NestedFieldError,
    Section,
    Span,
    TooManyFieldsError,
    UnbalancedDelimitersError,
)
from .number import OrderNumber
from .ordering import resolve_navigation_order

OPEN = "["
CLOSE = "]"
SEPARATOR = "#"
ESCAPE = "\\"
RESERVED = frozenset((OPEN, CLOSE, SEPARATOR, ESCAPE))


@dc.dataclass(frozen=True, slots=True)
class LiteralPhase:
    """Scanning plain text that began at display offset ``start``."""

    start: int


@dc.dataclass(frozen=True, slots=True)
class DefaultPhase:
    """Reading a field's default value that began at display offset ``start``."""

    start: int


@dc.dataclass(frozen=True, slots=True)
class DescriptionPhase:
    """Default value fixed; accumulating the field's description."""

    default: Span
    text: str = ""


@dc.dataclass(frozen=True, slots=True)
class IndexPhase:
    """Default and description fixed; accumulating the tab-order digits."""

    default: Span
    description: str
    number: OrderNumber | None = None


Phase = LiteralPhase | DefaultPhase | DescriptionPhase | IndexPhase


@dc.dataclass(frozen=True, slots=True)
class ScanState:
    """Everything the parser knows after consuming a prefix of the input.

    Attributes
    ----------
    phase : Phase
        Current position in the field grammar.
    escaped : bool
        Whether the previous character was an unconsumed backslash.
    display : str
        Display text produced so far.
    sections : tuple[Section, ...]
        Sections closed so far, in declaration order.
    explicit : tuple[tuple[int, int], ...]
        ``(order, section_index)`` pairs for numbered fields.
    automatic : tuple[int, ...]
        Section indices of fields declared without a number.
    """

    phase: Phase = LiteralPhase(0)
    escaped: bool = False
    display: str = ""
    sections: tuple[Section, ...] = ()
    explicit: tuple[tuple[int, int], ...] = ()
    automatic: tuple[int, ...] = ()


def step(state: ScanState, char: str, position: int | None = None) -> ScanState:
    """Consume one character and return the resulting state.

    Parameters
    ----------
    state : ScanState
        State after the preceding characters.
    char : str
        Next character of the template source.
    position : int or None, optional
        Source offset of ``char``, attached to any raised error.

    Returns
    -------
    ScanState
        A new state; ``state`` is left untouched.

    Raises
    ------
    TemplateError
        The matching subclass when ``char`` cannot follow ``state``.
    """
    if state.escaped:
        state = dc.replace(state, escaped=False)
        if char in RESERVED:
            return _take(state, char, position)
        # not an escape: keep the backslash
        state = _take(state, ESCAPE, position)
    elif char == ESCAPE:
        return dc.replace(state, escaped=True)

    match char, state.phase:
        case "[", LiteralPhase(start):
            return dc.replace(
                state,
                phase=DefaultPhase(len(state.display)),
                sections=_close_literal(state, start),
            )
        case "[", _:
            raise NestedFieldError(position)
        case "#", DefaultPhase(start):
            span = Span(start, len(state.display))
            return dc.replace(state, phase=DescriptionPhase(span))
        case "#", DescriptionPhase(default, text):
            return dc.replace(state, phase=IndexPhase(default, text))
        case "#", IndexPhase():
            raise TooManyFieldsError(position)
        case "]", LiteralPhase():
            raise UnbalancedDelimitersError(position)
        case "]", DefaultPhase(start):
            return _push_input(state, Span(start, len(state.display)), "")
        case "]", DescriptionPhase(default, text):
            return _push_input(state, default, text)
        case "]", IndexPhase(number=None):
            raise MissingNumberError(position)
        case "]", IndexPhase(default, description, number):
            if number.value == 0:
                raise InvalidNumberError(position)
            return _push_input(state, default, description, order=number.value)
        case _:
            return _take(state, char, position)


def finish(state: ScanState) -> Document:
    """Close the final literal run and resolve the navigation order.

    Raises
    ------
    UnbalancedDelimitersError
        If the input ended inside a field.
    """
    phase = state.phase
    if not isinstance(phase, LiteralPhase):
        raise UnbalancedDelimitersError(None)
    if state.escaped:
        state = _take(dc.replace(state, escaped=False), ESCAPE, None)

    explicit: dict[int, list[int]] = {}
    for order, index in state.explicit:
        explicit.setdefault(order, []).append(index)

    return Document(
        display=state.display,
        sections=_close_literal(state, phase.start),
        navigation_order=resolve_navigation_order(explicit, state.automatic),
    )


def parse(text: str) -> Document:
    """Parse ``text`` into a :class:`Document`.

    Parameters
    ----------
    text : str
        Single template line, for example an entry's command.

    Returns
    -------
    Document
        Display text, sections, and resolved navigation order.

    Raises
    ------
    TemplateError
        The matching subclass when ``text`` is not a valid template. No
        partial document is produced.
    """
    state = ScanState()
    for position, char in enumerate(text):
        state = step(state, char, position)
    return finish(state)


def _take(state: ScanState, char: str, position: int | None) -> ScanState:
    """Route a non-structural character to wherever the phase collects text."""
    match state.phase:
        case LiteralPhase() | DefaultPhase():
            return dc.replace(state, display=state.display + char)
        case DescriptionPhase(default, text):
            return dc.replace(state, phase=DescriptionPhase(default, text + char))
        case IndexPhase(default, description, number):
            number = (number or OrderNumber()).read_digit(char, position=position)
            return dc.replace(state, phase=IndexPhase(default, description, number))
    msg = f"Unknown parser phase: {state.phase!r}"
    raise TypeError(msg)


def _close_literal(state: ScanState, start: int) -> tuple[Section, ...]:
    """Return the sections with the literal run from ``start`` appended.

    Empty runs are dropped.
    """
    span = Span(start, len(state.display))
    if not len(span):
        return state.sections
    return (*state.sections, Literal(span))


def _push_input(
    state: ScanState, span: Span, description: str, *, order: int | None = None
) -> ScanState:
    """Append an input section and return to literal scanning."""
    index = len(state.sections)
    if order is None:
        state = dc.replace(state, automatic=(*state.automatic, index))
    else:
        state = dc.replace(state, explicit=(*state.explicit, (order, index)))
    return dc.replace(
        state,
        phase=LiteralPhase(len(state.display)),
        sections=(*state.sections, Input(span, description)),
    )


__all__ = [
    "DefaultPhase",
    "DescriptionPhase",
    "IndexPhase",
    "LiteralPhase",
    "Phase",
    "ScanState",
    "finish",
    "parse",
    "step",
]
