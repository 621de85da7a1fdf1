r"""Parse snippet templates into fields with a navigation order.

The primary entry point is :func:`parse`, which turns a template line such as
``git diff [main#from#1]..[#to]`` into an immutable :class:`Document`.
Failures raise a :class:`TemplateError` subclass naming the problem.

Examples
--------
>>> from how.template import parse
>>> document = parse("ssh [user#login]@[host#machine#1]")
>>> document.display
'ssh user@host'
>>> document.navigation_order
((3,), (1,))
"""

from .models import (
    Document,
    Input,
    InvalidNumberError,
    Literal,
    MissingNumberError,
    NestedFieldError,
    NumberOverflowError,
    Section,
    Span,
    TemplateError,
    TooManyFieldsError,
    UnbalancedDelimitersError,
)
from .navigation import FieldCursor
from .number import MAX_ORDER, OrderNumber
from .ordering import resolve_navigation_order
from .parser import parse
from .render import describe_fields

__all__ = [
    "MAX_ORDER",
    "Document",
    "FieldCursor",
    "Input",
    "InvalidNumberError",
    "Literal",
    "MissingNumberError",
    "NestedFieldError",
    "NumberOverflowError",
    "OrderNumber",
    "Section",
    "Span",
    "TemplateError",
    "TooManyFieldsError",
    "UnbalancedDelimitersError",
    "describe_fields",
    "parse",
    "resolve_navigation_order",
]
