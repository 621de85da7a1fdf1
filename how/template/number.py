"""Bounded accumulator for the tab-order digits of a template field."""

from __future__ import annotations

import dataclasses as dc

from .models import InvalidNumberError, NumberOverflowError

MAX_ORDER = 255
_DIGITS = "0123456789"


@dc.dataclass(frozen=True, slots=True)
class OrderNumber:
    """Non-negative integer read one decimal digit at a time.

    Attributes
    ----------
    value : int
        Digits accumulated so far, never above ``MAX_ORDER``.

    Examples
    --------
    >>> OrderNumber().read_digit("4").read_digit("2").value
    42
    """

    value: int = 0

    def read_digit(self, char: str, *, position: int | None = None) -> OrderNumber:
        """Return a new accumulator with ``char`` appended as the lowest digit.

        Parameters
        ----------
        char : str
            Single character from the template source.
        position : int or None, optional
            Source offset of ``char``, attached to any raised error.

        Raises
        ------
        InvalidNumberError
            If ``char`` is not an ASCII decimal digit.
        NumberOverflowError
            If the resulting value exceeds ``MAX_ORDER``.
        """
        if len(char) != 1 or char not in _DIGITS:
            raise InvalidNumberError(position)
        value = self.value * 10 + _DIGITS.index(char)
        if value > MAX_ORDER:
            raise NumberOverflowError(position)
        return OrderNumber(value)


__all__ = ["MAX_ORDER", "OrderNumber"]
