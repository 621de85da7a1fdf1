"""Resolve declared tab orders into the final field navigation sequence."""

from __future__ import annotations

import collections as cl
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def resolve_navigation_order(
    explicit: cabc.Mapping[int, cabc.Sequence[int]],
    automatic: cabc.Sequence[int],
) -> tuple[tuple[int, ...], ...]:
    """Merge numbered and unnumbered fields into navigation groups.

    Explicit keys are visited in ascending order. Before the group for key
    ``k`` is emitted, unnumbered fields are emitted one per group (in
    declaration order) until ``k - 1`` groups precede it or no unnumbered
    fields remain. Any unnumbered fields left over trail at the end.

    Parameters
    ----------
    explicit : Mapping[int, Sequence[int]]
        Tab-order key mapped to the section indices that declared it, in
        declaration order.
    automatic : Sequence[int]
        Section indices declared without an order, in declaration order.

    Returns
    -------
    tuple[tuple[int, ...], ...]
        Navigation groups; each explicit key becomes one group and each
        unnumbered field a singleton.

    Examples
    --------
    >>> resolve_navigation_order({3: [1]}, [0, 2, 3])
    ((0,), (2,), (1,), (3,))
    >>> resolve_navigation_order({5: [0, 1]}, [])
    ((0, 1),)
    """
    pending = cl.deque(automatic)
    groups: list[tuple[int, ...]] = []
    for order in sorted(explicit):
        while pending and len(groups) < order - 1:
            groups.append((pending.popleft(),))
        groups.append(tuple(explicit[order]))
    groups.extend((index,) for index in pending)
    return tuple(groups)


__all__ = ["resolve_navigation_order"]
