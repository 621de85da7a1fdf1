"""Fuzzy ranking of stored snippets against a search query.

Each entry's title, description and code are compared with the query using
``rapidfuzz``'s weighted ratio, scaled to ``0.0``-``1.0`` and multiplied by
per-field weights from the configuration. Empty fields score zero so that
entries with sparse metadata do not float to the top.

Example
-------
>>> from how.rank import rank
>>> from how.store import Entry
>>> entries = [Entry("List ports", "ss -tlnp"), Entry("Git diff", "git diff")]
>>> rank("git", entries)[0][0]
1
"""

from __future__ import annotations

import typing as typ

from rapidfuzz import fuzz

from how.config import RankWeights

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from how.store import Entry


def _field_score(query: str, text: str) -> float:
    """Return the 0-1 similarity between ``query`` and ``text``."""
    if not text:
        return 0.0
    return fuzz.WRatio(query, text.lower()) / 100.0


def score_entry(query: str, entry: Entry, weights: RankWeights) -> float:
    """Return the weighted fuzzy score of ``entry`` for ``query``.

    ``query`` is expected to be lower-cased already.
    """
    return (
        _field_score(query, entry.title) * weights.title
        + _field_score(query, entry.description) * weights.description
        + _field_score(query, entry.code) * weights.code
    )


def rank(
    query: str,
    entries: cabc.Sequence[Entry],
    weights: RankWeights | None = None,
) -> list[tuple[int, float]]:
    """Score every entry and return ``(index, score)`` pairs, best first.

    Parameters
    ----------
    query : str
        Search text; compared case-insensitively.
    entries : Sequence[Entry]
        Entries to rank, addressed by their position.
    weights : RankWeights or None, optional
        Field multipliers; defaults to :class:`RankWeights` defaults.

    Returns
    -------
    list[tuple[int, float]]
        One pair per entry, sorted by descending score. Ties keep their
        original order.
    """
    weights = weights or RankWeights()
    needle = query.strip().lower()
    scored = [
        (index, score_entry(needle, entry, weights))
        for index, entry in enumerate(entries)
    ]
    return sorted(scored, key=lambda item: item[1], reverse=True)


def search(
    query: str,
    entries: cabc.Sequence[Entry],
    weights: RankWeights | None = None,
    *,
    limit: int = 10,
) -> list[tuple[int, float]]:
    """Return at most ``limit`` ranked matches, dropping zero scores.

    Raises
    ------
    ValueError
        If ``limit`` is smaller than 1.
    """
    if limit < 1:
        msg = f"limit must be a positive integer, got {limit!r}."
        raise ValueError(msg)
    matches = [item for item in rank(query, entries, weights) if item[1] > 0]
    return matches[:limit]


__all__ = ["rank", "score_entry", "search"]
