"""Ranking helpers for player collections."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar


T = TypeVar("T")


def insertion_sort_desc(items: Sequence[T], key: Callable[[T], float]) -> List[T]:
    """Return a copy of ``items`` sorted descending by ``key``.

    An item moves left only past neighbours with a strictly smaller key, so
    equal keys keep their original relative order.
    """

    ordered = list(items)
    for i in range(1, len(ordered)):
        current = ordered[i]
        current_key = key(current)
        j = i - 1
        while j >= 0 and key(ordered[j]) < current_key:
            ordered[j + 1] = ordered[j]
            j -= 1
        ordered[j + 1] = current
    return ordered


def stable_sort_desc(items: Sequence[T], key: Callable[[T], float]) -> List[T]:
    # sorted() keeps ties in input order even with reverse=True.
    return sorted(items, key=key, reverse=True)


def take_top(items: List[T], top_n: Optional[int]) -> List[T]:
    """Clamp a ranked list to ``top_n`` entries (``None`` keeps everything)."""

    if top_n is None:
        return items
    if top_n <= 0:
        return []
    return items[:top_n]


__all__ = ["insertion_sort_desc", "stable_sort_desc", "take_top"]
