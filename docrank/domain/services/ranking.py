# docrank/domain/services/ranking.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from docrank.domain.models import Entry


def sort_by_cost(entries: Iterable[Entry]) -> list[Entry]:
    """Stable sort (ascending) by cost, pure & deterministic.

    Entries with equal cost keep their original relative order, so entries
    named b, a, c with costs 20, 10, 20 come back as a, b, c.
    """
    return sorted(entries, key=lambda e: e.cost)


def merge_by_cost(*ranked: Sequence[Entry]) -> list[Entry]:
    """
    Merge candidate lists that are each already sorted by cost.

    - Result is sorted ascending by cost.
    - Ties keep the order of the arguments, then the order within each list.
    """
    return list(heapq.merge(*ranked, key=lambda e: e.cost))


def take_top(entries: Sequence[Entry], limit: int | None) -> list[Entry]:
    if limit is None:
        return list(entries)
    if limit <= 0:
        return []
    return list(entries[:limit])
