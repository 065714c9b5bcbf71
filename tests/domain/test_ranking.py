"""Tests for domain ranking helpers (stable sort, merge, top-k)."""

import pytest

from docrank.domain.models import Entry, Val
from docrank.domain.services.ranking import merge_by_cost, sort_by_cost, take_top


# Helper to create test entries
def make_entry(name: str, cost: int) -> Entry:
    return Entry(name=name, doc_html="", kind=Val(type="int"), cost=cost)


def names(entries: list[Entry]) -> list[str]:
    return [e.name for e in entries]


class TestSortByCost:
    def test_ascending(self) -> None:
        entries = [make_entry("b", 20), make_entry("a", 10), make_entry("c", 30)]
        assert names(sort_by_cost(entries)) == ["a", "b", "c"]

    def test_ties_keep_original_order(self) -> None:
        """Stable sort: equal costs preserve input order."""
        entries = [make_entry("x", 5), make_entry("y", 1), make_entry("z", 5), make_entry("w", 5)]
        assert names(sort_by_cost(entries)) == ["y", "x", "z", "w"]

    def test_empty(self) -> None:
        assert sort_by_cost([]) == []


class TestMergeByCost:
    def test_merges_sorted_lists(self) -> None:
        left = [make_entry("a", 1), make_entry("c", 7)]
        right = [make_entry("b", 3), make_entry("d", 9)]
        assert names(merge_by_cost(left, right)) == ["a", "b", "c", "d"]

    def test_ties_follow_argument_order(self) -> None:
        left = [make_entry("l1", 4), make_entry("l2", 4)]
        right = [make_entry("r1", 4)]
        assert names(merge_by_cost(left, right)) == ["l1", "l2", "r1"]
        assert names(merge_by_cost(right, left)) == ["r1", "l1", "l2"]

    def test_no_lists(self) -> None:
        assert merge_by_cost() == []


class TestTakeTop:
    @pytest.mark.parametrize(
        "limit,expected",
        [
            (None, ["a", "b", "c"]),
            (2, ["a", "b"]),
            (10, ["a", "b", "c"]),
            (0, []),
            (-1, []),
        ],
    )
    def test_take_top_parametrized(self, limit: int | None, expected: list[str]) -> None:
        entries = [make_entry("a", 1), make_entry("b", 2), make_entry("c", 3)]
        assert names(take_top(entries, limit)) == expected
