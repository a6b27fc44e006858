"""Tests for the client-side title filter."""

from __future__ import annotations

from hnsearch.state import filter_items
from tests.helpers import make_item


def _items():
    return [
        make_item("1", title="React"),
        make_item("2", title="Redux"),
        make_item("3", title="Preact internals"),
    ]


def test_empty_term_returns_items_unchanged():
    items = _items()
    assert filter_items(items, "") is items


def test_filter_is_case_insensitive():
    result = filter_items(_items(), "REACT")
    assert [item.title for item in result] == ["React", "Preact internals"]


def test_filter_preserves_order():
    result = filter_items(_items(), "re")
    assert [item.id for item in result] == ["1", "2", "3"]


def test_filter_does_not_mutate_input():
    items = _items()
    filter_items(items, "redux")
    assert [item.id for item in items] == ["1", "2", "3"]


def test_filter_without_match_is_empty():
    assert filter_items(_items(), "vue") == []
