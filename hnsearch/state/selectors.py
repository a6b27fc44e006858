"""Derived views over the fetched result set."""

from __future__ import annotations

from typing import Sequence

from hnsearch.domain.models import QueryResult


def filter_items(items: Sequence[QueryResult], term: str) -> Sequence[QueryResult]:
    """Keep items whose title contains `term`, ignoring case.

    An empty term returns `items` itself.
    """

    if not term:
        return items
    needle = term.lower()
    return [item for item in items if needle in item.title.lower()]


__all__ = ["filter_items"]
