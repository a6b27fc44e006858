"""Actions accepted by the query state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from hnsearch.domain.models import QueryResult, unique_by_id


@dataclass(frozen=True, slots=True)
class FetchStarted:
    pass


@dataclass(frozen=True, slots=True)
class FetchSucceeded:
    payload: tuple[QueryResult, ...]

    def __post_init__(self) -> None:
        # Stored payload is an immutable tuple with one entry per id.
        object.__setattr__(self, "payload", tuple(unique_by_id(self.payload)))


@dataclass(frozen=True, slots=True)
class FetchFailed:
    pass


@dataclass(frozen=True, slots=True)
class ItemRemoved:
    item_id: str

    def __post_init__(self) -> None:
        # Result ids are stored as strings; accept the numeric form too.
        if isinstance(self.item_id, int) and not isinstance(self.item_id, bool):
            object.__setattr__(self, "item_id", str(self.item_id))


Action = Union[FetchStarted, FetchSucceeded, FetchFailed, ItemRemoved]

__all__ = ["Action", "FetchFailed", "FetchStarted", "FetchSucceeded", "ItemRemoved"]
