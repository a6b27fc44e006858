from hnsearch.state.actions import (
    Action,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    ItemRemoved,
)
from hnsearch.state.reducer import INITIAL_STATE, reduce
from hnsearch.state.selectors import filter_items
from hnsearch.state.store import QueryStore

__all__ = [
    "Action",
    "FetchFailed",
    "FetchStarted",
    "FetchSucceeded",
    "INITIAL_STATE",
    "ItemRemoved",
    "QueryStore",
    "filter_items",
    "reduce",
]
