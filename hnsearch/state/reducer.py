"""Pure transition function for the query state machine."""

from __future__ import annotations

from hnsearch.domain.models import QueryState
from hnsearch.state.actions import (
    Action,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    ItemRemoved,
)

INITIAL_STATE = QueryState()


def reduce(state: QueryState, action: Action) -> QueryState:
    """Return the state that follows `action`; unknown actions leave it untouched."""

    if isinstance(action, FetchStarted):
        return state.model_copy(update={"is_loading": True, "is_error": False})
    if isinstance(action, FetchSucceeded):
        return state.model_copy(
            update={"items": action.payload, "is_loading": False, "is_error": False}
        )
    if isinstance(action, FetchFailed):
        return state.model_copy(update={"is_loading": False, "is_error": True})
    if isinstance(action, ItemRemoved):
        remaining = tuple(item for item in state.items if item.id != action.item_id)
        if len(remaining) == len(state.items):
            return state
        return state.model_copy(update={"items": remaining})
    return state


__all__ = ["INITIAL_STATE", "reduce"]
