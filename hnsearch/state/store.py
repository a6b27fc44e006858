"""State container that applies actions and notifies subscribers."""

from __future__ import annotations

from typing import Callable

from hnsearch.domain.models import QueryState
from hnsearch.logging import logger
from hnsearch.state.actions import Action
from hnsearch.state.reducer import INITIAL_STATE, reduce

Listener = Callable[[QueryState], None]


class QueryStore:
    """Single owner of `QueryState`.

    Actions are applied in the order `dispatch` is called. Subscribers only
    hear about transitions that produced a different state.
    """

    def __init__(self, initial: QueryState | None = None) -> None:
        self._state = initial if initial is not None else INITIAL_STATE
        self._listeners: list[Listener] = []

    @property
    def state(self) -> QueryState:
        return self._state

    def dispatch(self, action: Action) -> QueryState:
        previous = self._state
        self._state = reduce(previous, action)
        logger.debug(
            "action_dispatched",
            action=type(action).__name__,
            items=len(self._state.items),
            is_loading=self._state.is_loading,
            is_error=self._state.is_error,
        )
        if self._state != previous:
            self._notify()
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("state_listener_failed", listener=repr(listener))


__all__ = ["Listener", "QueryStore"]
