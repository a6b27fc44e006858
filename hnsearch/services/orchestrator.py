"""Decides when to fetch and turns fetch outcomes into state actions."""

from __future__ import annotations

import asyncio
from typing import Sequence

from hnsearch.config import SearchSettings
from hnsearch.domain.models import QueryResult, QueryState
from hnsearch.logging import logger
from hnsearch.services.exceptions import FetchFailure
from hnsearch.services.preferences import PreferenceStore
from hnsearch.services.search import StorySearcher
from hnsearch.state.actions import (
    Action,
    FetchFailed,
    FetchStarted,
    FetchSucceeded,
    ItemRemoved,
)
from hnsearch.state.selectors import filter_items
from hnsearch.state.store import QueryStore


class FetchOrchestrator:
    """Owns the query target and drives the query store.

    Each change of the target to a non-empty term issues one fetch. Fetches
    are tagged with an increasing sequence number and only the outcome of the
    latest one is dispatched; older outcomes are dropped when they resolve.

    In ``submit`` mode the target follows the term only when the search is
    submitted. In ``live`` mode every term change moves the target.

    Intent handlers schedule work on the running event loop and must be
    called from inside it.
    """

    def __init__(
        self,
        searcher: StorySearcher,
        store: QueryStore,
        preferences: PreferenceStore,
        settings: SearchSettings | None = None,
    ) -> None:
        self._searcher = searcher
        self._store = store
        self._preferences = preferences
        self._settings = settings or SearchSettings()
        self._search_term = ""
        self._target: str | None = None
        self._sequence = 0
        self._tasks: set[asyncio.Task[None]] = set()
        self._started = False

    @property
    def state(self) -> QueryState:
        return self._store.state

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def target(self) -> str | None:
        return self._target

    @property
    def visible_items(self) -> Sequence[QueryResult]:
        items = self._store.state.items
        if self._settings.local_filter:
            return filter_items(items, self._search_term)
        return items

    def start(self) -> None:
        """Restore the last term and issue the initial fetch."""

        if self._started:
            return
        key = self._settings.preference_key
        default = self._settings.default_term
        term = self._preferences.get(key, default) or default
        self._search_term = term
        logger.info("search_restored", term=term, mode=self._settings.search_mode)
        if self._settings.persist_initial_term:
            self._preferences.set(key, term)
        self._set_target(term)
        self._started = True

    def on_search_term_changed(self, term: str) -> None:
        if term == self._search_term:
            return
        self._search_term = term
        self._preferences.set(self._settings.preference_key, term)
        if self._settings.search_mode == "live":
            self._set_target(term)

    def on_search_submitted(self) -> None:
        self._set_target(self._search_term)

    def on_item_removed(self, item_id: str) -> None:
        self._store.dispatch(ItemRemoved(item_id))

    async def wait_idle(self) -> None:
        """Wait until every fetch scheduled so far has resolved."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    def _set_target(self, term: str) -> None:
        if term == self._target:
            return
        loop = asyncio.get_running_loop()
        self._target = term
        if not term.strip():
            logger.debug("empty_target_skipped")
            return

        self._sequence += 1
        self._store.dispatch(FetchStarted())
        task = loop.create_task(self._fetch(self._sequence, term))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _fetch(self, sequence: int, term: str) -> None:
        logger.info("fetch_started", term=term, sequence=sequence)
        outcome: Action
        try:
            results = await self._searcher.search(term)
        except FetchFailure as exc:
            logger.warning("fetch_failed", term=term, sequence=sequence, error=str(exc))
            outcome = FetchFailed()
        except Exception:
            logger.exception("fetch_crashed", term=term, sequence=sequence)
            outcome = FetchFailed()
        else:
            logger.info("fetch_succeeded", term=term, sequence=sequence, hits=len(results))
            outcome = FetchSucceeded(tuple(results))

        if sequence != self._sequence:
            logger.info(
                "stale_outcome_discarded",
                term=term,
                sequence=sequence,
                latest=self._sequence,
            )
            return
        self._store.dispatch(outcome)


__all__ = ["FetchOrchestrator"]
