"""Application entrypoint."""

from __future__ import annotations

import asyncio
import sys

import httpx

from hnsearch.config import get_settings
from hnsearch.db.session import Database
from hnsearch.domain.models import QueryState
from hnsearch.logging import configure_logging, logger
from hnsearch.services.orchestrator import FetchOrchestrator
from hnsearch.services.preferences import PreferenceStore
from hnsearch.services.search import HackerNewsClient
from hnsearch.state.store import QueryStore


def _log_state(state: QueryState) -> None:
    logger.info(
        "state_changed",
        items=len(state.items),
        is_loading=state.is_loading,
        is_error=state.is_error,
    )


async def main(term: str | None = None) -> None:
    settings = get_settings()
    configure_logging(settings.log_level)

    database = Database(settings=settings)
    preferences = PreferenceStore(database)
    store = QueryStore()
    store.subscribe(_log_state)

    logger.info("app_starting", environment=settings.environment)
    async with httpx.AsyncClient() as http_client:
        searcher = HackerNewsClient(http_client, settings=settings.api)
        orchestrator = FetchOrchestrator(searcher, store, preferences, settings=settings.search)
        try:
            orchestrator.start()
            if term is not None:
                orchestrator.on_search_term_changed(term)
                orchestrator.on_search_submitted()
            await orchestrator.wait_idle()
        finally:
            await orchestrator.aclose()

    state = orchestrator.state
    if state.is_error:
        logger.error("search_failed", term=orchestrator.target)
    for item in orchestrator.visible_items:
        logger.info(
            "story",
            id=item.id,
            title=item.title,
            url=item.url,
            author=item.author,
            comments=item.comment_count,
            points=item.points,
        )
    database.dispose()


def run() -> None:
    term = " ".join(sys.argv[1:]) or None
    asyncio.run(main(term))


if __name__ == "__main__":
    run()
