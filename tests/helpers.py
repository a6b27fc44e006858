"""Test doubles shared by the orchestrator and bootstrap tests."""

from __future__ import annotations

import asyncio

from hnsearch.domain.models import QueryResult
from hnsearch.state.store import QueryStore


def make_item(item_id: str, title: str = "", **overrides) -> QueryResult:
    data = {
        "id": item_id,
        "title": title or f"Story {item_id}",
        "url": f"https://example.com/{item_id}",
        "author": "pg",
        "comment_count": 3,
        "points": 10,
    }
    data.update(overrides)
    return QueryResult(**data)


async def drain(rounds: int = 5) -> None:
    """Give scheduled fetch tasks a chance to run."""

    for _ in range(rounds):
        await asyncio.sleep(0)


class RecordingStore(QueryStore):
    def __init__(self) -> None:
        super().__init__()
        self.actions = []

    def dispatch(self, action):
        self.actions.append(action)
        return super().dispatch(action)


class StubSearcher:
    """Answers immediately from a canned term -> results (or exception) map."""

    def __init__(self, responses: dict | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[str] = []

    async def search(self, term: str):
        self.calls.append(term)
        response = self.responses.get(term, [])
        if isinstance(response, BaseException):
            raise response
        return list(response)


class ControlledSearcher:
    """Keeps each search pending until the test resolves it."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self._futures: dict[str, asyncio.Future] = {}

    def _future(self, term: str) -> asyncio.Future:
        if term not in self._futures:
            self._futures[term] = asyncio.get_running_loop().create_future()
        return self._futures[term]

    async def search(self, term: str):
        self.calls.append(term)
        return await self._future(term)

    def resolve(self, term: str, results) -> None:
        self._future(term).set_result(list(results))

    def fail(self, term: str, exc: BaseException) -> None:
        self._future(term).set_exception(exc)
