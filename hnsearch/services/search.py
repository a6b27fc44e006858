"""Hacker News search API client."""

from __future__ import annotations

from typing import Protocol

import httpx
from pydantic import BaseModel, Field

from hnsearch.config import ApiSettings
from hnsearch.domain.models import QueryResult, unique_by_id
from hnsearch.logging import logger
from hnsearch.services.exceptions import FetchFailure


class StorySearcher(Protocol):
    """Anything the orchestrator can ask for the results of a term."""

    async def search(self, term: str) -> list[QueryResult]:
        ...


class SearchResponse(BaseModel):
    hits: list[QueryResult] = Field(default_factory=list)


class HackerNewsClient:
    """Runs a search against the configured endpoint.

    Every way the request can go wrong (transport error, non-2xx status,
    undecodable body, payload that does not validate) surfaces as
    `FetchFailure`.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ApiSettings()

    @property
    def endpoint(self) -> str:
        return str(self._settings.endpoint)

    async def search(self, term: str) -> list[QueryResult]:
        try:
            response = await self._client.get(
                self.endpoint,
                params={"query": term},
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500]
            raise FetchFailure(
                f"Search request failed ({exc.response.status_code}): {detail}"
            ) from exc
        except httpx.RequestError as exc:
            raise FetchFailure(f"Search request failed: {exc}") from exc

        try:
            data = SearchResponse.model_validate(response.json())
        except ValueError as exc:
            # ValidationError and JSONDecodeError are both ValueErrors.
            raise FetchFailure(f"Malformed search response: {exc}") from exc

        results = unique_by_id(data.hits)
        if len(results) != len(data.hits):
            logger.info(
                "duplicate_hits_dropped",
                term=term,
                dropped=len(data.hits) - len(results),
            )
        return results


__all__ = ["HackerNewsClient", "SearchResponse", "StorySearcher"]
