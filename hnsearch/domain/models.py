"""Pydantic models shared across the state and service layers."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class QueryResult(BaseModel):
    """A single search hit. Identity is `id`; the rest is display data."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="objectID", min_length=1)
    title: str = ""
    url: str = ""
    author: str = ""
    comment_count: int = Field(default=0, ge=0, alias="num_comments")
    points: int = Field(default=0, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("title", "url", "author", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("comment_count", "points", mode="before")
    @classmethod
    def _none_to_zero(cls, value):
        return 0 if value is None else value


class QueryState(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: tuple[QueryResult, ...] = ()
    is_loading: bool = False
    is_error: bool = False

    @model_validator(mode="after")
    def _check_invariants(self) -> "QueryState":
        if self.is_loading and self.is_error:
            raise ValueError("is_loading and is_error cannot both be set")
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError("items must have unique ids")
        return self


def unique_by_id(items: Iterable[QueryResult]) -> list[QueryResult]:
    """Drop repeated ids, keeping the first occurrence and the original order."""

    seen: set[str] = set()
    unique: list[QueryResult] = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique


__all__ = ["QueryResult", "QueryState", "unique_by_id"]
