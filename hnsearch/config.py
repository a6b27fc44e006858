"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, HttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseModel):
    endpoint: HttpUrl = Field(
        default="https://hn.algolia.com/api/v1/search",
        description="Hacker News search endpoint; the term is sent as the `query` parameter.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)


class StorageSettings(BaseModel):
    dsn: str = Field(
        default="sqlite:///hnsearch.db",
        description="SQLAlchemy DSN for the preference database.",
    )
    echo: bool = False


class SearchSettings(BaseModel):
    preference_key: str = Field(default="search", min_length=1)
    default_term: str = "React"
    search_mode: Literal["submit", "live"] = "submit"
    persist_initial_term: bool = Field(
        default=False,
        description="Write the term loaded at startup back to the store.",
    )
    local_filter: bool = Field(
        default=False,
        description="Filter fetched items by the current term on the client side.",
    )

    @field_validator("search_mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HNSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    api: ApiSettings = Field(default_factory=ApiSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance."""

    return AppSettings()


__all__ = [
    "ApiSettings",
    "AppSettings",
    "SearchSettings",
    "StorageSettings",
    "get_settings",
]
