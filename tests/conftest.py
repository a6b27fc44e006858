"""Shared pytest fixtures for store- and orchestrator-level tests."""

from __future__ import annotations

import pytest

from hnsearch.config import AppSettings, StorageSettings
from hnsearch.db.session import Database
from hnsearch.services.preferences import PreferenceStore
from tests.helpers import RecordingStore


@pytest.fixture
def database():
    settings = AppSettings(storage=StorageSettings(dsn="sqlite:///:memory:"))
    db = Database(settings=settings)
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def preferences(database) -> PreferenceStore:
    return PreferenceStore(database)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()
