"""Tests for the durable preference store."""

from __future__ import annotations

from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from hnsearch.config import AppSettings, StorageSettings
from hnsearch.db.models import Preference
from hnsearch.db.session import Database
from hnsearch.services.preferences import PreferenceStore


def test_get_returns_default_on_first_run(preferences):
    assert preferences.get("search", "React") == "React"


def test_set_then_get_returns_written_value(preferences):
    preferences.set("search", "Redux")
    assert preferences.get("search", "React") == "Redux"


def test_set_overwrites_and_is_idempotent(preferences):
    preferences.set("search", "Redux")
    preferences.set("search", "Vue")
    preferences.set("search", "Vue")
    assert preferences.get("search", "React") == "Vue"


def test_keys_are_independent(preferences):
    preferences.set("search", "Redux")
    assert preferences.get("other", "fallback") == "fallback"


def test_empty_string_is_stored(preferences):
    preferences.set("search", "")
    assert preferences.get("search", "React") == ""


def test_value_survives_a_new_database(tmp_path):
    settings = AppSettings(storage=StorageSettings(dsn=f"sqlite:///{tmp_path / 'prefs.db'}"))

    first = Database(settings=settings)
    PreferenceStore(first).set("search", "Redux")
    first.dispose()

    second = Database(settings=settings)
    try:
        assert PreferenceStore(second).get("search", "React") == "Redux"
    finally:
        second.dispose()


class BrokenDatabase:
    @contextmanager
    def session(self):
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))
        yield


def test_read_failure_falls_back_to_default():
    store = PreferenceStore(BrokenDatabase())
    assert store.get("search", "React") == "React"


def test_write_failure_is_swallowed():
    store = PreferenceStore(BrokenDatabase())
    store.set("search", "Redux")


def _updated_at(database, key):
    with database.session() as session:
        stmt = select(Preference.updated_at).where(Preference.key == key)
        return session.execute(stmt).scalar_one()


def test_updated_at_moves_only_when_value_changes(database, preferences):
    preferences.set("search", "Redux")
    first = _updated_at(database, "search")

    preferences.set("search", "Redux")
    assert _updated_at(database, "search") == first

    preferences.set("search", "Vue")
    assert _updated_at(database, "search") >= first


def test_preferences_table_uses_named_unique_key():
    names = {constraint.name for constraint in Preference.__table__.constraints}
    assert "uq_preferences_key" in names
