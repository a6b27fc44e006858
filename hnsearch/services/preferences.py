"""Durable string preferences (last search term and friends)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from hnsearch.db.models import Preference
from hnsearch.db.session import Database
from hnsearch.logging import logger


class PreferenceStore:
    """Key-value preferences backed by the `preferences` table.

    Storage problems never escape: reads fall back to the caller's default
    and failed writes are logged and dropped.
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    def get(self, key: str, default: str = "") -> str:
        try:
            with self.database.session() as session:
                stmt = select(Preference.value).where(Preference.key == key)
                value = session.execute(stmt).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.warning("preference_read_failed", key=key, error=str(exc))
            return default
        if value is None:
            return default
        return value

    def set(self, key: str, value: str) -> None:
        try:
            with self.database.session() as session:
                stmt = select(Preference).where(Preference.key == key)
                preference = session.execute(stmt).scalar_one_or_none()
                if preference is None:
                    session.add(Preference(key=key, value=value))
                elif preference.value != value:
                    preference.value = value
                session.commit()
        except SQLAlchemyError as exc:
            logger.warning("preference_write_failed", key=key, error=str(exc))


__all__ = ["PreferenceStore"]
