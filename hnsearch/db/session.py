"""SQLAlchemy engine and session management."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from hnsearch.config import AppSettings, get_settings
from hnsearch.db.base import Base
from hnsearch.logging import logger


class Database:
    """Lazy SQLAlchemy engine/session factory wrapper."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self.settings = settings or get_settings()
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    def _ensure_engine(self) -> None:
        if self._engine is None:
            db_cfg = self.settings.storage
            kwargs: dict = {"echo": db_cfg.echo, "future": True}
            if db_cfg.dsn.startswith("sqlite"):
                kwargs["connect_args"] = {"check_same_thread": False}
                if ":memory:" in db_cfg.dsn or db_cfg.dsn == "sqlite://":
                    kwargs["poolclass"] = StaticPool
            engine = create_engine(db_cfg.dsn, **kwargs)
            Base.metadata.create_all(engine)
            self._engine = engine
            self._session_factory = sessionmaker(
                bind=self._engine,
                expire_on_commit=False,
                autoflush=False,
            )
            logger.info("db_engine_initialized", dsn=db_cfg.dsn)

    @property
    def session_factory(self) -> sessionmaker[Session]:
        self._ensure_engine()
        assert self._session_factory is not None
        return self._session_factory

    @contextmanager
    def session(self) -> Iterator[Session]:
        factory = self.session_factory
        with factory() as session:
            try:
                yield session
            except Exception:
                session.rollback()
                raise

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None


__all__ = ["Database"]
