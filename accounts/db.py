"""
Database management layer.

Holds one engine and session factory per process, built from settings the
first time initialize() is called.

Usage:
    from accounts.db import db, get_db, Base

    db.initialize()
    with db.session() as session:
        user = session.get(User, 1)
"""

import time
from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from .config import Settings, get_settings


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


def _engine_options(url: str, settings: Settings) -> dict[str, Any]:
    """Pool settings: one shared connection for SQLite, a sized QueuePool otherwise."""
    if url.startswith("sqlite"):
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {
        "poolclass": QueuePool,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": settings.db_pool_pre_ping,
    }


def _enable_sqlite_foreign_keys(engine: Engine) -> None:
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseManager:
    """Process-wide engine and session factory."""

    _instance: Optional["DatabaseManager"] = None

    def __new__(cls) -> "DatabaseManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def initialize(self, database_url: str | None = None) -> None:
        """
        Build the engine. Later calls are no-ops.

        Args:
            database_url: Optional override. Uses settings.database_url if not provided.
        """
        if self._initialized:
            return

        settings = get_settings()
        url = database_url or settings.database_url

        self.engine = create_engine(url, echo=settings.debug, **_engine_options(url, settings))
        if url.startswith("sqlite"):
            _enable_sqlite_foreign_keys(self.engine)

        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )
        self._initialized = True

    def create_all_tables(self) -> None:
        """Create all tables defined by models."""
        self._ensure_initialized()
        Base.metadata.create_all(bind=self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Session that commits on success and rolls back on error."""
        self._ensure_initialized()
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> dict:
        """
        Run SELECT 1 against the database.

        Returns:
            dict with 'healthy' (bool), 'latency_ms' (float), and 'error' (str or None)
        """
        if not self._initialized:
            return {"healthy": False, "latency_ms": 0, "error": "Database not initialized"}

        start = time.perf_counter()
        error = None
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            error = str(e)
        latency = round((time.perf_counter() - start) * 1000, 2)
        return {"healthy": error is None, "latency_ms": latency, "error": error}

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("DatabaseManager not initialized. Call initialize() first.")


# Global singleton
db = DatabaseManager()


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request."""
    with db.session() as session:
        yield session


__all__ = ["Base", "DatabaseManager", "db", "get_db"]
