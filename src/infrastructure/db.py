"""Database infrastructure for the finance visualizer.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the local file store. It belongs to the
infrastructure layer because it deals with an external system (SQLite by
default, any SQLAlchemy URL otherwise).
"""

from pathlib import Path
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.settings import VisualizerSettings


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a file-based SQLite database.

    Args:
        db_url: Fully qualified database URL.
    """
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite":
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL.

    Returns:
        Engine: A SQLAlchemy engine with health checks enabled.
    """
    _ensure_sqlite_directory(db_url)
    return create_engine(
        db_url,
        pool_pre_ping=True,
        future=True,
    )


_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the local file store.

    Returns:
        Engine: Lazily initialized engine.
    """
    global _engine
    if _engine is None:
        dotenv.load_dotenv()
        settings = VisualizerSettings.from_env()
        _engine = _create_engine(settings.db_url)
    return _engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, file
    locations) behind the port so use cases depend only on the protocol.
    An explicit ``db_url`` bypasses the shared singleton engine.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_engine(self) -> Engine:
        """Get the engine for the local file store.

        Returns:
            Engine: SQLAlchemy engine connected to the local database.
        """
        if self._db_url is None:
            return get_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = ["get_engine", "SqlAlchemyDatabaseEngineAdapter"]
