"""Database ports for the finance visualizer.

This module defines the application-layer protocol for accessing the
local database engine. Infrastructure implementations are expected to
provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the local file store.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the local file store.

        Returns:
            Engine: SQLAlchemy engine connected to the local database.
        """


__all__ = ["DatabaseEnginePort"]
