"""Database ports for the purchasing dashboard.

This module defines the application-layer protocol for accessing the
purchasing database engine. Infrastructure implementations are expected to
provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the purchasing database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_purchasing_engine(self) -> Engine:
        """Get the engine for the purchasing database.

        Returns:
            Engine: SQLAlchemy engine connected to the purchasing backend.
        """


__all__ = ["DatabaseEnginePort"]
