"""SQLAlchemy engine setup for the purchasing database.

The engine is built once from ``PURCHASING_DB_URL`` and shared by every
repository in the process.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, loading a local ``.env`` file first.

    Raises:
        RuntimeError: If the variable is unset or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build a pooled engine that pings connections before use."""
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_purchasing_engine: Optional[Engine] = None


def get_purchasing_engine() -> Engine:
    """Return the process-wide purchasing engine, creating it on demand."""
    global _purchasing_engine
    if _purchasing_engine is None:
        db_url = _get_env_var("PURCHASING_DB_URL")
        _purchasing_engine = _create_engine(db_url)
    return _purchasing_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Serves the shared purchasing engine through DatabaseEnginePort."""

    def get_purchasing_engine(self) -> Engine:
        return get_purchasing_engine()


__all__ = [
    "get_purchasing_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
