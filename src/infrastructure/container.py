"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.purchasing_repository import (
    PurchasingRepositoryPort,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.purchasing_repository_factory import (
    create_purchasing_repository,
)
from src.infrastructure.settings import PurchasingSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_settings() -> PurchasingSettings:
    """Return settings sourced from the environment."""
    return PurchasingSettings.from_env()


def build_purchasing_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: PurchasingSettings | None = None,
) -> PurchasingRepositoryPort:
    """Return the configured purchasing repository."""
    resolved_db = db_port or build_database_adapter()
    return create_purchasing_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=settings or build_settings(),
    )


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_purchasing_repository",
]
