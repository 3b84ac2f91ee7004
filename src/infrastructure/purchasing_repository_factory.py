"""Factory helpers to select the purchasing repository backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.purchasing_repository import (
    PurchasingRepositoryPort,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.purchasing_repository import (
    SqlAlchemyPurchasingRepository,
)
from src.infrastructure.settings import PurchasingSettings
from src.infrastructure.snapshot_repository import (
    SnapshotPurchasingRepository,
)


def create_purchasing_repository(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: PurchasingSettings | None = None,
) -> PurchasingRepositoryPort:
    """Return a purchasing repository implementation based on configuration.

    Args:
        db_port: Port providing access to the purchasing engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        PurchasingRepositoryPort: Concrete repository implementation.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or PurchasingSettings.from_env()
    selected_backend = resolved_settings.backend.strip().lower()

    if selected_backend == "sqlalchemy":
        return SqlAlchemyPurchasingRepository(db_port)

    if selected_backend == "snapshot":
        if resolved_settings.snapshot_file is None:
            raise RuntimeError(
                "Snapshot backend requires a PURCHASING_SNAPSHOT_FILE path."
            )
        return SnapshotPurchasingRepository(
            resolved_settings.snapshot_file,
            logger=resolved_logger,
        )

    raise ValueError(
        "Unsupported purchasing backend: "
        f"{selected_backend}. Expected sqlalchemy or snapshot."
    )


__all__ = ["create_purchasing_repository"]
