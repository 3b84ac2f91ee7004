"""SQLAlchemy-backed repository for purchasing records."""

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.purchasing_repository import (
    PurchasingRepositoryPort,
)
from src.domain.models import Purchase, PurchaseItem
from src.domain.services.normalization import (
    normalize_purchase,
    normalize_purchase_item,
)


class SqlAlchemyPurchasingRepository(PurchasingRepositoryPort):
    """Repository reading the purchases and purchase_items tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the purchasing engine.
        """
        self._db_port = db_port

    def list_purchases(self, limit: int) -> list[Purchase]:
        query = text(
            """
            SELECT id, created_date, buyer_nome
            FROM purchases
            ORDER BY created_date DESC
            LIMIT :limit
            """
        )
        rows = self._fetch(query, limit)
        return [normalize_purchase(row) for row in rows]

    def list_purchase_items(self, limit: int) -> list[PurchaseItem]:
        query = text(
            """
            SELECT id,
                   purchase_id,
                   supplier_id,
                   supplier_nome,
                   material_id,
                   preco_total,
                   saving_reais
            FROM purchase_items
            ORDER BY id DESC
            LIMIT :limit
            """
        )
        rows = self._fetch(query, limit)
        return [normalize_purchase_item(row) for row in rows]

    def _fetch(self, query, limit: int):
        engine = self._db_port.get_purchasing_engine()
        with engine.connect() as conn:
            return conn.execute(query, {"limit": limit}).mappings().all()


__all__ = ["SqlAlchemyPurchasingRepository"]
