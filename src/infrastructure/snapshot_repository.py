"""Repository reading purchasing records from a JSON snapshot file.

The file holds the upstream records as exported by the purchasing platform:

    {"purchases": [{"id": ..., "created_date": ..., "buyer_nome": ...}],
     "items": [{"id": ..., "purchase_id": ..., "preco_total": ...}]}
"""

import json
from pathlib import Path

from src.application.ports.purchasing_repository import (
    PurchasingRepositoryPort,
)
from src.domain.errors import InvalidInputError
from src.domain.models import Purchase, PurchaseItem
from src.domain.services.normalization import (
    normalize_purchase,
    normalize_purchase_item,
)
from src.domain.services.validation import validate_record_collection
from src.infrastructure.logging.logger import get_app_logger


class SnapshotPurchasingRepository(PurchasingRepositoryPort):
    """Repository backed by a JSON export of purchases and items."""

    def __init__(self, snapshot_file: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            snapshot_file: Path to the JSON snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot_file = Path(snapshot_file)
        self._logger = logger or get_app_logger()
        self._payload: dict | None = None

    def list_purchases(self, limit: int) -> list[Purchase]:
        records = self._section("purchases")
        return [normalize_purchase(raw) for raw in records[:limit]]

    def list_purchase_items(self, limit: int) -> list[PurchaseItem]:
        records = self._section("items")
        return [normalize_purchase_item(raw) for raw in records[:limit]]

    def _section(self, name: str) -> list:
        payload = self._load()
        return list(validate_record_collection(payload.get(name, []), name))

    def _load(self) -> dict:
        if self._payload is not None:
            return self._payload
        try:
            raw_text = self._snapshot_file.read_text(encoding="utf-8")
        except OSError as exc:
            raise RuntimeError(
                f"Cannot read snapshot file {self._snapshot_file}: {exc}"
            ) from exc
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise InvalidInputError(
                f"Snapshot file {self._snapshot_file} is not valid JSON"
            ) from exc
        if not isinstance(payload, dict):
            raise InvalidInputError(
                f"Snapshot file {self._snapshot_file} must hold an object"
            )
        self._logger.info(f"Loaded purchasing snapshot {self._snapshot_file}")
        self._payload = payload
        return payload


__all__ = ["SnapshotPurchasingRepository"]
