"""Port for purchasing record reads."""

from typing import Protocol

from src.domain.models import Purchase, PurchaseItem


class PurchasingRepositoryPort(Protocol):
    """Port exposing bounded snapshots of purchases and their items.

    Implementations may return fewer records than exist upstream; callers
    must not assume the lists are complete.
    """

    def list_purchases(self, limit: int) -> list[Purchase]:
        """Return at most ``limit`` purchases, newest first."""

    def list_purchase_items(self, limit: int) -> list[PurchaseItem]:
        """Return at most ``limit`` purchase items."""


__all__ = ["PurchasingRepositoryPort"]
