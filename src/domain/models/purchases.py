"""Domain models for purchase orders and their line items."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Purchase:
    """Purchase order header.

    Attributes:
        id: Unique purchase identifier.
        created_at: Creation timestamp, when known.
        buyer_name: Name of the buyer who issued the order.
    """

    id: str
    created_at: datetime | None = None
    buyer_name: str | None = None


@dataclass(frozen=True)
class PurchaseItem:
    """Line item belonging to a purchase order.

    Attributes:
        id: Line item identifier.
        purchase_id: Identifier of the owning purchase.
        supplier_id: Supplier identifier, when known.
        supplier_name: Supplier display name.
        material_id: Material identifier.
        total_price: Line total; absent values count as zero.
        saving: Negotiated saving; absent values count as zero.
    """

    id: str | None
    purchase_id: str | None
    supplier_id: str | None = None
    supplier_name: str | None = None
    material_id: str | None = None
    total_price: Decimal | None = None
    saving: Decimal | None = None


@dataclass(frozen=True)
class EnrichedItem:
    """Line item joined with its parent purchase and reporting date."""

    item: PurchaseItem
    purchase: Purchase
    date: date
    resolved: bool = True


UNKNOWN_PURCHASE = Purchase(id="", created_at=None, buyer_name=None)


__all__ = ["Purchase", "PurchaseItem", "EnrichedItem", "UNKNOWN_PURCHASE"]
