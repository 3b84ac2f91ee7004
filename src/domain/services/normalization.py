"""Domain normalization helpers for raw purchasing records."""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from src.domain.constants import (
    PERIOD_MODE_ALL,
    PERIOD_MODE_MONTH,
    PERIOD_MODE_YEAR,
)
from src.domain.errors import InvalidInputError
from src.domain.models.period import PeriodSelector
from src.domain.models.purchases import Purchase, PurchaseItem
from src.utils.decimal_utils import coerce_decimal


def normalize_text(value, field: str) -> str | None:
    """Normalize identifiers and names.

    Args:
        value: Raw value from a record.
        field: Field name used in error messages.

    Returns:
        str | None: Stripped text, or None when absent or blank.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidInputError(f"Field {field} must be text, got a boolean")
    if isinstance(value, (int, UUID)):
        return str(value)
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Field {field} must be text, got {type(value).__name__}"
        )
    cleaned = value.strip()
    return cleaned or None


def normalize_money(value, field: str) -> Decimal | None:
    """Normalize monetary amounts to Decimal.

    Args:
        value: Raw amount (number, numeric string or None).
        field: Field name used in error messages.

    Returns:
        Decimal | None: Amount, or None when absent.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return coerce_decimal(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            f"Field {field} is not an amount: {exc}"
        ) from exc


def normalize_timestamp(value, field: str) -> datetime | None:
    """Normalize creation timestamps.

    Accepts datetimes, dates and ISO 8601 strings ("2024-03-10",
    "2024-03-10T09:30:00Z").
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Field {field} must be a timestamp, got {type(value).__name__}"
        )
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return datetime.fromisoformat(cleaned)
    except ValueError as exc:
        raise InvalidInputError(
            f"Field {field} is not an ISO timestamp: {value!r}"
        ) from exc


def normalize_purchase(raw) -> Purchase:
    """Build a Purchase from a record or an upstream mapping.

    Mappings use the upstream field names ``id``, ``created_date`` and
    ``buyer_nome``.
    """
    if isinstance(raw, Purchase):
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidInputError(
            f"Purchase must be a mapping, got {type(raw).__name__}"
        )
    purchase_id = normalize_text(raw.get("id"), "id")
    if purchase_id is None:
        raise InvalidInputError("Purchase is missing its id")
    return Purchase(
        id=purchase_id,
        created_at=normalize_timestamp(
            raw.get("created_date"),
            "created_date",
        ),
        buyer_name=normalize_text(raw.get("buyer_nome"), "buyer_nome"),
    )


def normalize_purchase_item(raw) -> PurchaseItem:
    """Build a PurchaseItem from a record or an upstream mapping.

    Mappings use the upstream field names ``id``, ``purchase_id``,
    ``supplier_id``, ``supplier_nome``, ``material_id``, ``preco_total``
    and ``saving_reais``.
    """
    if isinstance(raw, PurchaseItem):
        normalize_money(raw.total_price, "total_price")
        normalize_money(raw.saving, "saving")
        return raw
    if not isinstance(raw, Mapping):
        raise InvalidInputError(
            f"Purchase item must be a mapping, got {type(raw).__name__}"
        )
    return PurchaseItem(
        id=normalize_text(raw.get("id"), "id"),
        purchase_id=normalize_text(raw.get("purchase_id"), "purchase_id"),
        supplier_id=normalize_text(raw.get("supplier_id"), "supplier_id"),
        supplier_name=normalize_text(
            raw.get("supplier_nome"),
            "supplier_nome",
        ),
        material_id=normalize_text(raw.get("material_id"), "material_id"),
        total_price=normalize_money(raw.get("preco_total"), "preco_total"),
        saving=normalize_money(raw.get("saving_reais"), "saving_reais"),
    )


def normalize_period(raw) -> PeriodSelector:
    """Build a PeriodSelector from a selector, mapping or compact token.

    Tokens are "all", "YYYY" or "YYYY-MM". Mappings carry ``mode`` plus
    ``year``/``month`` as integers or numeric strings.
    """
    if isinstance(raw, PeriodSelector):
        return raw
    if isinstance(raw, str):
        return _parse_period_token(raw)
    if not isinstance(raw, Mapping):
        raise InvalidInputError(
            f"Period must be a mapping or token, got {type(raw).__name__}"
        )
    mode = str(raw.get("mode", "")).strip().lower()
    if mode == PERIOD_MODE_ALL:
        return PeriodSelector.all_time()
    if mode == PERIOD_MODE_YEAR:
        return PeriodSelector.for_year(_to_int(raw.get("year"), "year"))
    if mode == PERIOD_MODE_MONTH:
        return PeriodSelector.for_month(
            _to_int(raw.get("year"), "year"),
            _to_int(raw.get("month"), "month"),
        )
    raise InvalidInputError(f"Unsupported period mode: {mode!r}")


def _parse_period_token(token: str) -> PeriodSelector:
    cleaned = token.strip().lower()
    if cleaned == PERIOD_MODE_ALL:
        return PeriodSelector.all_time()
    parts = cleaned.split("-")
    if len(parts) == 1:
        return PeriodSelector.for_year(_to_int(parts[0], "year"))
    if len(parts) == 2:
        return PeriodSelector.for_month(
            _to_int(parts[0], "year"),
            _to_int(parts[1], "month"),
        )
    raise InvalidInputError(f"Unsupported period token: {token!r}")


def _to_int(value, field: str) -> int:
    if isinstance(value, bool):
        raise InvalidInputError(f"Period {field} must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise InvalidInputError(f"Period {field} must be a number, got {value!r}")


__all__ = [
    "normalize_text",
    "normalize_money",
    "normalize_timestamp",
    "normalize_purchase",
    "normalize_purchase_item",
    "normalize_period",
]
