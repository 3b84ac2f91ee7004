"""Tests for raw record normalization."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import pytest

from src.domain.errors import InvalidInputError
from src.domain.models import PeriodSelector, Purchase, PurchaseItem
from src.domain.services.normalization import (
    normalize_period,
    normalize_purchase,
    normalize_purchase_item,
    normalize_text,
    normalize_timestamp,
)


def test_normalize_purchase_reads_upstream_fields() -> None:
    """Upstream field names should map onto the Purchase record."""
    purchase = normalize_purchase(
        {"id": " P1 ", "created_date": "2024-03-10", "buyer_nome": "Alice"}
    )

    assert purchase == Purchase(
        id="P1",
        created_at=datetime(2024, 3, 10),
        buyer_name="Alice",
    )


def test_normalize_purchase_requires_an_id() -> None:
    """Purchases without an identifier cannot be joined."""
    with pytest.raises(InvalidInputError):
        normalize_purchase({"buyer_nome": "Alice"})


def test_normalize_purchase_item_converts_amounts() -> None:
    """Amounts should be Decimals and blanks should become None."""
    item = normalize_purchase_item(
        {
            "id": 7,
            "purchase_id": "P1",
            "supplier_id": "",
            "supplier_nome": "Acme",
            "material_id": "M1",
            "preco_total": 10.5,
            "saving_reais": "  ",
        }
    )

    assert item == PurchaseItem(
        id="7",
        purchase_id="P1",
        supplier_id=None,
        supplier_name="Acme",
        material_id="M1",
        total_price=Decimal("10.5"),
        saving=None,
    )


def test_records_pass_through_unchanged() -> None:
    """Already typed records should be returned as they are."""
    purchase = Purchase(id="P1")
    item = PurchaseItem(id="1", purchase_id="P1")

    assert normalize_purchase(purchase) is purchase
    assert normalize_purchase_item(item) is item


def test_normalize_text_stringifies_uuid_values() -> None:
    """UUID identifiers from the database should be kept as text."""
    value = UUID("12345678-1234-5678-1234-567812345678")

    assert normalize_text(value, "id") == (
        "12345678-1234-5678-1234-567812345678"
    )


@pytest.mark.parametrize("value", [3.5, ["P1"], True])
def test_normalize_text_rejects_non_text(value) -> None:
    """Identifiers must be text or integers."""
    with pytest.raises(InvalidInputError):
        normalize_text(value, "id")


def test_normalize_timestamp_accepts_dates_and_iso_strings() -> None:
    """Dates, datetimes and ISO strings should all become datetimes."""
    assert normalize_timestamp(date(2024, 1, 2), "created_date") == datetime(
        2024, 1, 2
    )
    assert normalize_timestamp(
        "2024-01-02T10:30:00", "created_date"
    ) == datetime(2024, 1, 2, 10, 30)
    assert normalize_timestamp("", "created_date") is None
    assert normalize_timestamp(None, "created_date") is None


def test_normalize_timestamp_rejects_garbage() -> None:
    """Unparseable timestamps should be reported."""
    with pytest.raises(InvalidInputError):
        normalize_timestamp("10/03/2024", "created_date")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("all", PeriodSelector.all_time()),
        ("2024", PeriodSelector.for_year(2024)),
        ("2024-03", PeriodSelector.for_month(2024, 3)),
        ({"mode": "all"}, PeriodSelector.all_time()),
        ({"mode": "year", "year": "2023"}, PeriodSelector.for_year(2023)),
        (
            {"mode": "month", "year": 2024, "month": "12"},
            PeriodSelector.for_month(2024, 12),
        ),
    ],
)
def test_normalize_period_accepts_tokens_and_mappings(raw, expected) -> None:
    """Period tokens and mappings should parse into selectors."""
    assert normalize_period(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "2024-13",
        "2024-03-01",
        "last-year",
        {"mode": "quarter", "year": 2024},
        {"mode": "month", "year": "2024"},
        {"mode": "year"},
        None,
    ],
)
def test_normalize_period_rejects_malformed_selectors(raw) -> None:
    """Malformed selectors should raise InvalidInputError."""
    with pytest.raises(InvalidInputError):
        normalize_period(raw)
