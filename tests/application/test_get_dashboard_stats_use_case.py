"""Tests for the GetDashboardStatsUseCase."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_dashboard_stats import (
    GetDashboardStatsUseCase,
)
from src.domain.errors import InvalidInputError
from src.domain.models import PeriodSelector, Purchase, PurchaseItem


def _build_repository(
    purchases: list[Purchase],
    items: list[PurchaseItem],
) -> MagicMock:
    repository = MagicMock()
    repository.list_purchases.return_value = purchases
    repository.list_purchase_items.return_value = items
    return repository


def test_execute_fetches_bounded_snapshot_and_aggregates() -> None:
    """Use case should request limited lists and aggregate them."""
    purchases = [
        Purchase(
            id="P1", created_at=datetime(2024, 3, 10), buyer_name="Alice"
        ),
        Purchase(id="P2", created_at=datetime(2024, 4, 2), buyer_name="Bob"),
    ]
    items = [
        PurchaseItem(
            id="1",
            purchase_id="P1",
            supplier_id="S1",
            supplier_name="Acme",
            material_id="M1",
            total_price=Decimal("100"),
            saving=Decimal("20"),
        ),
        PurchaseItem(
            id="2",
            purchase_id="P2",
            supplier_id="S2",
            supplier_name="Beta",
            material_id="M2",
            total_price=Decimal("40"),
            saving=Decimal("4"),
        ),
    ]
    repository = _build_repository(purchases, items)
    logger = MagicMock()

    use_case = GetDashboardStatsUseCase(
        purchasing_repository=repository,
        logger=logger,
    )

    result = use_case.execute(PeriodSelector.for_year(2024))

    repository.list_purchases.assert_called_once_with(1000)
    repository.list_purchase_items.assert_called_once_with(2000)
    assert result.total_spent == Decimal("140")
    assert result.total_saving == Decimal("24")
    assert result.unique_purchases == 2
    assert [point.name for point in result.buyer_chart_data] == [
        "Alice",
        "Bob",
    ]
    assert len(result.evolution_chart_data) == 12
    logger.warning.assert_not_called()
    assert logger.info.call_count == 2


def test_execute_accepts_period_tokens_and_custom_limits() -> None:
    """Tokens should be parsed and configured limits forwarded."""
    repository = _build_repository([], [])

    use_case = GetDashboardStatsUseCase(
        purchasing_repository=repository,
        logger=MagicMock(),
        purchases_limit=10,
        items_limit=20,
    )

    result = use_case.execute("2024-03")

    assert result.period == PeriodSelector.for_month(2024, 3)
    repository.list_purchases.assert_called_once_with(10)
    repository.list_purchase_items.assert_called_once_with(20)


def test_execute_warns_when_snapshot_hits_the_limit() -> None:
    """Reaching the fetch limit should be reported as possibly incomplete."""
    purchases = [Purchase(id=f"P{index}") for index in range(2)]
    repository = _build_repository(purchases, [])
    logger = MagicMock()

    use_case = GetDashboardStatsUseCase(
        purchasing_repository=repository,
        logger=logger,
        purchases_limit=2,
    )

    use_case.execute()

    logger.warning.assert_called_once()
    assert "limit of 2" in logger.warning.call_args.args[0]


def test_execute_uses_injected_clock_for_unknown_purchases() -> None:
    """Items of unknown purchases should be dated with the injected clock."""
    items = [
        PurchaseItem(id="1", purchase_id="GONE", total_price=Decimal("9")),
    ]
    repository = _build_repository([], items)

    use_case = GetDashboardStatsUseCase(
        purchasing_repository=repository,
        logger=MagicMock(),
        clock=lambda: datetime(2022, 8, 1),
    )

    in_scope = use_case.execute("2022-08")
    out_of_scope = use_case.execute("2022-09")

    assert in_scope.total_spent == Decimal("9")
    assert in_scope.buyer_chart_data[0].name == "N/A"
    assert out_of_scope.total_spent == Decimal("0")


def test_execute_rejects_malformed_period_before_fetching() -> None:
    """Invalid selectors should abort without touching the repository."""
    repository = _build_repository([], [])

    use_case = GetDashboardStatsUseCase(
        purchasing_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(InvalidInputError):
        use_case.execute({"mode": "quarter"})
    repository.list_purchases.assert_not_called()
