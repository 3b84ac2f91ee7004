"""Use case to compute purchasing dashboard figures for a period."""

from src.application.ports.purchasing_repository import (
    PurchasingRepositoryPort,
)
from src.domain.constants import (
    DEFAULT_PURCHASE_ITEMS_LIMIT,
    DEFAULT_PURCHASES_LIMIT,
)
from src.domain.models import DashboardStats
from src.domain.services.aggregation import Clock, compute_dashboard_stats
from src.domain.services.normalization import normalize_period
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardStatsUseCase:
    """Fetch a purchasing snapshot and aggregate it for the dashboard."""

    def __init__(
        self,
        purchasing_repository: PurchasingRepositoryPort,
        logger=None,
        clock: Clock | None = None,
        purchases_limit: int = DEFAULT_PURCHASES_LIMIT,
        items_limit: int = DEFAULT_PURCHASE_ITEMS_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            purchasing_repository: Port providing purchases and items.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current time, used to
                date items whose purchase is unknown.
            purchases_limit: Maximum purchases requested per snapshot.
            items_limit: Maximum purchase items requested per snapshot.
        """
        self._purchasing_repository = purchasing_repository
        self._logger = logger or get_app_logger()
        self._clock = clock
        self._purchases_limit = purchases_limit
        self._items_limit = items_limit

    def execute(self, period="all") -> DashboardStats:
        """Return KPIs and chart series for the period.

        Args:
            period: PeriodSelector, selector mapping or token
                ("all", "YYYY", "YYYY-MM").

        Returns:
            DashboardStats: Aggregated figures for the period.
        """
        selector = normalize_period(period)
        purchases = self._purchasing_repository.list_purchases(
            self._purchases_limit
        )
        items = self._purchasing_repository.list_purchase_items(
            self._items_limit
        )
        self._logger.info(
            f"Fetched {len(purchases)} purchases and {len(items)} items"
        )
        if len(purchases) >= self._purchases_limit:
            self._logger.warning(
                f"Purchases snapshot reached the limit of "
                f"{self._purchases_limit}; totals may be incomplete"
            )
        if len(items) >= self._items_limit:
            self._logger.warning(
                f"Items snapshot reached the limit of "
                f"{self._items_limit}; totals may be incomplete"
            )

        stats = compute_dashboard_stats(
            items,
            purchases,
            selector,
            clock=self._clock,
            logger=self._logger,
        )
        self._logger.info(
            f"Dashboard computed for mode={selector.mode}: "
            f"spent={stats.total_spent}, saving={stats.total_saving}, "
            f"purchases={stats.unique_purchases}"
        )
        return stats


__all__ = ["GetDashboardStatsUseCase", "DashboardStats"]
