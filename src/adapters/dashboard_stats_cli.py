"""CLI adapter printing purchasing KPIs for a reporting period.

The period comes from DASHBOARD_PERIOD: "all", a year ("2024") or a month
("2024-03").
"""

import os

from src.application.use_cases.get_dashboard_stats import (
    GetDashboardStatsUseCase,
)
from src.domain.constants import PERIOD_MODE_MONTH, PERIOD_MODE_YEAR
from src.domain.errors import InvalidInputError
from src.domain.models import DashboardStats, PeriodSelector
from src.domain.services.normalization import normalize_period
from src.infrastructure.container import (
    build_purchasing_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_period(value: str | None, logger) -> PeriodSelector:
    """Parse a period token, falling back to all history.

    Args:
        value: Token such as "all", "2024" or "2024-03".
        logger: Logger used for warnings.

    Returns:
        PeriodSelector: Parsed selector, or all history when invalid.
    """
    if not value:
        return PeriodSelector.all_time()
    try:
        return normalize_period(value)
    except InvalidInputError:
        logger.warning(
            f"Invalid period '{value}'. Expected all, YYYY or YYYY-MM."
        )
        return PeriodSelector.all_time()


def _describe_period(period: PeriodSelector) -> str:
    if period.mode == PERIOD_MODE_MONTH:
        return f"{period.year}-{period.month:02d}"
    if period.mode == PERIOD_MODE_YEAR:
        return str(period.year)
    return "all"


def _print_stats(stats: DashboardStats) -> None:
    print(f"Purchasing dashboard (period={_describe_period(stats.period)})")
    print(f"Purchases: {stats.unique_purchases}")
    print(f"Total spent: {stats.total_spent}")
    print(f"Total saving: {stats.total_saving}")
    print(f"Suppliers: {stats.unique_suppliers}")
    print(f"Materials: {stats.unique_materials}")
    print("Top buyers:")
    for point in stats.buyer_chart_data:
        print(f"  {point.name}: {point.value}")
    print("Top suppliers:")
    for point in stats.supplier_chart_data:
        print(f"  {point.name}: {point.value}")
    print("Evolution:")
    for point in stats.evolution_chart_data:
        print(f"  {point.label}: spent={point.spent}, saving={point.saving}")


def main() -> None:
    """Compute and print the dashboard for the configured period."""
    logger = get_app_logger()
    period = _parse_period(os.getenv("DASHBOARD_PERIOD"), logger)
    settings = build_settings()
    try:
        repository = build_purchasing_repository(settings=settings)
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    use_case = GetDashboardStatsUseCase(
        purchasing_repository=repository,
        logger=logger,
        purchases_limit=settings.purchases_limit,
        items_limit=settings.items_limit,
    )
    try:
        stats = use_case.execute(period)
    except InvalidInputError as exc:
        logger.error(f"Purchasing data is malformed: {exc}")
        return

    get_usage_logger().info(
        f"dashboard_stats period={_describe_period(period)} "
        f"backend={settings.backend}"
    )
    _print_stats(stats)


if __name__ == "__main__":  # pragma: no cover
    main()
