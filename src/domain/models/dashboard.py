"""Domain models for dashboard aggregates."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.period import PeriodSelector


@dataclass(frozen=True)
class ChartPoint:
    """Labelled value in a ranking chart."""

    name: str
    value: Decimal


@dataclass(frozen=True)
class EvolutionPoint:
    """Spend and saving accumulated for one time bucket.

    Attributes:
        label: Bucket label ("MM" in month/year modes, "YYYY-MM" otherwise).
        spent: Sum of line totals in the bucket.
        saving: Sum of savings in the bucket.
        year: Calendar year of the bucket.
        month: Calendar month of the bucket.
    """

    label: str
    spent: Decimal
    saving: Decimal
    year: int
    month: int


@dataclass(frozen=True)
class DashboardStats:
    """KPIs and chart series computed for a reporting period.

    Attributes:
        period: Period the figures were computed for.
        unique_purchases: Distinct purchase references among the items.
        total_spent: Sum of line totals.
        total_saving: Sum of savings.
        unique_suppliers: Distinct non-empty supplier identifiers.
        unique_materials: Distinct material identifiers.
        buyer_chart_data: Top buyers by spend.
        supplier_chart_data: Top suppliers by spend.
        evolution_chart_data: Spend and saving per time bucket.
    """

    period: PeriodSelector
    unique_purchases: int
    total_spent: Decimal
    total_saving: Decimal
    unique_suppliers: int
    unique_materials: int
    buyer_chart_data: tuple[ChartPoint, ...]
    supplier_chart_data: tuple[ChartPoint, ...]
    evolution_chart_data: tuple[EvolutionPoint, ...]


__all__ = ["ChartPoint", "EvolutionPoint", "DashboardStats"]
