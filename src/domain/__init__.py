"""Domain package for purchasing rules and core models."""

from .constants import TOP_CHART_SIZE, UNKNOWN_LABEL
from .errors import InvalidInputError
from .models import (
    ChartPoint,
    DashboardStats,
    EnrichedItem,
    EvolutionPoint,
    PeriodSelector,
    Purchase,
    PurchaseItem,
    UNKNOWN_PURCHASE,
)
from .services import (
    compute_dashboard_stats,
    normalize_period,
    normalize_purchase,
    normalize_purchase_item,
)

__all__ = [
    "TOP_CHART_SIZE",
    "UNKNOWN_LABEL",
    "InvalidInputError",
    "ChartPoint",
    "DashboardStats",
    "EnrichedItem",
    "EvolutionPoint",
    "PeriodSelector",
    "Purchase",
    "PurchaseItem",
    "UNKNOWN_PURCHASE",
    "compute_dashboard_stats",
    "normalize_period",
    "normalize_purchase",
    "normalize_purchase_item",
]
