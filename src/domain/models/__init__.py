"""Domain models package."""

from .dashboard import ChartPoint, DashboardStats, EvolutionPoint
from .period import PeriodSelector
from .purchases import (
    EnrichedItem,
    Purchase,
    PurchaseItem,
    UNKNOWN_PURCHASE,
)

__all__ = [
    "ChartPoint",
    "DashboardStats",
    "EvolutionPoint",
    "PeriodSelector",
    "EnrichedItem",
    "Purchase",
    "PurchaseItem",
    "UNKNOWN_PURCHASE",
]
