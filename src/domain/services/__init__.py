"""Domain services package."""

from .aggregation import (
    build_evolution,
    compute_dashboard_stats,
    enrich_items,
    filter_items,
    group_totals,
    index_purchases,
    top_chart_points,
)
from .normalization import (
    normalize_period,
    normalize_purchase,
    normalize_purchase_item,
)
from .validation import validate_record_collection

__all__ = [
    "build_evolution",
    "compute_dashboard_stats",
    "enrich_items",
    "filter_items",
    "group_totals",
    "index_purchases",
    "top_chart_points",
    "normalize_period",
    "normalize_purchase",
    "normalize_purchase_item",
    "validate_record_collection",
]
