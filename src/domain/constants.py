"""Domain constants for purchasing analytics."""

UNKNOWN_LABEL = "N/A"

TOP_CHART_SIZE = 10

MONTHS_IN_YEAR = 12

PERIOD_MODE_MONTH = "month"
PERIOD_MODE_YEAR = "year"
PERIOD_MODE_ALL = "all"

PERIOD_MODES = (
    PERIOD_MODE_MONTH,
    PERIOD_MODE_YEAR,
    PERIOD_MODE_ALL,
)

DEFAULT_PURCHASES_LIMIT = 1000
DEFAULT_PURCHASE_ITEMS_LIMIT = 2000


__all__ = [
    "UNKNOWN_LABEL",
    "TOP_CHART_SIZE",
    "MONTHS_IN_YEAR",
    "PERIOD_MODE_MONTH",
    "PERIOD_MODE_YEAR",
    "PERIOD_MODE_ALL",
    "PERIOD_MODES",
    "DEFAULT_PURCHASES_LIMIT",
    "DEFAULT_PURCHASE_ITEMS_LIMIT",
]
