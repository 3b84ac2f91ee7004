"""Domain services for purchasing dashboard aggregates."""

from collections.abc import Callable, Iterable, Sequence
from datetime import date, datetime
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    MONTHS_IN_YEAR,
    PERIOD_MODE_ALL,
    PERIOD_MODE_YEAR,
    TOP_CHART_SIZE,
    UNKNOWN_LABEL,
)
from src.domain.models import (
    ChartPoint,
    DashboardStats,
    EnrichedItem,
    EvolutionPoint,
    PeriodSelector,
    Purchase,
    PurchaseItem,
    UNKNOWN_PURCHASE,
)
from src.domain.services.normalization import (
    normalize_period,
    normalize_purchase,
    normalize_purchase_item,
)
from src.domain.services.validation import validate_record_collection
from src.utils.decimal_utils import coerce_decimal

Clock = Callable[[], datetime]


def compute_dashboard_stats(
    items: Sequence,
    purchases: Sequence,
    period,
    *,
    clock: Clock | None = None,
    logger: Logger | None = None,
) -> DashboardStats:
    """Compute KPIs and chart series for a reporting period.

    Args:
        items: Purchase items, as records or upstream mappings.
        purchases: Purchases, as records or upstream mappings.
        period: PeriodSelector, selector mapping or compact token.
        clock: Callable returning the current time; read only when an item
            references an unknown purchase.
        logger: Optional logger for data-quality notes.

    Returns:
        DashboardStats: Scalars and chart series for the filtered items.

    Raises:
        InvalidInputError: If a collection, record or selector is malformed.
    """
    selector = normalize_period(period)
    item_records = [
        normalize_purchase_item(raw)
        for raw in validate_record_collection(items, "items")
    ]
    purchase_records = [
        normalize_purchase(raw)
        for raw in validate_record_collection(purchases, "purchases")
    ]

    enriched = enrich_items(item_records, purchase_records, clock=clock)
    if logger is not None:
        dangling = sum(1 for entry in enriched if not entry.resolved)
        if dangling:
            logger.debug(
                f"{dangling} purchase items reference unknown purchases"
            )
    filtered = filter_items(enriched, selector)

    total_spent = sum(
        (coerce_decimal(entry.item.total_price) for entry in filtered),
        Decimal("0"),
    )
    total_saving = sum(
        (coerce_decimal(entry.item.saving) for entry in filtered),
        Decimal("0"),
    )

    return DashboardStats(
        period=selector,
        unique_purchases=_count_distinct(
            entry.item.purchase_id for entry in filtered
        ),
        total_spent=total_spent,
        total_saving=total_saving,
        unique_suppliers=_count_distinct(
            _supplier_key(entry.item) for entry in filtered
        ),
        unique_materials=_count_distinct(
            entry.item.material_id for entry in filtered
        ),
        buyer_chart_data=top_chart_points(group_totals(filtered, buyer_label)),
        supplier_chart_data=top_chart_points(
            group_totals(filtered, supplier_label)
        ),
        evolution_chart_data=build_evolution(filtered, selector),
    )


def index_purchases(purchases: Iterable[Purchase]) -> dict[str, Purchase]:
    """Map purchase identifiers to purchases; later duplicates win."""
    return {purchase.id: purchase for purchase in purchases}


def enrich_items(
    items: Sequence[PurchaseItem],
    purchases: Iterable[Purchase],
    *,
    clock: Clock | None = None,
) -> list[EnrichedItem]:
    """Join each item to its parent purchase and derive its reporting date.

    Items whose purchase is unknown are attached to UNKNOWN_PURCHASE and
    dated with a single clock reading shared by the whole call.
    """
    lookup = index_purchases(purchases)
    read_clock = clock or datetime.now
    fallback_date: date | None = None
    enriched: list[EnrichedItem] = []
    for item in items:
        purchase = lookup.get(item.purchase_id) if item.purchase_id else None
        resolved = purchase is not None
        parent = purchase if resolved else UNKNOWN_PURCHASE
        if parent.created_at is not None:
            item_date = parent.created_at.date()
        else:
            if fallback_date is None:
                fallback_date = read_clock().date()
            item_date = fallback_date
        enriched.append(
            EnrichedItem(
                item=item,
                purchase=parent,
                date=item_date,
                resolved=resolved,
            )
        )
    return enriched


def filter_items(
    enriched: Iterable[EnrichedItem],
    period: PeriodSelector,
) -> list[EnrichedItem]:
    """Keep the items dated inside the period, preserving their order."""
    return [entry for entry in enriched if period.matches(entry.date)]


def buyer_label(entry: EnrichedItem) -> str:
    return entry.purchase.buyer_name or UNKNOWN_LABEL


def supplier_label(entry: EnrichedItem) -> str:
    return entry.item.supplier_name or UNKNOWN_LABEL


def group_totals(
    enriched: Iterable[EnrichedItem],
    label_for: Callable[[EnrichedItem], str],
) -> dict[str, Decimal]:
    """Sum line totals per label, keeping first-seen label order."""
    totals: dict[str, Decimal] = {}
    for entry in enriched:
        label = label_for(entry)
        amount = coerce_decimal(entry.item.total_price)
        totals[label] = totals.get(label, Decimal("0")) + amount
    return totals


def top_chart_points(
    totals: dict[str, Decimal],
    size: int = TOP_CHART_SIZE,
) -> tuple[ChartPoint, ...]:
    """Return the largest buckets, ties kept in first-seen order."""
    ranked = sorted(totals.items(), key=lambda entry: -entry[1])
    return tuple(
        ChartPoint(name=name, value=value) for name, value in ranked[:size]
    )


def build_evolution(
    enriched: Iterable[EnrichedItem],
    period: PeriodSelector,
) -> tuple[EvolutionPoint, ...]:
    """Accumulate spend and saving per time bucket.

    Year mode always yields twelve monthly points. All mode creates
    year-month buckets in the order items are met, which is not
    necessarily chronological. Month mode yields the month in scope once
    it holds an item.
    """
    buckets: dict[tuple[int, int], list[Decimal]] = {}
    if period.mode == PERIOD_MODE_YEAR:
        for month in range(1, MONTHS_IN_YEAR + 1):
            buckets[(period.year, month)] = [Decimal("0"), Decimal("0")]

    for entry in enriched:
        key = (entry.date.year, entry.date.month)
        bucket = buckets.setdefault(key, [Decimal("0"), Decimal("0")])
        bucket[0] += coerce_decimal(entry.item.total_price)
        bucket[1] += coerce_decimal(entry.item.saving)

    return tuple(
        EvolutionPoint(
            label=_bucket_label(period, year, month),
            spent=spent,
            saving=saving,
            year=year,
            month=month,
        )
        for (year, month), (spent, saving) in buckets.items()
    )


def _bucket_label(period: PeriodSelector, year: int, month: int) -> str:
    if period.mode == PERIOD_MODE_ALL:
        return f"{year}-{month:02d}"
    return f"{month:02d}"


def _supplier_key(item: PurchaseItem) -> str | None:
    # Falls back to the name when the export has no supplier_id.
    return item.supplier_id or item.supplier_name


def _count_distinct(values: Iterable[str | None]) -> int:
    return len({value for value in values if value})


__all__ = [
    "Clock",
    "compute_dashboard_stats",
    "index_purchases",
    "enrich_items",
    "filter_items",
    "buyer_label",
    "supplier_label",
    "group_totals",
    "top_chart_points",
    "build_evolution",
]
