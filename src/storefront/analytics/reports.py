"""Back-office sales, stock and rating reports.

Every report reads straight from the aggregates (orders, products) or the
ProductRating projection; nothing here writes. Date bounds are inclusive and
money is rounded to cents.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from storefront.analytics.period import PeriodFilter, resolve_period
from storefront.catalogue.product.product import Product
from storefront.constants import DEFAULT_TOP_ITEMS
from storefront.ordering.order.order import Order, label_for
from storefront.reviews.projections.product_rating import ProductRating
from storefront.shared.paging import fetch_all
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Report rows
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SalesSummary:
    revenue: float
    order_count: int
    average_order_value: float
    active_customers: int
    total_products: int
    out_of_stock_products: int


@dataclass(frozen=True)
class SalesBucket:
    period: str
    revenue: float
    order_count: int
    items_sold: int


@dataclass(frozen=True)
class ProductSales:
    product_id: str
    name: str
    image_url: str | None
    quantity_sold: int
    revenue: float


@dataclass(frozen=True)
class ProductRatingStats:
    product_id: str
    name: str
    image_url: str | None
    average_rating: float
    total_reviews: int


@dataclass(frozen=True)
class OrderStatusCount:
    status: str
    label: str
    count: int
    revenue: float


@dataclass(frozen=True)
class Dashboard:
    start: datetime
    end: datetime
    summary: SalesSummary
    orders_by_status: list[OrderStatusCount] = field(default_factory=list)
    sales_by_period: list[SalesBucket] = field(default_factory=list)
    top_products: list[ProductSales] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _check_top(top: int) -> None:
    if top is None or top <= 0:
        raise ValidationError({"top": ["top must be greater than zero"]})


def _cents(amount) -> float:
    return round(float(amount or 0.0), 2)


def _orders_between(start: datetime, end: datetime) -> list:
    query = current_domain.repository_for(Order)._dao.query.filter(placed_at__gte=start, placed_at__lte=end)
    return fetch_all(query)


def _products_by_id(product_ids) -> dict:
    ids = [str(pid) for pid in set(product_ids)]
    if not ids:
        return {}
    products = fetch_all(current_domain.repository_for(Product)._dao.query.filter(id__in=ids))
    return {str(p.id): p for p in products}


def _summarize(orders) -> SalesSummary:
    revenue = sum(o.total for o in orders)
    order_count = len(orders)
    products = fetch_all(current_domain.repository_for(Product)._dao.query)

    return SalesSummary(
        revenue=_cents(revenue),
        order_count=order_count,
        average_order_value=_cents(revenue / order_count) if order_count else 0.0,
        active_customers=len({str(o.customer_id) for o in orders}),
        total_products=len(products),
        out_of_stock_products=sum(1 for p in products if (p.stock or 0) <= 0),
    )


def _bucket_sales(orders, monthly: bool) -> list[SalesBucket]:
    key_format = "%Y-%m" if monthly else "%Y-%m-%d"
    buckets = defaultdict(lambda: {"revenue": 0.0, "orders": 0, "items": 0})

    for order in orders:
        bucket = buckets[order.placed_at.strftime(key_format)]
        bucket["revenue"] += order.total
        bucket["orders"] += 1
        bucket["items"] += sum(item.quantity for item in order.items)

    return [
        SalesBucket(
            period=key,
            revenue=_cents(values["revenue"]),
            order_count=values["orders"],
            items_sold=values["items"],
        )
        for key, values in sorted(buckets.items())
    ]


def _top_sellers(orders, top: int) -> list[ProductSales]:
    quantities = defaultdict(int)
    revenues = defaultdict(float)
    names = {}

    for order in orders:
        for item in order.items:
            product_id = str(item.product_id)
            quantities[product_id] += item.quantity
            revenues[product_id] += item.quantity * item.unit_price
            names.setdefault(product_id, item.product_name)

    products = _products_by_id(quantities)
    ranked = sorted(quantities, key=lambda pid: quantities[pid], reverse=True)[:top]

    rows = []
    for product_id in ranked:
        product = products.get(product_id)
        rows.append(
            ProductSales(
                product_id=product_id,
                name=product.name if product else names[product_id],
                image_url=product.image_url if product else None,
                quantity_sold=quantities[product_id],
                revenue=_cents(revenues[product_id]),
            )
        )
    return rows


def _status_counts(orders) -> list[OrderStatusCount]:
    counts = defaultdict(int)
    revenues = defaultdict(float)
    for order in orders:
        counts[order.status] += 1
        revenues[order.status] += order.total

    return [
        OrderStatusCount(
            status=status,
            label=label_for(status),
            count=counts[status],
            revenue=_cents(revenues[status]),
        )
        for status in counts
    ]


def _rated_products() -> list[ProductRatingStats]:
    ratings = fetch_all(current_domain.repository_for(ProductRating)._dao.query.filter(total_reviews__gt=0))
    products = _products_by_id(r.product_id for r in ratings)

    stats = []
    for rating in ratings:
        product = products.get(str(rating.product_id))
        if product is None:
            continue
        stats.append(
            ProductRatingStats(
                product_id=str(product.id),
                name=product.name,
                image_url=product.image_url,
                average_rating=rating.average_rating,
                total_reviews=rating.total_reviews,
            )
        )
    return stats


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------
def sales_summary(start: datetime | None = None, end: datetime | None = None) -> SalesSummary:
    start, end = resolve_period(start, end)
    return _summarize(_orders_between(start, end))


def sales_by_period(
    period: PeriodFilter | str = PeriodFilter.CUSTOM,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[SalesBucket]:
    """Revenue, order count and items sold per month (``this_year``) or per day."""
    period = PeriodFilter(period)
    start, end = resolve_period(start, end, period)
    return _bucket_sales(_orders_between(start, end), monthly=period is PeriodFilter.THIS_YEAR)


def top_selling_products(
    top: int = DEFAULT_TOP_ITEMS,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[ProductSales]:
    _check_top(top)
    start, end = resolve_period(start, end)
    return _top_sellers(_orders_between(start, end), top)


def lowest_stock_products(top: int = DEFAULT_TOP_ITEMS) -> list:
    _check_top(top)
    products = fetch_all(current_domain.repository_for(Product)._dao.query)
    return sorted(products, key=lambda p: (p.stock or 0, p.name))[:top]


def best_rated_products(top: int = DEFAULT_TOP_ITEMS) -> list[ProductRatingStats]:
    _check_top(top)
    stats = _rated_products()
    return sorted(stats, key=lambda s: (s.average_rating, s.total_reviews), reverse=True)[:top]


def worst_rated_products(top: int = DEFAULT_TOP_ITEMS) -> list[ProductRatingStats]:
    _check_top(top)
    stats = _rated_products()
    return sorted(stats, key=lambda s: (s.average_rating, s.total_reviews))[:top]


def orders_by_status(start: datetime | None = None, end: datetime | None = None) -> list[OrderStatusCount]:
    start, end = resolve_period(start, end)
    return _status_counts(_orders_between(start, end))


def dashboard(
    period: PeriodFilter | str = PeriodFilter.CUSTOM,
    top: int = DEFAULT_TOP_ITEMS,
    start: datetime | None = None,
    end: datetime | None = None,
) -> Dashboard:
    """All the dashboard panels over one resolved range, from a single order read."""
    _check_top(top)
    period = PeriodFilter(period)
    start, end = resolve_period(start, end, period)
    orders = _orders_between(start, end)

    logger.debug("dashboard_built", period=period.value, start=start.isoformat(), end=end.isoformat())
    return Dashboard(
        start=start,
        end=end,
        summary=_summarize(orders),
        orders_by_status=_status_counts(orders),
        sales_by_period=_bucket_sales(orders, monthly=period is PeriodFilter.THIS_YEAR),
        top_products=_top_sellers(orders, top),
    )
