"""FastAPI routes for the back-office dashboard.

All endpoints accept optional ``start``/``end`` ISO datetimes; see
``resolve_period`` for how missing bounds are filled in.
"""

from dataclasses import asdict
from datetime import datetime

from fastapi import APIRouter

from storefront.analytics import reports
from storefront.analytics.api.schemas import (
    DashboardResponse,
    LowStockResponse,
    OrderStatusCountResponse,
    ProductRatingResponse,
    ProductSalesResponse,
    SalesBucketResponse,
    SalesSummaryResponse,
)
from storefront.analytics.period import PeriodFilter
from storefront.constants import DEFAULT_TOP_ITEMS

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary", response_model=SalesSummaryResponse)
async def get_summary(start: datetime | None = None, end: datetime | None = None) -> SalesSummaryResponse:
    return SalesSummaryResponse(**asdict(reports.sales_summary(start, end)))


@router.get("/sales", response_model=list[SalesBucketResponse])
async def get_sales_by_period(
    period: PeriodFilter = PeriodFilter.CUSTOM,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[SalesBucketResponse]:
    return [SalesBucketResponse(**asdict(b)) for b in reports.sales_by_period(period, start, end)]


@router.get("/top-products", response_model=list[ProductSalesResponse])
async def get_top_products(
    top: int = DEFAULT_TOP_ITEMS,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[ProductSalesResponse]:
    return [ProductSalesResponse(**asdict(p)) for p in reports.top_selling_products(top, start, end)]


@router.get("/low-stock", response_model=list[LowStockResponse])
async def get_low_stock(top: int = DEFAULT_TOP_ITEMS) -> list[LowStockResponse]:
    return [
        LowStockResponse(
            product_id=str(p.id),
            name=p.name,
            stock=p.stock,
            category_id=str(p.category_id),
            image_url=p.image_url,
        )
        for p in reports.lowest_stock_products(top)
    ]


@router.get("/best-rated", response_model=list[ProductRatingResponse])
async def get_best_rated(top: int = DEFAULT_TOP_ITEMS) -> list[ProductRatingResponse]:
    return [ProductRatingResponse(**asdict(r)) for r in reports.best_rated_products(top)]


@router.get("/worst-rated", response_model=list[ProductRatingResponse])
async def get_worst_rated(top: int = DEFAULT_TOP_ITEMS) -> list[ProductRatingResponse]:
    return [ProductRatingResponse(**asdict(r)) for r in reports.worst_rated_products(top)]


@router.get("/orders-by-status", response_model=list[OrderStatusCountResponse])
async def get_orders_by_status(
    start: datetime | None = None, end: datetime | None = None
) -> list[OrderStatusCountResponse]:
    return [OrderStatusCountResponse(**asdict(s)) for s in reports.orders_by_status(start, end)]


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    period: PeriodFilter = PeriodFilter.CUSTOM,
    top: int = DEFAULT_TOP_ITEMS,
    start: datetime | None = None,
    end: datetime | None = None,
) -> DashboardResponse:
    """Every dashboard panel over one resolved period."""
    board = reports.dashboard(period, top, start, end)
    return DashboardResponse(
        start=board.start.isoformat(),
        end=board.end.isoformat(),
        summary=SalesSummaryResponse(**asdict(board.summary)),
        orders_by_status=[OrderStatusCountResponse(**asdict(s)) for s in board.orders_by_status],
        sales_by_period=[SalesBucketResponse(**asdict(b)) for b in board.sales_by_period],
        top_products=[ProductSalesResponse(**asdict(p)) for p in board.top_products],
    )
