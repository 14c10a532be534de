"""Response schemas for the back-office analytics API."""

from __future__ import annotations

from pydantic import BaseModel


class SalesSummaryResponse(BaseModel):
    revenue: float
    order_count: int
    average_order_value: float
    active_customers: int
    total_products: int
    out_of_stock_products: int


class SalesBucketResponse(BaseModel):
    period: str
    revenue: float
    order_count: int
    items_sold: int


class ProductSalesResponse(BaseModel):
    product_id: str
    name: str
    image_url: str | None = None
    quantity_sold: int
    revenue: float


class LowStockResponse(BaseModel):
    product_id: str
    name: str
    stock: int
    category_id: str
    image_url: str | None = None


class ProductRatingResponse(BaseModel):
    product_id: str
    name: str
    image_url: str | None = None
    average_rating: float
    total_reviews: int


class OrderStatusCountResponse(BaseModel):
    status: str
    label: str
    count: int
    revenue: float


class DashboardResponse(BaseModel):
    start: str
    end: str
    summary: SalesSummaryResponse
    orders_by_status: list[OrderStatusCountResponse] = []
    sales_by_period: list[SalesBucketResponse] = []
    top_products: list[ProductSalesResponse] = []
