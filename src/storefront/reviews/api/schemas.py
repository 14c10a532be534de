"""Pydantic request/response schemas for the Reviews API.

These are separate from Protean commands (anti-corruption pattern).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from storefront.constants import MAX_REVIEW_COMMENT_LENGTH


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class SubmitReviewRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "prod-001",
                    "customer_id": "cust-001",
                    "order_id": "order-001",
                    "rating": 5,
                    "comment": "Arrived quickly and well packed.",
                }
            ]
        }
    }

    product_id: str
    customer_id: str
    rating: int
    comment: str | None = Field(default=None, max_length=MAX_REVIEW_COMMENT_LENGTH)
    order_id: str | None = None


class ProductIdsRequest(BaseModel):
    product_ids: list[str] = []


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewIdResponse(BaseModel):
    review_id: str


class ReviewResponse(BaseModel):
    review_id: str
    product_id: str
    customer_id: str
    order_id: str | None = None
    rating: int
    comment: str | None = None
    reviewed_at: str | None = None


class ReviewSummaryResponse(BaseModel):
    product_id: str
    average_rating: float | None = None
    total_reviews: int = 0
    reviews: list[ReviewResponse] = []


class CustomerReviewResponse(BaseModel):
    has_reviewed: bool
    review: ReviewResponse | None = None
