"""FastAPI routes for product reviews and ratings."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from storefront.reviews.api.schemas import (
    CustomerReviewResponse,
    ProductIdsRequest,
    ReviewIdResponse,
    ReviewResponse,
    ReviewSummaryResponse,
    SubmitReviewRequest,
)
from storefront.reviews.queries import average_ratings, review_by_customer, review_summary, reviews_for_product
from storefront.reviews.review.submission import SubmitReview

review_router = APIRouter(prefix="/reviews", tags=["reviews"])


def _review_response(review) -> ReviewResponse:
    return ReviewResponse(
        review_id=str(review.id),
        product_id=str(review.product_id),
        customer_id=str(review.customer_id),
        order_id=str(review.order_id) if review.order_id else None,
        rating=review.score,
        comment=review.comment,
        reviewed_at=str(review.reviewed_at) if review.reviewed_at else None,
    )


@review_router.post("", status_code=201, response_model=ReviewIdResponse)
async def submit_review(body: SubmitReviewRequest) -> ReviewIdResponse:
    """Rate a product, optionally against one of the customer's orders."""
    command = SubmitReview(
        product_id=body.product_id,
        customer_id=body.customer_id,
        rating=body.rating,
        comment=body.comment,
        order_id=body.order_id,
    )
    review_id = current_domain.process(command, asynchronous=False)
    return ReviewIdResponse(review_id=review_id)


@review_router.get("/product/{product_id}", response_model=list[ReviewResponse])
async def get_product_reviews(product_id: str, with_comment: bool = False) -> list[ReviewResponse]:
    return [_review_response(r) for r in reviews_for_product(product_id, only_with_comment=with_comment)]


@review_router.get("/product/{product_id}/summary", response_model=ReviewSummaryResponse)
async def get_review_summary(product_id: str) -> ReviewSummaryResponse:
    summary = review_summary(product_id)
    return ReviewSummaryResponse(
        product_id=product_id,
        average_rating=summary.average,
        total_reviews=summary.total,
        reviews=[_review_response(r) for r in summary.commented],
    )


@review_router.post("/averages", response_model=dict[str, float | None])
async def get_average_ratings(body: ProductIdsRequest) -> dict[str, float | None]:
    return average_ratings(body.product_ids)


@review_router.get("/product/{product_id}/customer/{customer_id}", response_model=CustomerReviewResponse)
async def get_customer_review(product_id: str, customer_id: str) -> CustomerReviewResponse:
    review = review_by_customer(customer_id, product_id)
    return CustomerReviewResponse(
        has_reviewed=review is not None,
        review=_review_response(review) if review else None,
    )
