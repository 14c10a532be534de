"""Review read queries: listings, averages and per-customer checks."""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from storefront.reviews.projections.product_rating import ProductRating
from storefront.reviews.review.review import Review
from storefront.shared.paging import fetch_all


@dataclass(frozen=True)
class ReviewSummary:
    average: float | None
    total: int
    commented: list = field(default_factory=list)


def _reviews(**criteria) -> list:
    return fetch_all(current_domain.repository_for(Review)._dao.query.filter(**criteria))


def _newest_first(reviews):
    return sorted(reviews, key=lambda r: r.reviewed_at, reverse=True)


def _average(reviews) -> float | None:
    if not reviews:
        return None
    return round(sum(r.score for r in reviews) / len(reviews), 2)


def reviews_for_product(product_id, only_with_comment: bool = False) -> list:
    reviews = _reviews(product_id=str(product_id))
    if only_with_comment:
        reviews = [r for r in reviews if r.has_comment]
    return _newest_first(reviews)


def average_rating(product_id) -> float | None:
    return _average(_reviews(product_id=str(product_id)))


def review_count(product_id) -> int:
    return current_domain.repository_for(Review)._dao.query.filter(product_id=str(product_id)).all().total


def review_summary(product_id) -> ReviewSummary:
    reviews = _reviews(product_id=str(product_id))
    return ReviewSummary(
        average=_average(reviews),
        total=len(reviews),
        commented=_newest_first([r for r in reviews if r.has_comment]),
    )


def average_ratings(product_ids) -> dict:
    """Average rating for every requested id; None for products nobody rated."""
    ids = [str(pid) for pid in dict.fromkeys(product_ids)]
    averages = dict.fromkeys(ids)
    if not ids:
        return averages

    ratings = fetch_all(current_domain.repository_for(ProductRating)._dao.query.filter(product_id__in=ids))
    for rating in ratings:
        if rating.total_reviews:
            averages[str(rating.product_id)] = rating.average_rating
    return averages


def has_reviewed(customer_id, product_id) -> bool:
    if not customer_id or not str(customer_id).strip():
        return False
    return bool(_reviews(customer_id=str(customer_id), product_id=str(product_id)))


def has_reviewed_in_order(customer_id, product_id, order_id) -> bool:
    if not customer_id or not str(customer_id).strip():
        return False
    return bool(_reviews(customer_id=str(customer_id), product_id=str(product_id), order_id=str(order_id)))


def review_by_customer(customer_id, product_id) -> Review | None:
    if not customer_id or not str(customer_id).strip():
        return None
    reviews = _newest_first(_reviews(customer_id=str(customer_id), product_id=str(product_id)))
    return reviews[0] if reviews else None
