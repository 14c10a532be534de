"""Review aggregate: a customer's rating of a product, optionally with a comment.

Reviews are write-once: there is no moderation or editing. A customer may
review the same product more than once, for instance once per order.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, ValueObject

from storefront.constants import MAX_RATING, MAX_REVIEW_COMMENT_LENGTH, MIN_RATING
from storefront.domain import storefront


@storefront.value_object(part_of="Review")
class Rating:
    """A star rating from 0 to 5."""

    score = Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and (self.score < MIN_RATING or self.score > MAX_RATING):
            raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})


@storefront.aggregate
class Review:
    product_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    order_id = Identifier()
    rating = ValueObject(Rating, required=True)
    comment = String(max_length=MAX_REVIEW_COMMENT_LENGTH)
    reviewed_at = DateTime()

    @property
    def score(self) -> int:
        return self.rating.score

    @property
    def has_comment(self) -> bool:
        return bool(self.comment and self.comment.strip())

    @classmethod
    def submit(cls, product_id, customer_id, rating, comment=None, order_id=None):
        from storefront.reviews.review.events import ReviewSubmitted

        now = datetime.now(UTC)
        review = cls(
            product_id=product_id,
            customer_id=customer_id,
            order_id=order_id,
            rating=Rating(score=rating),
            comment=comment if comment and comment.strip() else None,
            reviewed_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                product_id=str(product_id),
                customer_id=str(customer_id),
                order_id=str(order_id) if order_id else None,
                rating=rating,
                reviewed_at=now,
            )
        )
        return review
