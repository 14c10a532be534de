"""ProductRating read model: star counts and the running average per product.

Bulk average lookups and the best/worst rated reports read from here instead
of scanning every review.
"""

import json

from protean.core.projector import on
from protean.exceptions import ObjectNotFoundError
from protean.fields import DateTime, Float, Identifier, Integer, Text
from protean.utils.globals import current_domain

from storefront.constants import MAX_RATING, MIN_RATING
from storefront.domain import storefront
from storefront.reviews.review.events import ReviewSubmitted
from storefront.reviews.review.review import Review


@storefront.projection
class ProductRating:
    product_id = Identifier(identifier=True, required=True)
    average_rating = Float(default=0.0)
    total_reviews = Integer(default=0)
    rating_distribution = Text()  # JSON object keyed by star count, "0" to "5"
    updated_at = DateTime()

    @classmethod
    def empty(cls, product_id):
        stars = {str(score): 0 for score in range(MIN_RATING, MAX_RATING + 1)}
        return cls(product_id=product_id, total_reviews=0, rating_distribution=json.dumps(stars))

    @property
    def distribution(self) -> dict:
        return json.loads(self.rating_distribution) if self.rating_distribution else {}

    def record(self, score: int, at) -> None:
        """Count one more review with ``score`` stars and refresh the average."""
        stars = self.distribution
        stars[str(score)] = stars.get(str(score), 0) + 1

        total = sum(stars.values())
        self.rating_distribution = json.dumps(stars)
        self.total_reviews = total
        self.average_rating = round(sum(int(key) * count for key, count in stars.items()) / total, 2)
        self.updated_at = at


@storefront.projector(projector_for=ProductRating, aggregates=[Review])
class ProductRatingProjector:
    @on(ReviewSubmitted)
    def on_review_submitted(self, event):
        repo = current_domain.repository_for(ProductRating)
        try:
            rating = repo.get(event.product_id)
        except ObjectNotFoundError:
            rating = ProductRating.empty(event.product_id)

        rating.record(event.rating, event.reviewed_at)
        repo.add(rating)
