"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="Review")
class ReviewSubmitted:
    """A customer rated a product."""

    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    order_id = Identifier()
    rating = Integer(required=True)
    reviewed_at = DateTime(required=True)
