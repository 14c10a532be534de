"""SubmitReview: rate a product, optionally tied to one of the customer's orders."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.constants import MAX_RATING, MAX_REVIEW_COMMENT_LENGTH, MIN_RATING
from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.reviews.review.review import Review
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Review")
class SubmitReview:
    product_id = Identifier(required=True)
    customer_id = Identifier()
    rating = Integer(required=True)
    comment = String(max_length=MAX_REVIEW_COMMENT_LENGTH)
    order_id = Identifier()


@storefront.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        if not command.customer_id or not str(command.customer_id).strip():
            raise ValidationError({"customer_id": ["Customer id cannot be empty"]})

        if command.rating < MIN_RATING or command.rating > MAX_RATING:
            raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})

        try:
            current_domain.repository_for(Product).get(command.product_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(f"Product {command.product_id} not found") from None

        if command.order_id:
            try:
                order = current_domain.repository_for(Order).get(command.order_id)
            except ObjectNotFoundError:
                order = None
            if order is None or str(order.customer_id) != str(command.customer_id):
                raise ObjectNotFoundError(f"Order {command.order_id} not found or not owned by the customer")

        review = Review.submit(
            product_id=command.product_id,
            customer_id=command.customer_id,
            rating=command.rating,
            comment=command.comment,
            order_id=command.order_id,
        )
        current_domain.repository_for(Review).add(review)

        logger.info(
            "review_submitted",
            review_id=str(review.id),
            product_id=str(command.product_id),
            customer_id=str(command.customer_id),
            order_id=command.order_id,
            rating=command.rating,
        )
        return str(review.id)
