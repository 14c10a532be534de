"""Application tests for SubmitReview and the ProductRating projection."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.ordering.order.placement import PlaceOrder
from storefront.reviews.projections.product_rating import ProductRating
from storefront.reviews.review.review import Review
from storefront.reviews.review.submission import SubmitReview


def _submit(product_id, customer_id="cust-001", rating=4, **extra):
    command = SubmitReview(product_id=product_id, customer_id=customer_id, rating=rating, **extra)
    return current_domain.process(command, asynchronous=False)


def _order_for(customer_id, product_id):
    command = PlaceOrder(
        customer_id=customer_id,
        items=json.dumps([{"product_id": product_id, "quantity": 1}]),
        street="Rua das Flores",
        district="Centro",
        city="Campinas",
    )
    return current_domain.process(command, asynchronous=False)


class TestSubmitReview:
    def test_persists_review(self, make_product):
        product_id = make_product()
        review_id = _submit(product_id, comment="Smooth smoke")

        review = current_domain.repository_for(Review).get(review_id)
        assert review.score == 4
        assert review.comment == "Smooth smoke"

    def test_blank_customer(self, make_product):
        product_id = make_product()
        with pytest.raises(ValidationError) as exc:
            _submit(product_id, customer_id=None)
        assert exc.value.messages["customer_id"] == ["Customer id cannot be empty"]

    @pytest.mark.parametrize("rating", [-1, 6])
    def test_rating_out_of_range(self, make_product, rating):
        product_id = make_product()
        with pytest.raises(ValidationError) as exc:
            _submit(product_id, rating=rating)
        assert exc.value.messages["rating"] == ["Rating must be between 0 and 5"]

    def test_zero_stars_allowed(self, make_product):
        product_id = make_product()
        review_id = _submit(product_id, rating=0)
        assert current_domain.repository_for(Review).get(review_id).score == 0

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            _submit("missing")

    def test_tied_to_own_order(self, make_product):
        product_id = make_product()
        order_id = _order_for("cust-001", product_id)

        review_id = _submit(product_id, order_id=order_id)

        assert str(current_domain.repository_for(Review).get(review_id).order_id) == order_id

    def test_order_of_another_customer(self, make_product):
        product_id = make_product()
        order_id = _order_for("cust-002", product_id)
        with pytest.raises(ObjectNotFoundError):
            _submit(product_id, order_id=order_id)

    def test_unknown_order(self, make_product):
        product_id = make_product()
        with pytest.raises(ObjectNotFoundError):
            _submit(product_id, order_id="missing")

    def test_same_customer_may_review_twice(self, make_product):
        product_id = make_product()
        _submit(product_id, rating=5)
        _submit(product_id, rating=1)
        assert current_domain.repository_for(Review)._dao.query.all().total == 2


class TestProductRatingProjection:
    def test_created_on_first_review(self, make_product):
        product_id = make_product()
        _submit(product_id, rating=4)

        rating = current_domain.repository_for(ProductRating).get(product_id)
        assert rating.total_reviews == 1
        assert rating.average_rating == 4.0

    def test_distribution_and_average(self, make_product):
        product_id = make_product()
        for score in (5, 5, 2, 0):
            _submit(product_id, rating=score)

        rating = current_domain.repository_for(ProductRating).get(product_id)
        distribution = json.loads(rating.rating_distribution)

        assert rating.total_reviews == 4
        assert rating.average_rating == 3.0
        assert distribution == {"0": 1, "1": 0, "2": 1, "3": 0, "4": 0, "5": 2}
