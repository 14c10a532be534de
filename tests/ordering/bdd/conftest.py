"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from storefront.catalogue.product.product import Product


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def products():
    """Product ids by name, filled in by the Given steps."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced at {price:f} with {stock:d} in stock'))
def product_in_stock(make_product, products, name, price, stock):
    products[name] = make_product(name=name, price=price, stock=stock)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def product_has_stock(products, name, stock):
    assert current_domain.repository_for(Product).get(products[name]).stock == stock


@then(parsers.cfparse('the checkout is rejected with "{message}"'))
def checkout_rejected(error, message):
    assert error["exc"] is not None
    assert message in [m for messages in error["exc"].messages.values() for m in messages]
