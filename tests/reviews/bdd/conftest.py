"""Shared BDD fixtures for the Reviews domain."""

import pytest
from pytest_bdd import given, parsers


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def products():
    return {}


@given(parsers.cfparse('a product "{name}" in the catalogue'))
def product_in_catalogue(make_product, products, name):
    products[name] = make_product(name=name)
