"""Element loading for the storefront domain.

`Domain.init()` only traverses the domain package and its direct
subpackages. Aggregates, commands, handlers and projections here live one
level deeper (`storefront/<context>/<aggregate>/`), so every entry point
imports them explicitly through `init_domain()` before initializing.
"""

import importlib

from storefront.domain import storefront

ELEMENT_MODULES = (
    "storefront.catalogue.category.category",
    "storefront.catalogue.category.events",
    "storefront.catalogue.category.management",
    "storefront.catalogue.product.product",
    "storefront.catalogue.product.events",
    "storefront.catalogue.product.creation",
    "storefront.catalogue.product.details",
    "storefront.ordering.cart.cart",
    "storefront.ordering.cart.events",
    "storefront.ordering.cart.items",
    "storefront.ordering.order.order",
    "storefront.ordering.order.events",
    "storefront.ordering.order.placement",
    "storefront.ordering.order.status",
    "storefront.reviews.review.review",
    "storefront.reviews.review.events",
    "storefront.reviews.review.submission",
    "storefront.reviews.projections.product_rating",
    "storefront.identity.customer.customer",
    "storefront.identity.customer.events",
    "storefront.identity.customer.registration",
    "storefront.identity.customer.addresses",
)

_initialized = False


def load_elements() -> None:
    for module_name in ELEMENT_MODULES:
        importlib.import_module(module_name)


def init_domain():
    """Register every element and initialize the domain, once per process."""
    global _initialized

    if not _initialized:
        load_elements()
        storefront.init()
        _initialized = True
    return storefront
