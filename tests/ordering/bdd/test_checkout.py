"""BDD tests for checking out a shopping cart."""

from protean import current_domain
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, scenarios, then, when

from storefront.ordering.cart.cart import ShoppingCart
from storefront.ordering.cart.items import AddToCart, CreateCart
from storefront.ordering.order.order import Order
from storefront.ordering.order.placement import CheckoutCart

scenarios("features/checkout.feature")


def _checkout(cart_id, error, **address):
    try:
        return current_domain.process(CheckoutCart(cart_id=cart_id, **address), asynchronous=False)
    except ValidationError as exc:
        error["exc"] = exc
        return None


@given(
    parsers.cfparse('a cart for customer "{customer_id}" holding {quantity:d} of "{name}"'),
    target_fixture="cart_id",
)
def cart_holding(products, customer_id, quantity, name):
    cart_id = current_domain.process(CreateCart(customer_id=customer_id), asynchronous=False)
    current_domain.process(
        AddToCart(cart_id=cart_id, product_id=products[name], quantity=quantity),
        asynchronous=False,
    )
    return cart_id


@when(
    parsers.cfparse('the cart is checked out to "{street}" in "{district}", "{city}"'),
    target_fixture="order_id",
)
def checkout_to(cart_id, error, street, district, city):
    return _checkout(cart_id, error, street=street, district=district, city=city)


@when("the cart is checked out without an address", target_fixture="order_id")
def checkout_without_address(cart_id, error):
    return _checkout(cart_id, error)


@then(parsers.cfparse("an order totalling {total:f} is placed"))
def order_placed(order_id, total):
    assert order_id is not None
    assert current_domain.repository_for(Order).get(order_id).total == total


@then("the cart is empty")
def cart_is_empty(cart_id):
    assert current_domain.repository_for(ShoppingCart).get(cart_id).items == []


@then(parsers.cfparse("the cart still holds {count:d} items"))
def cart_still_holds(cart_id, count):
    assert current_domain.repository_for(ShoppingCart).get(cart_id).item_count == count
