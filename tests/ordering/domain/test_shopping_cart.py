"""Tests for the ShoppingCart aggregate and its CartItem lines."""

import pytest
from protean.exceptions import ValidationError

from storefront.ordering.cart.cart import ShoppingCart
from storefront.ordering.cart.events import CartItemAdded


def _cart_with_hose(quantity=1):
    cart = ShoppingCart.create(customer_id="cust-001")
    cart.add_item(product_id="prod-hose", name="Hose", unit_price=25.0, quantity=quantity)
    return cart


class TestAddItem:
    def test_new_cart_is_empty(self):
        cart = ShoppingCart.create()
        assert cart.items == []
        assert cart.total == 0
        assert cart.item_count == 0

    def test_add_item(self):
        cart = _cart_with_hose(quantity=2)
        assert len(cart.items) == 1
        assert cart.items[0].subtotal == 50.0
        assert cart.total == 50.0
        assert cart.item_count == 2

    def test_adding_same_product_merges_lines(self):
        cart = _cart_with_hose(quantity=1)
        cart.add_item(product_id="prod-hose", name="Hose", unit_price=25.0, quantity=2)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 3

    def test_merging_refreshes_name_and_price(self):
        cart = _cart_with_hose()
        cart.add_item(
            product_id="prod-hose",
            name="Silicone hose",
            unit_price=30.0,
            quantity=1,
            image_url="/images/products/hose.png",
        )
        item = cart.items[0]
        assert item.name == "Silicone hose"
        assert item.unit_price == 30.0
        assert item.image_url == "/images/products/hose.png"
        assert cart.total == 60.0

    def test_add_raises_cart_item_added_with_new_quantity(self):
        cart = _cart_with_hose(quantity=1)
        cart._events.clear()
        cart.add_item(product_id="prod-hose", name="Hose", unit_price=25.0, quantity=4)

        event = cart._events[-1]
        assert isinstance(event, CartItemAdded)
        assert event.quantity == 5

    def test_zero_quantity_rejected(self):
        cart = ShoppingCart.create()
        with pytest.raises(ValidationError):
            cart.add_item(product_id="p", name="P", unit_price=1.0, quantity=0)

    def test_totals_across_lines(self):
        cart = _cart_with_hose(quantity=2)
        cart.add_item(product_id="prod-bowl", name="Bowl", unit_price=10.5, quantity=3)
        assert cart.total == 81.5
        assert cart.item_count == 5


class TestChangeItems:
    def test_update_quantity(self):
        cart = _cart_with_hose()
        cart.update_item_quantity("prod-hose", 4)
        assert cart.items[0].quantity == 4

    def test_update_quantity_below_one_rejected(self):
        cart = _cart_with_hose()
        with pytest.raises(ValidationError):
            cart.update_item_quantity("prod-hose", 0)

    def test_update_unknown_product_rejected(self):
        cart = _cart_with_hose()
        with pytest.raises(ValidationError):
            cart.update_item_quantity("prod-missing", 2)

    def test_remove_item(self):
        cart = _cart_with_hose()
        cart.remove_item("prod-hose")
        assert cart.items == []

    def test_remove_unknown_product_is_ignored(self):
        cart = _cart_with_hose()
        cart.remove_item("prod-missing")
        assert len(cart.items) == 1

    def test_clear(self):
        cart = _cart_with_hose()
        cart.add_item(product_id="prod-bowl", name="Bowl", unit_price=10.0, quantity=1)
        cart.clear()
        assert cart.items == []
        assert cart.total == 0
