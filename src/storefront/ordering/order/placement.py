"""Order placement: turning requested lines into a persisted order.

Validation runs in a fixed order and stops at the first failure:
customer, non-empty request, positive quantities, known products, stock
(summed per product across lines), then the delivery address. Stock is taken
from each product inside the same unit of work that stores the order, so
either everything persists or nothing does.
"""

import json
from collections import Counter

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.cart.cart import ShoppingCart
from storefront.ordering.order.order import DeliveryAddress, Order
from storefront.shared.paging import fetch_all
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_REQUIRED_ADDRESS_FIELDS = (
    ("street", "Street"),
    ("city", "City"),
    ("district", "District"),
)


@storefront.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier()
    items = Text()  # JSON: list of {"product_id", "quantity"}
    street = String(max_length=200)
    number = String(max_length=20)
    district = String(max_length=100)
    city = String(max_length=100)
    complement = String(max_length=200)
    shipping_fee = Float(default=0.0)


@storefront.command(part_of="Order")
class CheckoutCart:
    cart_id = Identifier(required=True)
    customer_id = Identifier()
    street = String(max_length=200)
    number = String(max_length=20)
    district = String(max_length=100)
    city = String(max_length=100)
    complement = String(max_length=200)
    shipping_fee = Float(default=0.0)


def _address_from(command) -> dict | None:
    """The delivery address on a command, or None when no part was given."""
    address = {
        "street": command.street,
        "number": command.number,
        "district": command.district,
        "city": command.city,
        "complement": command.complement,
    }
    if not any(address.values()):
        return None
    return address


def _validate_request(customer_id, requested, address) -> dict:
    """Check a checkout request and return the products it refers to, by id."""
    if not customer_id or not str(customer_id).strip():
        raise ValidationError({"customer_id": ["Invalid customer id"]})

    if not requested:
        raise ValidationError({"items": ["Cart is empty"]})

    if any((line.get("quantity") or 0) <= 0 for line in requested):
        raise ValidationError({"items": ["Invalid quantity on one or more items"]})

    product_ids = list(dict.fromkeys(str(line["product_id"]) for line in requested))
    products = fetch_all(current_domain.repository_for(Product)._dao.query.filter(id__in=product_ids))
    products_by_id = {str(p.id): p for p in products}
    if len(products_by_id) != len(product_ids):
        raise ValidationError({"items": ["One or more products were not found"]})

    requested_totals = Counter()
    for line in requested:
        requested_totals[str(line["product_id"])] += line["quantity"]

    for product_id, quantity in requested_totals.items():
        product = products_by_id[product_id]
        if quantity > product.stock:
            raise ValidationError(
                {"items": [f"Quantity exceeds stock for '{product.name}'. Available: {product.stock}."]}
            )

    if not address:
        raise ValidationError({"address": ["Delivery address is required"]})
    for field_name, label in _REQUIRED_ADDRESS_FIELDS:
        value = address.get(field_name)
        if not value or not value.strip():
            raise ValidationError({field_name: [f"{label} is required in the delivery address"]})

    return products_by_id


def place_order(customer_id, requested, address, shipping_fee=0.0) -> Order:
    """Validate, price and persist an order, taking stock from each product.

    Args:
        customer_id: The purchasing customer.
        requested: List of dicts with product_id and quantity.
        address: Dict with street, number, district, city, complement.
        shipping_fee: Freight charge added to the items total.
    """
    products_by_id = _validate_request(customer_id, requested, address)

    product_repo = current_domain.repository_for(Product)
    lines = []
    for line in requested:
        product = products_by_id[str(line["product_id"])]
        product.sell(line["quantity"])
        lines.append(
            {
                "product_id": str(product.id),
                "product_name": product.name,
                "quantity": line["quantity"],
                "unit_price": product.price,
            }
        )

    for product in products_by_id.values():
        product_repo.add(product)

    order = Order.place(
        customer_id=customer_id,
        lines=lines,
        delivery_address=DeliveryAddress(**{k: (v.strip() if v else v) for k, v in address.items()}),
        shipping_fee=shipping_fee,
    )
    current_domain.repository_for(Order).add(order)

    logger.info(
        "order_placed",
        order_id=str(order.id),
        customer_id=str(customer_id),
        item_lines=len(lines),
        total=order.total,
    )
    return order


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        try:
            requested = json.loads(command.items) if command.items else []
        except (TypeError, ValueError):
            raise ValidationError({"items": ["Items must be a JSON list"]}) from None

        try:
            order = place_order(
                customer_id=command.customer_id,
                requested=requested,
                address=_address_from(command),
                shipping_fee=command.shipping_fee or 0.0,
            )
        except ValidationError as exc:
            logger.info("order_rejected", customer_id=command.customer_id, errors=exc.messages)
            raise
        except Exception:
            logger.exception("order_placement_failed", customer_id=command.customer_id)
            raise
        return str(order.id)

    @handle(CheckoutCart)
    def checkout_cart(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        cart = cart_repo.get(command.cart_id)

        requested = [{"product_id": str(item.product_id), "quantity": item.quantity} for item in cart.items]
        try:
            order = place_order(
                customer_id=command.customer_id or cart.customer_id,
                requested=requested,
                address=_address_from(command),
                shipping_fee=command.shipping_fee or 0.0,
            )
        except ValidationError as exc:
            logger.info("checkout_rejected", cart_id=command.cart_id, errors=exc.messages)
            raise

        cart.clear()
        cart_repo.add(cart)
        return str(order.id)
