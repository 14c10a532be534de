"""Order aggregate: a confirmed purchase with prices locked at checkout.

Status is set by the back-office as the parcel moves along; there is no
enforced sequence, any known status may follow any other:

    Processing, Confirmed, Preparing, Shipped, Delivered, Cancelled
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.constants import MAX_ORDER_ITEM_QUANTITY, MAX_PRODUCT_NAME_LENGTH
from storefront.domain import storefront
from storefront.shared.formatting import format_address


class OrderStatus(Enum):
    PROCESSING = "Processing"
    CONFIRMED = "Confirmed"
    PREPARING = "Preparing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


STATUS_LABELS = {
    OrderStatus.PROCESSING: "Processing",
    OrderStatus.CONFIRMED: "Confirmed",
    OrderStatus.PREPARING: "In Preparation",
    OrderStatus.SHIPPED: "Shipped",
    OrderStatus.DELIVERED: "Delivered",
    OrderStatus.CANCELLED: "Cancelled",
}


def label_for(status) -> str:
    try:
        return STATUS_LABELS[OrderStatus(status)]
    except ValueError:
        return str(status)


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class DeliveryAddress:
    """Where the order ships, copied at checkout.

    Later changes to the customer's address book do not touch placed orders.
    """

    street = String(required=True, max_length=200)
    number = String(max_length=20)
    district = String(required=True, max_length=100)
    city = String(required=True, max_length=100)
    complement = String(max_length=200)

    def formatted(self) -> str:
        return format_address(self)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """A purchased product with the unit price charged at checkout."""

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=MAX_PRODUCT_NAME_LENGTH)
    quantity = Integer(required=True, min_value=1, max_value=MAX_ORDER_ITEM_QUANTITY)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def subtotal(self) -> float:
        return round(self.unit_price * self.quantity, 2)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    customer_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PROCESSING.value)
    items = HasMany(OrderItem)
    delivery_address = ValueObject(DeliveryAddress)
    shipping_fee = Float(default=0.0, min_value=0.0)
    total = Float(default=0.0, min_value=0.0)
    placed_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, customer_id, lines, delivery_address, shipping_fee=0.0):
        """Create an order from priced lines.

        Args:
            customer_id: The purchasing customer.
            lines: Iterable of dicts with product_id, product_name, quantity, unit_price.
            delivery_address: A DeliveryAddress.
            shipping_fee: Freight charge; negative values count as zero.
        """
        from storefront.ordering.order.events import OrderPlaced

        fee = max(0.0, shipping_fee or 0.0)
        items = [OrderItem(**line) for line in lines]
        items_total = sum(item.unit_price * item.quantity for item in items)
        now = datetime.now(UTC)

        order = cls(
            customer_id=customer_id,
            status=OrderStatus.PROCESSING.value,
            delivery_address=delivery_address,
            shipping_fee=fee,
            total=round(items_total + fee, 2),
            placed_at=now,
            updated_at=now,
        )
        order.add_items(items)
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                item_count=sum(item.quantity for item in items),
                total=order.total,
                placed_at=now,
            )
        )
        return order

    @property
    def status_label(self) -> str:
        return label_for(self.status)

    def change_status(self, new_status):
        from storefront.ordering.order.events import OrderStatusChanged

        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status: {new_status}"]}) from None

        previous = self.status
        self.status = target.value
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=previous,
                new_status=target.value,
                changed_at=self.updated_at,
            )
        )
