"""Shopping Cart aggregate: the lines a shopper intends to buy.

Each line keeps a snapshot of the product's name, price and picture taken
when it was last added, so the cart renders without touching the catalogue.
Checkout always re-prices from the catalogue.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from storefront.constants import MAX_IMAGE_URL_LENGTH, MAX_PRODUCT_NAME_LENGTH
from storefront.domain import storefront


@storefront.entity(part_of="ShoppingCart")
class CartItem:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=MAX_PRODUCT_NAME_LENGTH)
    unit_price = Float(required=True, min_value=0.0)
    image_url = String(max_length=MAX_IMAGE_URL_LENGTH)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def subtotal(self) -> float:
        return round(self.unit_price * self.quantity, 2)


@storefront.aggregate
class ShoppingCart:
    customer_id = Identifier()  # Empty for anonymous shoppers
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, customer_id=None):
        now = datetime.now(UTC)
        return cls(customer_id=customer_id, created_at=now, updated_at=now)

    @property
    def total(self) -> float:
        return round(sum(item.unit_price * item.quantity for item in self.items), 2)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    def _find(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, name, unit_price, quantity, image_url=None):
        """Add a product, merging with an existing line and refreshing its snapshot."""
        from storefront.ordering.cart.events import CartItemAdded

        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now(UTC)
        existing = self._find(product_id)
        if existing:
            existing.quantity += quantity
            existing.name = name
            existing.unit_price = unit_price
            existing.image_url = image_url
            new_quantity = existing.quantity
        else:
            self.add_items(
                CartItem(
                    product_id=product_id,
                    name=name,
                    unit_price=unit_price,
                    image_url=image_url,
                    quantity=quantity,
                    added_at=now,
                )
            )
            new_quantity = quantity

        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_id=str(product_id),
                quantity=new_quantity,
            )
        )

    def update_item_quantity(self, product_id, quantity):
        if quantity is None or quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        item = self._find(product_id)
        if item is None:
            raise ValidationError({"product_id": ["Product is not in the cart"]})

        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

    def remove_item(self, product_id):
        """Drop a product from the cart; unknown products are ignored."""
        item = self._find(product_id)
        if item is None:
            return

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

    def clear(self):
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)
