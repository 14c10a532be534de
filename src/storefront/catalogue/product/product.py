"""Product aggregate root: a sellable item with a price and an on-hand stock count."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.constants import (
    MAX_IMAGE_URL_LENGTH,
    MAX_PRODUCT_DESCRIPTION_LENGTH,
    MAX_PRODUCT_NAME_LENGTH,
    MAX_PRODUCT_PRICE,
)
from storefront.domain import storefront


@storefront.aggregate
class Product:
    """A catalogue item.

    Stock is the quantity on hand; checkout decrements it and bumps
    `units_sold`, which also records that the product appears on orders and
    therefore can no longer be deleted.
    """

    name: String(required=True, max_length=MAX_PRODUCT_NAME_LENGTH)
    description: String(max_length=MAX_PRODUCT_DESCRIPTION_LENGTH)
    price: Float(required=True, min_value=0.0, max_value=MAX_PRODUCT_PRICE)
    stock: Integer(default=0, min_value=0)
    image_url: String(max_length=MAX_IMAGE_URL_LENGTH)
    category_id: Identifier(required=True)
    units_sold: Integer(default=0, min_value=0)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def name_must_not_be_blank(self):
        if not self.name or not self.name.strip():
            raise ValidationError({"name": ["Product name is required"]})

    @property
    def in_stock(self) -> bool:
        return (self.stock or 0) > 0

    @classmethod
    def create(cls, name, price, category_id, description=None, stock=0, image_url=None):
        from storefront.catalogue.product.events import ProductCreated

        now = datetime.now()
        product = cls(
            name=name.strip() if name else name,
            description=description,
            price=price,
            stock=stock,
            image_url=image_url,
            category_id=category_id,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=product.name,
                category_id=product.category_id,
                price=product.price,
                stock=product.stock,
                created_at=now,
            )
        )
        return product

    def update_details(self, name, price, stock, category_id, description=None, image_url=None):
        from storefront.catalogue.product.events import ProductUpdated

        self.name = name.strip() if name else name
        self.description = description
        self.price = price
        self.stock = stock
        self.image_url = image_url
        self.category_id = category_id
        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                category_id=self.category_id,
                price=self.price,
                stock=self.stock,
            )
        )

    def change_image(self, image_url):
        from storefront.catalogue.product.events import ProductImageChanged

        previous_url = self.image_url
        self.image_url = image_url
        self.updated_at = datetime.now()

        self.raise_(
            ProductImageChanged(
                product_id=self.id,
                image_url=image_url,
                previous_image_url=previous_url,
            )
        )

    def sell(self, quantity):
        """Take `quantity` units out of stock for a placed order."""
        if quantity > self.stock:
            raise ValidationError({"stock": [f"Quantity exceeds stock for '{self.name}'. Available: {self.stock}."]})

        self.stock = self.stock - quantity
        self.units_sold = (self.units_sold or 0) + quantity
        self.updated_at = datetime.now()
