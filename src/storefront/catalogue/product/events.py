"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category_id: Identifier(required=True)
    price: Float(required=True)
    stock: Integer(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """A product's catalogue details were replaced."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category_id: Identifier(required=True)
    price: Float(required=True)
    stock: Integer(required=True)


@storefront.event(part_of="Product")
class ProductImageChanged:
    """A product's picture was replaced or cleared."""

    __version__ = 1

    product_id: Identifier(required=True)
    image_url: String()
    previous_image_url: String()
