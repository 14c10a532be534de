"""Product creation — command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.catalogue.product.rules import ensure_category_exists
from storefront.constants import MAX_IMAGE_URL_LENGTH, MAX_PRODUCT_DESCRIPTION_LENGTH, MAX_PRODUCT_NAME_LENGTH
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=MAX_PRODUCT_NAME_LENGTH)
    description: String(max_length=MAX_PRODUCT_DESCRIPTION_LENGTH)
    price: Float(required=True)
    stock: Integer(default=0)
    image_url: String(max_length=MAX_IMAGE_URL_LENGTH)
    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        ensure_category_exists(command.category_id)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock if command.stock is not None else 0,
            image_url=command.image_url,
            category_id=command.category_id,
        )
        current_domain.repository_for(Product).add(product)

        logger.info(
            "product_created",
            product_id=str(product.id),
            category_id=str(product.category_id),
            name=product.name,
            price=product.price,
        )
        return str(product.id)
