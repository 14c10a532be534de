"""Product maintenance — update, image replacement and deletion."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.catalogue.product.rules import ensure_category_exists
from storefront.constants import MAX_IMAGE_URL_LENGTH, MAX_PRODUCT_DESCRIPTION_LENGTH, MAX_PRODUCT_NAME_LENGTH
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(required=True, max_length=MAX_PRODUCT_NAME_LENGTH)
    description: String(max_length=MAX_PRODUCT_DESCRIPTION_LENGTH)
    price: Float(required=True)
    stock: Integer(default=0)
    image_url: String(max_length=MAX_IMAGE_URL_LENGTH)
    category_id: Identifier(required=True)


@storefront.command(part_of="Product")
class ChangeProductImage:
    product_id: Identifier(required=True)
    image_url: String(max_length=MAX_IMAGE_URL_LENGTH)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        ensure_category_exists(command.category_id)

        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock if command.stock is not None else 0,
            image_url=command.image_url,
            category_id=command.category_id,
        )
        repo.add(product)

        logger.info("product_updated", product_id=str(product.id), category_id=str(product.category_id))

    @handle(ChangeProductImage)
    def change_product_image(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.change_image(command.image_url)
        repo.add(product)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if product.units_sold:
            raise ValidationError({"product_id": [f"Product '{product.name}' appears on orders and cannot be deleted"]})

        repo._dao.delete(product)
        logger.info("product_deleted", product_id=str(command.product_id))
