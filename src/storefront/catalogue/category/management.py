"""Category management — commands and handlers."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.constants import MAX_CATEGORY_DESCRIPTION_LENGTH, MAX_CATEGORY_NAME_LENGTH
from storefront.domain import storefront
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=MAX_CATEGORY_NAME_LENGTH)
    description: String(max_length=MAX_CATEGORY_DESCRIPTION_LENGTH)


@storefront.command(part_of="Category")
class UpdateCategory:
    category_id: Identifier(required=True)
    name: String(required=True, max_length=MAX_CATEGORY_NAME_LENGTH)
    description: String(max_length=MAX_CATEGORY_DESCRIPTION_LENGTH)


@storefront.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(name=command.name, description=command.description)
        current_domain.repository_for(Category).add(category)

        logger.info("category_created", category_id=str(category.id), name=category.name)
        return str(category.id)

    @handle(UpdateCategory)
    def update_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.update_details(name=command.name, description=command.description)
        repo.add(category)

        logger.info("category_updated", category_id=str(category.id))

    @handle(DeleteCategory)
    def delete_category(self, command):
        from storefront.catalogue.product.product import Product

        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)

        products = current_domain.repository_for(Product)._dao.query.filter(category_id=str(category.id)).all()
        if products.total:
            raise ValidationError(
                {"category_id": [f"Category '{category.name}' still holds {products.total} product(s) and cannot be deleted"]}
            )

        repo._dao.delete(category)
        logger.info("category_deleted", category_id=str(command.category_id))
