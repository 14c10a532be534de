"""Cross-aggregate checks shared by the product handlers."""

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category


def ensure_category_exists(category_id):
    try:
        current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise ValidationError({"category_id": [f"Category {category_id} not found"]}) from None
