"""Category aggregate root for product categorization."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.constants import MAX_CATEGORY_DESCRIPTION_LENGTH, MAX_CATEGORY_NAME_LENGTH
from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A flat grouping of products shown as a storefront filter and an admin listing."""

    name: String(required=True, max_length=MAX_CATEGORY_NAME_LENGTH)
    description: String(max_length=MAX_CATEGORY_DESCRIPTION_LENGTH)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def name_must_not_be_blank(self):
        if not self.name or not self.name.strip():
            raise ValidationError({"name": ["Category name is required"]})

    @classmethod
    def create(cls, name, description=None):
        from storefront.catalogue.category.events import CategoryCreated

        now = datetime.now()
        category = cls(
            name=name.strip() if name else name,
            description=description,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=category.name,
                created_at=now,
            )
        )
        return category

    def update_details(self, name, description=None):
        from storefront.catalogue.category.events import CategoryUpdated

        self.name = name.strip() if name else name
        self.description = description
        self.updated_at = datetime.now()

        self.raise_(
            CategoryUpdated(
                category_id=self.id,
                name=self.name,
                description=self.description,
            )
        )
