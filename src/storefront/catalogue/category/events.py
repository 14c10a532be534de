"""Domain events for the Category aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the catalogue."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Category")
class CategoryUpdated:
    """A category's name or description changed."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    description: String()

