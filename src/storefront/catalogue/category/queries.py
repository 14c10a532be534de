"""Read-side helpers for categories."""

from collections import Counter

from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.shared.paging import fetch_all


def list_categories() -> list[tuple]:
    """All categories ordered by name, each paired with its product count."""
    from storefront.catalogue.product.product import Product

    categories = fetch_all(current_domain.repository_for(Category)._dao.query)
    counts = Counter(str(p.category_id) for p in fetch_all(current_domain.repository_for(Product)._dao.query))
    ordered = sorted(categories, key=lambda c: (c.name or "").lower())
    return [(category, counts.get(str(category.id), 0)) for category in ordered]
