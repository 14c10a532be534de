"""Product listing and search queries.

Structured filters (category, price band, stock) are pushed down to the
repository; free-text matching and the computed orderings (relevance, rating)
run over the narrowed result.
"""

from dataclasses import dataclass
from enum import Enum

from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.constants import ADMIN_PAGE_SIZE, DEFAULT_PAGE_SIZE
from storefront.shared.paging import PagedResult, fetch_all, normalize_paging, paginate


class ProductSortOrder(Enum):
    NAME = "name"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    RELEVANCE = "relevance"
    BEST_RATED = "best_rated"


@dataclass
class ProductSearchFilters:
    term: str | None = None
    category_id: str | None = None
    min_price: float | None = None
    max_price: float | None = None
    in_stock_only: bool = False
    sort: ProductSortOrder = ProductSortOrder.NAME


def search_terms(term: str | None) -> list[str]:
    """Split a search box entry into lower-cased terms."""
    if not term or not term.strip():
        return []
    return [t.lower() for t in term.split()]


def _name_key(product):
    return (product.name or "").lower()


def _matches_all_terms(product, terms) -> bool:
    name = (product.name or "").lower()
    description = (product.description or "").lower()
    return all(t in name or t in description for t in terms)


def _relevance(product, terms) -> int:
    name = (product.name or "").lower()
    description = (product.description or "").lower()
    return sum(2 for t in terms if t in name) + sum(1 for t in terms if t in description)


def _products_matching(filters: ProductSearchFilters) -> list:
    criteria = {}
    if filters.category_id:
        criteria["category_id"] = str(filters.category_id)
    if filters.min_price is not None:
        criteria["price__gte"] = filters.min_price
    if filters.max_price is not None:
        criteria["price__lte"] = filters.max_price
    if filters.in_stock_only:
        criteria["stock__gt"] = 0

    query = current_domain.repository_for(Product)._dao.query
    products = fetch_all(query.filter(**criteria) if criteria else query)

    terms = search_terms(filters.term)
    if terms:
        products = [p for p in products if _matches_all_terms(p, terms)]
    return products


def _sort(products: list, filters: ProductSearchFilters) -> list:
    sort = filters.sort
    if sort == ProductSortOrder.PRICE_ASC:
        return sorted(products, key=lambda p: (p.price, _name_key(p)))
    if sort == ProductSortOrder.PRICE_DESC:
        return sorted(products, key=lambda p: (-p.price, _name_key(p)))
    if sort == ProductSortOrder.RELEVANCE:
        terms = search_terms(filters.term)
        if terms:
            return sorted(products, key=lambda p: (-_relevance(p, terms), _name_key(p)))
    if sort == ProductSortOrder.BEST_RATED:
        from storefront.reviews.queries import average_ratings

        averages = average_ratings([str(p.id) for p in products])

        def by_rating(product):
            average = averages.get(str(product.id))
            # Unrated products sort after every rated one
            return (average is None, -(average or 0.0), _name_key(product))

        return sorted(products, key=by_rating)
    return sorted(products, key=_name_key)


def list_products() -> list:
    """Every product, ordered by name."""
    return sorted(fetch_all(current_domain.repository_for(Product)._dao.query), key=_name_key)


def list_products_paged(page: int, page_size: int) -> PagedResult:
    page, page_size = normalize_paging(page, page_size, ADMIN_PAGE_SIZE)
    return paginate(list_products(), page, page_size)


def search_products(filters: ProductSearchFilters, page: int, page_size: int) -> PagedResult:
    page, page_size = normalize_paging(page, page_size, DEFAULT_PAGE_SIZE)
    return paginate(_sort(_products_matching(filters), filters), page, page_size)


def get_products_by_ids(product_ids) -> list:
    """The products among `product_ids` that still exist, in request order."""
    ids = [str(pid) for pid in dict.fromkeys(product_ids)]
    if not ids:
        return []
    found = fetch_all(current_domain.repository_for(Product)._dao.query.filter(id__in=ids))
    by_id = {str(p.id): p for p in found}
    return [by_id[pid] for pid in ids if pid in by_id]
