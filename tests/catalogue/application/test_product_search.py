"""Application tests for product listing and search queries."""

from protean import current_domain

from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.search import (
    ProductSearchFilters,
    ProductSortOrder,
    get_products_by_ids,
    list_products,
    list_products_paged,
    search_products,
    search_terms,
)
from storefront.reviews.review.submission import SubmitReview


def _names(result):
    return [p.name for p in result.items]


class TestSearchTerms:
    def test_splits_and_lowercases(self):
        assert search_terms("  Glass  HOOKAH ") == ["glass", "hookah"]

    def test_blank_term_has_no_terms(self):
        assert search_terms("   ") == []
        assert search_terms(None) == []


class TestListing:
    def test_list_products_sorted_by_name(self, make_product):
        make_product(name="Tongs")
        make_product(name="Bowl")
        assert [p.name for p in list_products()] == ["Bowl", "Tongs"]

    def test_admin_paging_uses_default_size(self, make_product):
        for i in range(12):
            make_product(name=f"Product {i:02d}")

        page = list_products_paged(page=2, page_size=0)

        assert page.page_size == 10
        assert page.total_count == 12
        assert page.total_pages == 2
        assert _names(page) == ["Product 10", "Product 11"]
        assert page.has_previous is True
        assert page.has_next is False


class TestSearchProducts:
    def test_term_must_match_every_word(self, make_product):
        make_product(name="Glass hookah", description="Tall and elegant")
        make_product(name="Steel hookah", description="Rugged")
        make_product(name="Glass bowl")

        result = search_products(ProductSearchFilters(term="glass hookah"), page=1, page_size=12)

        assert _names(result) == ["Glass hookah"]

    def test_term_matches_description(self, make_product):
        make_product(name="Hose", description="Washable silicone")
        result = search_products(ProductSearchFilters(term="SILICONE"), page=1, page_size=12)
        assert _names(result) == ["Hose"]

    def test_category_filter(self, make_product):
        other = current_domain.process(CreateCategory(name="Charcoal"), asynchronous=False)
        make_product(name="Coconut coals", category=other)
        make_product(name="Hose")

        result = search_products(ProductSearchFilters(category_id=other), page=1, page_size=12)

        assert _names(result) == ["Coconut coals"]

    def test_price_band_is_inclusive(self, make_product):
        make_product(name="Cheap", price=10.0)
        make_product(name="Mid", price=50.0)
        make_product(name="Pricey", price=100.0)

        result = search_products(ProductSearchFilters(min_price=10.0, max_price=50.0), page=1, page_size=12)

        assert _names(result) == ["Cheap", "Mid"]

    def test_in_stock_only(self, make_product):
        make_product(name="Available", stock=2)
        make_product(name="Sold out", stock=0)

        result = search_products(ProductSearchFilters(in_stock_only=True), page=1, page_size=12)

        assert _names(result) == ["Available"]

    def test_sort_by_price(self, make_product):
        make_product(name="B", price=20.0)
        make_product(name="A", price=30.0)
        make_product(name="C", price=10.0)

        ascending = search_products(ProductSearchFilters(sort=ProductSortOrder.PRICE_ASC), 1, 12)
        descending = search_products(ProductSearchFilters(sort=ProductSortOrder.PRICE_DESC), 1, 12)

        assert _names(ascending) == ["C", "B", "A"]
        assert _names(descending) == ["A", "B", "C"]

    def test_sort_by_relevance_weights_name_hits(self, make_product):
        make_product(name="Mint hose", description="Plain")
        make_product(name="Plain hose", description="Smells of mint")
        make_product(name="Mint bowl", description="Mint scented")

        result = search_products(ProductSearchFilters(term="mint", sort=ProductSortOrder.RELEVANCE), 1, 12)

        assert _names(result) == ["Mint bowl", "Mint hose", "Plain hose"]

    def test_sort_best_rated_puts_unrated_last(self, make_product):
        unrated = make_product(name="Aardvark")
        good = make_product(name="Good")
        better = make_product(name="Better")

        for product_id, rating in ((good, 3), (better, 5)):
            current_domain.process(
                SubmitReview(product_id=product_id, customer_id="cust-1", rating=rating),
                asynchronous=False,
            )

        result = search_products(ProductSearchFilters(sort=ProductSortOrder.BEST_RATED), 1, 12)

        assert [str(p.id) for p in result.items] == [better, good, unrated]

    def test_page_beyond_results_is_empty(self, make_product):
        make_product()
        result = search_products(ProductSearchFilters(), page=5, page_size=12)
        assert result.items == []
        assert result.total_count == 1

    def test_non_positive_paging_is_normalized(self, make_product):
        make_product()
        result = search_products(ProductSearchFilters(), page=0, page_size=-3)
        assert result.page == 1
        assert result.page_size == 12


class TestProductsByIds:
    def test_keeps_request_order_and_skips_unknown(self, make_product):
        first = make_product(name="First")
        second = make_product(name="Second")

        products = get_products_by_ids([second, "missing", first, second])

        assert [str(p.id) for p in products] == [second, first]

    def test_empty_request(self):
        assert get_products_by_ids([]) == []
