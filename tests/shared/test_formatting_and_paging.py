"""Tests for display formatting and listing pagination helpers."""

from types import SimpleNamespace

from protean import current_domain

from storefront.catalogue.product.product import Product
from storefront.shared import paging
from storefront.shared.formatting import format_address, summarize
from storefront.shared.paging import fetch_all, normalize_paging, paginate


class TestFormatAddress:
    def test_joins_non_empty_parts(self):
        address = SimpleNamespace(street="Rua A", number="", district="Centro", city="Campinas", complement=None)
        assert format_address(address) == "Rua A, Centro, Campinas"

    def test_none(self):
        assert format_address(None) == ""


class TestSummarize:
    def test_short_text_unchanged(self):
        assert summarize("  Glass base  ") == "Glass base"

    def test_cuts_on_word_boundary(self):
        assert summarize("Borosilicate glass base, steel stem", length=20) == "Borosilicate glass..."

    def test_empty(self):
        assert summarize(None) == ""


class TestPaging:
    def test_normalize(self):
        assert normalize_paging(0, 0, 12) == (1, 12)
        assert normalize_paging(3, 5, 12) == (3, 5)

    def test_paginate(self):
        result = paginate(list(range(25)), page=3, page_size=10)

        assert result.items == [20, 21, 22, 23, 24]
        assert result.total_pages == 3
        assert result.has_previous is True
        assert result.has_next is False

    def test_page_past_the_end(self):
        result = paginate([1, 2], page=5, page_size=10)
        assert result.items == []
        assert result.total_count == 2

    def test_empty_listing_has_no_pages(self):
        result = paginate([], page=1, page_size=10)
        assert result.total_pages == 0
        assert result.has_next is False


class TestFetchAll:
    def test_walks_every_batch_in_identifier_order(self, make_product, monkeypatch):
        monkeypatch.setattr(paging, "_FETCH_BATCH_SIZE", 2)
        product_ids = [make_product(name=f"Hose {n}") for n in range(5)]

        fetched = fetch_all(current_domain.repository_for(Product)._dao.query)

        assert [str(p.id) for p in fetched] == sorted(product_ids)

    def test_keeps_existing_ordering_first(self, make_product):
        make_product(name="Bowl", price=40.0)
        make_product(name="Hose", price=25.0)
        make_product(name="Coal", price=10.0)

        fetched = fetch_all(current_domain.repository_for(Product)._dao.query.order_by("-price"))

        assert [p.name for p in fetched] == ["Bowl", "Hose", "Coal"]
