"""Paging helpers shared by listing queries."""

import math
from dataclasses import dataclass, field
from typing import Any

from protean.utils.reflection import id_field

_FETCH_BATCH_SIZE = 500


@dataclass
class PagedResult:
    """One page of a sorted listing, with the counters a pager needs."""

    items: list[Any] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def normalize_paging(page: int, page_size: int, default_size: int) -> tuple[int, int]:
    """Clamp page to 1 and fall back to `default_size` for non-positive sizes."""
    if page < 1:
        page = 1
    if page_size < 1:
        page_size = default_size
    return page, page_size


def paginate(items: list, page: int, page_size: int) -> PagedResult:
    start = (page - 1) * page_size
    return PagedResult(
        items=items[start : start + page_size],
        total_count=len(items),
        page=page,
        page_size=page_size,
    )


def fetch_all(queryset) -> list:
    """Drain a Protean queryset, walking past its default result limit.

    Batches are ordered by the identifier after any ordering already on the
    queryset, so SQL providers page through a stable sequence.
    """
    queryset = queryset.order_by(id_field(queryset._entity_cls).field_name)
    items = []
    offset = 0
    while True:
        batch = queryset.offset(offset).limit(_FETCH_BATCH_SIZE).all().items
        items.extend(batch)
        if len(batch) < _FETCH_BATCH_SIZE:
            return items
        offset += _FETCH_BATCH_SIZE
