"""
Fixed-size pagination with clamped page numbers.
"""

from dataclasses import dataclass
from typing import Any, List, Sequence


def total_pages(item_count: int, page_size: int) -> int:
    """ceil(item_count / page_size); 0 when there are no items."""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return -(-item_count // page_size)


def clamp_page(page: int, pages: int) -> int:
    return max(1, min(page, max(pages, 1)))


@dataclass(frozen=True)
class Page:
    items: List[Any]
    number: int
    total_pages: int
    total_items: int
    page_size: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages

    @property
    def first_index(self) -> int:
        """1-based position of the first item on the page (0 when empty)."""
        return (self.number - 1) * self.page_size + 1 if self.items else 0

    @property
    def last_index(self) -> int:
        return self.first_index + len(self.items) - 1 if self.items else 0


def paginate(items: Sequence[Any], page_size: int, page: int) -> Page:
    pages = total_pages(len(items), page_size)
    number = clamp_page(page, pages)
    start = (number - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        number=number,
        total_pages=pages,
        total_items=len(items),
        page_size=page_size,
    )
