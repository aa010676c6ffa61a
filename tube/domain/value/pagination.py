"""Pagination value objects.

Pages are 1-based. ``PageRequest.parse`` is lenient: listing endpoints never
fail because of a bad ``page`` or ``limit`` query value, they fall back to
defaults instead.
"""

from math import ceil
from typing import Generic, TypeVar

from pydantic import Field

from tube.domain.value.common import ValueObject

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

T = TypeVar("T")


def _lenient_int(value: int | str | None) -> int | None:
    """Parse an int, returning None for missing, zero or non-numeric values."""
    if value is None:
        return None
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return None
    return parsed or None


class PageRequest(ValueObject):
    """A request for one page of results."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @property
    def offset(self) -> int:
        """Number of items preceding this page."""
        return (self.page - 1) * self.page_size

    @classmethod
    def parse(
        cls,
        page: int | str | None = None,
        page_size: int | str | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "PageRequest":
        """Build a page request from raw client values.

        Missing, zero or non-numeric values fall back to the defaults;
        negative values are clamped to 1; page size is capped at
        ``max_page_size``.
        """
        parsed_page = _lenient_int(page) or 1
        parsed_size = _lenient_int(page_size) or default_page_size
        return cls(
            page=max(parsed_page, 1),
            page_size=min(max(parsed_size, 1), max_page_size),
        )


class Page(ValueObject, Generic[T]):
    """One page of results with the paginator envelope."""

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.page_size) if self.total else 0

    @property
    def has_prev_page(self) -> bool:
        return self.page > 1

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def prev_page(self) -> int | None:
        return self.page - 1 if self.has_prev_page else None

    @property
    def next_page(self) -> int | None:
        return self.page + 1 if self.has_next_page else None

    @property
    def paging_counter(self) -> int:
        """1-based position of the first item of this page."""
        return (self.page - 1) * self.page_size + 1

    @classmethod
    def build(cls, items: list[T], total: int, request: PageRequest) -> "Page[T]":
        """Wrap a slice of results in a page envelope."""
        return cls(
            items=items,
            total=total,
            page=request.page,
            page_size=request.page_size,
        )
