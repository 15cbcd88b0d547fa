"""Generic pagination types shared by all list endpoints.

PaginatedList[T]     : plain dataclass for service-layer returns (not serializable).
PaginatedResponse[T] : Pydantic model for HTTP responses (serializable).

A page index of 0 means "unpaged": the whole source comes back as a single
page. Page indexes are otherwise 1-based. Page metadata (``total_count``,
``total_pages``) describes the full source, not the current slice, and is
computed once when the page is built. Projecting a page to another item type
copies it unchanged.

No upper bound is placed on ``page_size`` here. Callers clamp it before
paginating (the HTTP layer does, see ``pcms.dependencies.PageParams``).
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel

UNPAGED = 0
DEFAULT_PAGE_SIZE = 10


class PageSource[T](Protocol):
    """A data source that can count its rows and hand out slices of them."""

    async def count(self) -> int: ...

    async def fetch(self, offset: int, limit: int) -> list[T]: ...

    async def fetch_all(self) -> list[T]: ...


def total_pages_for(total_count: int, page_size: int) -> int:
    """Number of pages needed for ``total_count`` items, 0 for an empty source."""
    if total_count == 0:
        return 0
    return math.ceil(total_count / page_size)


@dataclass(frozen=True)
class PaginatedList[T]:
    """A page of items plus its position within the full collection.

    Build one with ``paginate`` (in-memory sequences) or
    ``create_paginated_list`` (deferred sources such as a SQL query)::

        # services/member.py
        page = await MemberRepository(db).list_page(page_index, page_size)
        return Success(page.project(MemberDTO.model_validate))

    The router then converts it to the Pydantic version for the response::

        PaginatedResponse[MemberDTO].model_validate(page)
    """

    items: list[T]
    page_index: int
    total_pages: int
    total_count: int

    @classmethod
    def from_page(
        cls, items: list[T], total_count: int, page_index: int, page_size: int
    ) -> "PaginatedList[T]":
        """Build a page, deriving ``total_pages`` from the count and page size."""
        return cls(
            items=list(items),
            page_index=page_index,
            total_pages=total_pages_for(total_count, page_size),
            total_count=total_count,
        )

    @classmethod
    def unpaged(cls, items: list[T]) -> "PaginatedList[T]":
        """Build the single page returned for a page index of 0."""
        return cls.from_page(items, len(items), 1, len(items))

    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_index < self.total_pages

    def project[U](self, mapper: Callable[[T], U]) -> "PaginatedList[U]":
        """Map every item, keeping the page metadata as is."""
        return PaginatedList(
            items=[mapper(item) for item in self.items],
            page_index=self.page_index,
            total_pages=self.total_pages,
            total_count=self.total_count,
        )


def _check_page_request(page_index: int, page_size: int) -> None:
    if page_index < 0:
        raise ValueError(f"page_index must be >= 0, got {page_index}")
    if page_index != UNPAGED and page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")


def paginate[T](
    source: Sequence[T], page_index: int = UNPAGED, page_size: int = DEFAULT_PAGE_SIZE
) -> PaginatedList[T]:
    """Paginate an in-memory sequence."""
    _check_page_request(page_index, page_size)
    if page_index == UNPAGED:
        return PaginatedList.unpaged(list(source))

    offset = (page_index - 1) * page_size
    items = list(source[offset : offset + page_size])
    return PaginatedList.from_page(items, len(source), page_index, page_size)


async def create_paginated_list[T](
    source: PageSource[T], page_index: int = UNPAGED, page_size: int = DEFAULT_PAGE_SIZE
) -> PaginatedList[T]:
    """Paginate a deferred source.

    Unpaged requests read every row with one ``fetch_all``. Paged requests
    issue a count and a single slice read, so the full source is never
    materialized. Errors raised by the source propagate unchanged.
    """
    _check_page_request(page_index, page_size)
    if page_index == UNPAGED:
        return PaginatedList.unpaged(await source.fetch_all())

    total_count = await source.count()
    items = await source.fetch((page_index - 1) * page_size, page_size)
    return PaginatedList.from_page(items, total_count, page_index, page_size)


def project[T, U](page: PaginatedList[T], mapper: Callable[[T], U]) -> PaginatedList[U]:
    """Module-level form of ``PaginatedList.project``."""
    return page.project(mapper)


class PaginatedResponse[T](BaseModel):
    """Pydantic model for paginated HTTP responses.

    ``from_attributes`` is set so ``model_validate`` can read attributes
    directly from a ``PaginatedList`` dataclass. Field names go out in
    camelCase and the navigation flags are included::

        {"items": [...], "pageIndex": 2, "totalPages": 3, "totalCount": 25,
         "hasPreviousPage": true, "hasNextPage": true}
    """

    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True
    )

    items: list[T]
    page_index: int
    total_pages: int
    total_count: int

    @computed_field(alias="hasPreviousPage")  # type: ignore[prop-decorator]
    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 1

    @computed_field(alias="hasNextPage")  # type: ignore[prop-decorator]
    @property
    def has_next_page(self) -> bool:
        return self.page_index < self.total_pages
