"""Pagination utilities for composed queries."""

from math import ceil
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from query_composer.composer import QueryComposer
from query_composer.core.config import settings
from query_composer.db.query import SelectQuery

T = TypeVar("T")


class PageParams(BaseModel):
    """Page parameters for pagination."""

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=settings.DEFAULT_PER_PAGE, ge=1)

    @property
    def offset(self) -> int:
        """Calculate offset for database query."""
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Get limit for database query."""
        return self.page_size


class PageResponse(BaseModel, Generic[T]):
    """Generic paginated response."""

    items: list[T]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def create(
        cls, items: list[T], total: int, page: int, page_size: int
    ) -> "PageResponse[T]":
        """Create paginated response."""
        total_pages = ceil(total / page_size) if page_size > 0 else 0

        return cls(
            items=items,
            total=total,
            page=page,
            page_size=page_size,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


async def paginate(
    db: AsyncSession,
    query: SelectQuery,
    composer: QueryComposer,
    page: int = 1,
) -> PageResponse[Any]:
    """
    Execute a composed query one page at a time.

    The composer's ``per_page`` (capped at ``MAX_PER_PAGE``) sets the page
    size. An unpaginated composer returns every row as a single page.
    Items are the first column of each row, i.e. the ORM entity for
    ``SelectQuery(Model)``.

    Args:
        db: Database session
        query: Query the composer has already been applied to
        composer: Composer holding the pagination settings
        page: 1-based page number; lower values are treated as 1

    Returns:
        Page of results with navigation metadata
    """
    statement = query.statement
    count_statement = select(func.count()).select_from(statement.order_by(None).subquery())
    total = (await db.execute(count_statement)).scalar_one()

    if composer.is_paginated():
        params = PageParams(
            page=max(page, 1),
            page_size=settings.clamp_per_page(composer.get_per_page()),
        )
        statement = statement.offset(params.offset).limit(params.limit)
    else:
        params = PageParams(page=1, page_size=max(total, 1))

    result = await db.execute(statement)
    items = list(result.scalars().all())

    return PageResponse.create(
        items=items,
        total=total,
        page=params.page,
        page_size=params.page_size,
    )
