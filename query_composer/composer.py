"""Composes configured filters and sorts onto a query."""

from collections.abc import Iterable, Mapping
from typing import Any, Self, TypeVar

from query_composer.core.config import settings
from query_composer.core.exceptions import ConfigurationError
from query_composer.core.logging_config import get_logger
from query_composer.db.query import QueryProtocol
from query_composer.filters.base import Filter
from query_composer.sort import Sort

logger = get_logger(__name__)

QueryT = TypeVar("QueryT", bound=QueryProtocol)


class QueryComposer:
    """
    Holds filter and sort definitions plus the values submitted for them.

    ``apply()`` narrows a borrowed query in place; ``describe()`` produces
    the plain structure a client needs to render the filter/sort UI.

    Example:
        ```python
        composer = (
            QueryComposer()
            .filters([SelectFilter.make("status"), BooleanFilter.make("is_featured")])
            .sorts([Sort.make("views").default_direction("desc")])
            .apply_filters({"status": "published", "is_featured": "true"})
            .sort_by("views", "desc")
        )
        query = composer.apply(SelectQuery(Article))
        ```
    """

    def __init__(self) -> None:
        self._filters: list[Filter] = []
        self._sorts: list[Sort] = []
        self._filter_values: dict[str, Any] = {}
        self._search: str | None = None
        self._sort_column: str | None = None
        self._sort_direction: str | None = "asc"
        self._per_page = settings.DEFAULT_PER_PAGE
        self._paginated = True

    # Configuration

    def filters(self, filters: Iterable[Filter]) -> Self:
        """Replace the filter definitions."""
        self._filters = list(filters)
        return self

    def add_filter(self, filter_: Filter) -> Self:
        self._filters.append(filter_)
        return self

    def sorts(self, sorts: Iterable[Sort]) -> Self:
        """Replace the sort definitions."""
        self._sorts = list(sorts)
        return self

    def add_sort(self, sort: Sort) -> Self:
        self._sorts.append(sort)
        return self

    def apply_filters(self, values: Mapping[str, Any]) -> Self:
        """Replace the submitted values, keyed by filter name."""
        self._filter_values = dict(values)
        return self

    def search(self, search: str | None) -> Self:
        self._search = search
        return self

    def sort_by(self, column: str | None, direction: str | None = "asc") -> Self:
        self._sort_column = column
        self._sort_direction = direction
        return self

    def per_page(self, per_page: int) -> Self:
        if per_page < 1:
            raise ConfigurationError("per_page must be at least 1", setting="per_page")
        self._per_page = per_page
        return self

    def paginated(self, condition: bool = True) -> Self:
        self._paginated = condition
        return self

    # Accessors

    def get_filters(self) -> list[Filter]:
        return list(self._filters)

    def get_sorts(self) -> list[Sort]:
        return list(self._sorts)

    def find_sort(self, name: str) -> Sort | None:
        """Return the configured sort called ``name``, if any."""
        return next((sort for sort in self._sorts if sort.get_name() == name), None)

    def get_filter_values(self) -> dict[str, Any]:
        return dict(self._filter_values)

    def get_per_page(self) -> int:
        return self._per_page

    def is_paginated(self) -> bool:
        return self._paginated

    # Application

    def apply(self, query: QueryT) -> QueryT:
        """
        Apply filters, search and ordering to ``query``.

        Filters run in configuration order. A filter is skipped only when
        its submitted value is missing, ``None`` or ``""``; values such as
        ``False``, ``0`` or ``[]`` are applied.

        Returns:
            The same query object, for chaining
        """
        for filter_ in self._filters:
            name = filter_.get_name()
            value = self._filter_values.get(name)
            if value is None or (isinstance(value, str) and value == ""):
                logger.debug("filter_skipped", filter=name)
                continue
            filter_.apply(query, value)
            logger.debug(
                "filter_applied",
                filter=name,
                column=filter_.get_column(),
                custom=filter_.has_predicate(),
            )

        if self._search:
            logger.debug("search_requested", search=self._search)
            self.apply_search(query)

        if self._sort_column is not None:
            direction = self._sort_direction or "asc"
            query.order_by(self._sort_column, direction)
            logger.debug("sort_applied", column=self._sort_column, direction=direction)

        return query

    def apply_search(self, query: QueryProtocol) -> None:
        """Hook for keyword search; subclasses decide which columns to match."""

    # Serialization

    def describe(self) -> dict[str, Any]:
        """Serialize the composer state for a client UI."""
        return {
            "filters": [filter_.describe() for filter_ in self._filters],
            "sorts": [sort.describe() for sort in self._sorts],
            "filterValues": dict(self._filter_values),
            "search": self._search,
            "sortBy": self._sort_column,
            "sortDirection": self._sort_direction,
            "perPage": self._per_page,
            "paginated": self._paginated,
        }
