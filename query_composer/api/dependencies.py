"""FastAPI dependencies that read listing parameters from the query string."""

import re
from collections.abc import Iterable
from typing import Any

from fastapi import Request
from pydantic import BaseModel, Field

from query_composer.composer import QueryComposer
from query_composer.core.config import settings
from query_composer.core.logging_config import get_logger

logger = get_logger(__name__)

# Matches ``filter[name]`` and ``filter[name][]``
_BRACKET_KEY = re.compile(r"^(?P<param>[^\[\]]+)\[(?P<name>[^\[\]]+)\](?P<many>\[\])?$")


class ListingParams(BaseModel):
    """Raw listing parameters submitted by a client."""

    filters: dict[str, Any] = Field(default_factory=dict)
    search: str | None = None
    sort: str | None = None
    direction: str | None = None
    page: int = 1
    per_page: int | None = None


def parse_listing_params(items: Iterable[tuple[str, str]]) -> ListingParams:
    """
    Build listing parameters from query string pairs.

    ``filter[status]=draft`` gives a scalar value, repeated
    ``filter[tags][]=a&filter[tags][]=b`` gives a list. Unparseable page
    numbers fall back to their defaults.

    Args:
        items: Key/value pairs in submission order

    Returns:
        Parsed listing parameters
    """
    filters: dict[str, Any] = {}
    values: dict[str, Any] = {}

    for key, value in items:
        match = _BRACKET_KEY.match(key)
        if match and match["param"] == settings.FILTER_PARAM:
            name = match["name"]
            if match["many"]:
                current = filters.get(name)
                if not isinstance(current, list):
                    current = filters[name] = []
                current.append(value)
            else:
                filters[name] = value
        elif key == settings.SEARCH_PARAM:
            values["search"] = value
        elif key == settings.SORT_PARAM:
            values["sort"] = value or None
        elif key == settings.DIRECTION_PARAM:
            values["direction"] = value or None
        elif key == settings.PAGE_PARAM:
            values["page"] = max(_to_int(value, 1), 1)
        elif key == settings.PER_PAGE_PARAM:
            values["per_page"] = _to_int(value, None)

    return ListingParams(filters=filters, **values)


def get_listing_params(request: Request) -> ListingParams:
    """
    Dependency for reading listing parameters from the request.

    Example:
        ```python
        @router.get("/articles")
        async def list_articles(params: Annotated[ListingParams, Depends(get_listing_params)]):
            ...
        ```
    """
    return parse_listing_params(request.query_params.multi_items())


def bind_listing_params(composer: QueryComposer, params: ListingParams) -> QueryComposer:
    """
    Copy client listing parameters onto a composer.

    The sort is only honoured when it names a configured ``Sort``; it is
    translated to that sort's column, and an invalid direction falls back
    to the sort's default direction.

    Returns:
        The same composer, for chaining
    """
    composer.apply_filters(params.filters).search(params.search)

    if params.sort is not None:
        sort = composer.find_sort(params.sort)
        if sort is None:
            logger.debug("unknown_sort_ignored", sort=params.sort)
        else:
            direction = (params.direction or "").lower()
            if direction not in ("asc", "desc"):
                direction = sort.get_default_direction()
            composer.sort_by(sort.get_column(), direction)

    if params.per_page is not None:
        composer.per_page(settings.clamp_per_page(params.per_page))

    return composer


def _to_int(value: str, default: Any) -> Any:
    try:
        return int(value)
    except ValueError:
        return default
