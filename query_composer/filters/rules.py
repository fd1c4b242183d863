"""Default predicate rules for each filter kind.

Rules are plain functions of ``(query, column, value, options)`` so the
operator behaviour can be exercised without building filter objects.
"""

from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError

from query_composer.db.query import QueryProtocol


class FilterKind(str, Enum):
    """Filter variants; the value doubles as the serialized ``type`` tag."""

    BOOLEAN = "BooleanFilter"
    DATE = "DateFilter"
    TEXT = "TextFilter"
    SELECT = "SelectFilter"


# LIKE patterns per text operator. Wildcards in the value are not escaped.
TEXT_PATTERNS: dict[str, str] = {
    "like": "%{value}%",
    "starts_with": "{value}%",
    "ends_with": "%{value}",
}

_BOOL_ADAPTER = TypeAdapter(bool)


def to_bool(value: Any) -> bool:
    """
    Coerce a submitted value to a boolean.

    Accepts booleans, the integers 1/0 and the usual string tokens
    ("true", "false", "yes", "no", "on", "off", "1", "0", ...) in any case.
    Anything else is False.
    """
    if isinstance(value, str):
        value = value.strip()
    try:
        return _BOOL_ADAPTER.validate_python(value)
    except ValidationError:
        return False


def apply_boolean(query: QueryProtocol, column: str, value: Any) -> None:
    query.where_equals(column, to_bool(value))


def apply_date(query: QueryProtocol, column: str, value: Any, operator: str) -> None:
    if operator == "between" and isinstance(value, (list, tuple)) and len(value) == 2:
        query.where_between(column, [value[0], value[1]])
    else:
        query.where_compare(column, operator, value)


def apply_text(query: QueryProtocol, column: str, value: Any, operator: str) -> None:
    pattern = TEXT_PATTERNS.get(operator)
    if pattern is None:
        query.where_compare(column, operator, value)
    else:
        query.where_like(column, pattern.format(value=value))


def apply_select(query: QueryProtocol, column: str, value: Any, multiple: bool) -> None:
    if multiple and isinstance(value, (list, tuple)):
        query.where_in(column, list(value))
    else:
        query.where_equals(column, value)


def apply_default(
    kind: FilterKind,
    query: QueryProtocol,
    column: str,
    value: Any,
    options: dict[str, Any],
) -> None:
    """Run the default rule registered for ``kind``."""
    match kind:
        case FilterKind.BOOLEAN:
            apply_boolean(query, column, value)
        case FilterKind.DATE:
            apply_date(query, column, value, options["operator"])
        case FilterKind.TEXT:
            apply_text(query, column, value, options["operator"])
        case FilterKind.SELECT:
            apply_select(query, column, value, options["multiple"])
