"""Query adapter that lets filters compose predicates onto a SQLAlchemy select."""

import operator
from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import Any, Protocol, runtime_checkable

from sqlalchemy import Date, DateTime, Select, String, asc, desc, false, literal, select
from sqlalchemy.sql import ColumnElement

from query_composer.core.exceptions import UnknownColumnError
from query_composer.core.logging_config import get_logger

logger = get_logger(__name__)

# Operator strings accepted by ``where_compare``. Any other operator is never
# rendered into SQL; the comparison becomes ``column = <operator>``.
COMPARISON_OPERATORS: dict[str, Callable[[Any, Any], ColumnElement[bool]]] = {
    "=": operator.eq,
    "==": operator.eq,
    "!=": operator.ne,
    "<>": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "like": lambda column, value: column.like(value),
    "not like": lambda column, value: column.not_like(value),
    "ilike": lambda column, value: column.ilike(value),
    "not ilike": lambda column, value: column.not_ilike(value),
}


@runtime_checkable
class QueryProtocol(Protocol):
    """Operations a query object must offer for filters and sorts to compose onto it."""

    def where_equals(self, column: str, value: Any) -> Any: ...

    def where_compare(self, column: str, op: str, value: Any) -> Any: ...

    def where_between(self, column: str, bounds: Sequence[Any]) -> Any: ...

    def where_like(self, column: str, pattern: str) -> Any: ...

    def where_in(self, column: str, values: Sequence[Any]) -> Any: ...

    def order_by(self, column: str, direction: str = "asc") -> Any: ...


class SelectQuery:
    """
    Mutable wrapper around a SQLAlchemy ``Select``.

    SQLAlchemy statements are immutable, every ``where()`` returns a new
    object. Filters need a single query reference they can narrow in place,
    so this wrapper keeps the current statement and swaps it on each call.

    Example:
        ```python
        query = SelectQuery(Article)
        query.where_equals("status", "published").order_by("views", "desc")
        result = await db.execute(query.statement)
        ```
    """

    def __init__(self, source: Any):
        """
        Initialize the query.

        Args:
            source: ORM model, table, or an existing ``Select`` statement
        """
        self._statement: Select = source if isinstance(source, Select) else select(source)

    @classmethod
    def from_statement(cls, statement: Select) -> "SelectQuery":
        """Wrap an existing statement, keeping its columns, joins and criteria."""
        return cls(statement)

    @property
    def statement(self) -> Select:
        """The composed statement."""
        return self._statement

    def column(self, name: str) -> ColumnElement[Any]:
        """Resolve a column name against the statement's selected columns."""
        columns = self._statement.selected_columns
        if name not in columns:
            raise UnknownColumnError(name, list(columns.keys()))
        return columns[name]

    def where(self, *clauses: ColumnElement[bool]) -> "SelectQuery":
        """Add raw SQLAlchemy criteria."""
        self._statement = self._statement.where(*clauses)
        return self

    def where_equals(self, column: str, value: Any) -> "SelectQuery":
        """Add a ``column = value`` predicate; a list binds its first element."""
        target = self.column(column)
        value = _flatten(value)
        if value is _EMPTY:
            return self.where(false())
        return self.where(target == _coerce(target, value))

    def where_compare(self, column: str, op: str, value: Any) -> "SelectQuery":
        """
        Add a ``column <op> value`` predicate.

        An unrecognised operator is taken as the value of an equality
        comparison, so ``where_compare("published_at", "between", "2024-02-01")``
        becomes ``published_at = 'between'`` and matches nothing.
        """
        comparator = COMPARISON_OPERATORS.get(op.strip().lower()) if isinstance(op, str) else None
        if comparator is None:
            logger.debug("unknown_compare_operator", column=column, operator=op)
            return self.where_equals(column, op)
        target = self.column(column)
        value = _flatten(value)
        if value is _EMPTY:
            return self.where(false())
        return self.where(comparator(target, _coerce(target, value)))

    def where_between(self, column: str, bounds: Sequence[Any]) -> "SelectQuery":
        """Add an inclusive ``column BETWEEN low AND high`` predicate."""
        target = self.column(column)
        low, high = bounds
        return self.where(target.between(_coerce(target, low), _coerce(target, high)))

    def where_like(self, column: str, pattern: str) -> "SelectQuery":
        """Add a ``column LIKE pattern`` predicate; wildcards are the caller's."""
        return self.where(self.column(column).like(pattern))

    def where_in(self, column: str, values: Sequence[Any]) -> "SelectQuery":
        """Add a ``column IN (values)`` predicate."""
        target = self.column(column)
        return self.where(target.in_([_coerce(target, value) for value in values]))

    def order_by(self, column: str, direction: str = "asc") -> "SelectQuery":
        """Append an ordering clause; anything but ``desc`` sorts ascending."""
        target = self.column(column)
        ordering = desc(target) if str(direction).lower() == "desc" else asc(target)
        self._statement = self._statement.order_by(ordering)
        return self


_EMPTY = object()


def _flatten(value: Any) -> Any:
    """Reduce a (possibly nested) list or tuple to its first scalar."""
    while isinstance(value, (list, tuple)):
        if not value:
            return _EMPTY
        value = value[0]
    return value


def _coerce(column: ColumnElement[Any], value: Any) -> Any:
    """
    Parse ISO-8601 strings bound to date/datetime columns.

    Strings that do not parse are bound as plain text, out of reach of the
    date bind processor; the comparison then simply matches nothing.
    """
    if not isinstance(value, str) or not isinstance(column.type, (Date, DateTime)):
        return value
    try:
        if isinstance(column.type, DateTime):
            return datetime.fromisoformat(value)
        try:
            return date.fromisoformat(value)
        except ValueError:
            return datetime.fromisoformat(value).date()
    except ValueError:
        return literal(value, String())
