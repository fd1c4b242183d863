"""Date comparison filter."""

from typing import Any, Self

from query_composer.filters.base import Filter
from query_composer.filters.rules import FilterKind


class DateFilter(Filter):
    """
    Compares a date column against the submitted value.

    The operator defaults to ``=``. With ``between()`` a two element
    list is applied as an inclusive range; any other shape falls back to
    a plain comparison using the operator verbatim.
    """

    kind = FilterKind.DATE

    def __init__(self, name: str):
        super().__init__(name)
        self._operator = "="
        self._min_date: str | None = None
        self._max_date: str | None = None
        self._with_time = False

    def operator(self, operator: str) -> Self:
        self._operator = operator
        return self

    def before(self) -> Self:
        return self.operator("<")

    def after(self) -> Self:
        return self.operator(">")

    def between(self) -> Self:
        return self.operator("between")

    def min_date(self, date: str) -> Self:
        self._min_date = date
        return self

    def max_date(self, date: str) -> Self:
        self._max_date = date
        return self

    def with_time(self, condition: bool = True) -> Self:
        self._with_time = condition
        return self

    def get_operator(self) -> str:
        return self._operator

    def _rule_options(self) -> dict[str, Any]:
        return {"operator": self._operator}

    def describe(self) -> dict[str, Any]:
        return {
            **super().describe(),
            "operator": self._operator,
            "minDate": self._min_date,
            "maxDate": self._max_date,
            "withTime": self._with_time,
        }
