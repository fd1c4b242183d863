"""Free text filter."""

from typing import Any, Self

from query_composer.filters.base import Filter
from query_composer.filters.rules import FilterKind


class TextFilter(Filter):
    """
    Matches a text column with LIKE patterns or a literal comparison.

    ``case_sensitive`` is published to clients only; the default rule
    leaves case folding to the database collation.
    """

    kind = FilterKind.TEXT

    def __init__(self, name: str):
        super().__init__(name)
        self._operator = "like"
        self._case_sensitive = False

    def operator(self, operator: str) -> Self:
        self._operator = operator
        return self

    def exact(self) -> Self:
        return self.operator("=")

    def contains(self) -> Self:
        return self.operator("like")

    def starts_with(self) -> Self:
        return self.operator("starts_with")

    def ends_with(self) -> Self:
        return self.operator("ends_with")

    def case_sensitive(self, condition: bool = True) -> Self:
        self._case_sensitive = condition
        return self

    def get_operator(self) -> str:
        return self._operator

    def _rule_options(self) -> dict[str, Any]:
        return {"operator": self._operator}

    def describe(self) -> dict[str, Any]:
        return {
            **super().describe(),
            "operator": self._operator,
            "caseSensitive": self._case_sensitive,
        }
