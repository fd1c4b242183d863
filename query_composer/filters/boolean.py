"""Yes/no filter."""

from typing import Any, Self

from query_composer.filters.base import Filter
from query_composer.filters.rules import FilterKind


class BooleanFilter(Filter):
    """Filters a boolean column; submitted values are coerced permissively."""

    kind = FilterKind.BOOLEAN

    def __init__(self, name: str):
        super().__init__(name)
        self._true_label: str | None = None
        self._false_label: str | None = None

    def true_label(self, label: str) -> Self:
        self._true_label = label
        return self

    def false_label(self, label: str) -> Self:
        self._false_label = label
        return self

    def _rule_options(self) -> dict[str, Any]:
        return {}

    def describe(self) -> dict[str, Any]:
        return {
            **super().describe(),
            "trueLabel": self._true_label or "Yes",
            "falseLabel": self._false_label or "No",
        }
