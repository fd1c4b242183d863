"""Choice filter."""

from collections.abc import Iterable, Mapping
from typing import Any, Self

from query_composer.filters.base import Filter
from query_composer.filters.rules import FilterKind


class SelectFilter(Filter):
    """Matches one option, or any of several when ``multiple()`` is set."""

    kind = FilterKind.SELECT

    def __init__(self, name: str):
        super().__init__(name)
        self._options: dict[Any, str] = {}
        self._multiple = False
        self._searchable = False

    def options(self, options: Mapping[Any, str] | Iterable[tuple[Any, str]]) -> Self:
        """Set the choices as ``value -> display`` pairs, keeping their order."""
        self._options = dict(options)
        return self

    def multiple(self, condition: bool = True) -> Self:
        self._multiple = condition
        return self

    def searchable(self, condition: bool = True) -> Self:
        self._searchable = condition
        return self

    def is_multiple(self) -> bool:
        return self._multiple

    def _rule_options(self) -> dict[str, Any]:
        return {"multiple": self._multiple}

    def describe(self) -> dict[str, Any]:
        return {
            **super().describe(),
            "options": dict(self._options),
            "multiple": self._multiple,
            "searchable": self._searchable,
        }
