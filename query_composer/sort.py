"""Sort definitions."""

from typing import Any, Self

from query_composer.utils.text import headline, require_text


class Sort:
    """A named, directional ordering option offered to clients."""

    def __init__(self, name: str, column: str | None = None):
        """
        Initialize sort.

        Args:
            name: Identifier clients use to pick this sort
            column: Column to order by (defaults to the name)

        Raises:
            ConfigurationError: If the name or column is empty
        """
        self._name = require_text(name, "name", owner="Sort")
        self._column = require_text(column, "column", owner="Sort") if column is not None else name
        self._label: str | None = None
        self._default_direction = "asc"
        self._visible = True

    @classmethod
    def make(cls, name: str, column: str | None = None) -> Self:
        return cls(name, column)

    def label(self, label: str) -> Self:
        self._label = require_text(label, "label", owner="Sort")
        return self

    def column(self, column: str) -> Self:
        self._column = require_text(column, "column", owner="Sort")
        return self

    def default_direction(self, direction: str) -> Self:
        self._default_direction = direction
        return self

    def visible(self, condition: bool = True) -> Self:
        self._visible = condition
        return self

    def get_name(self) -> str:
        return self._name

    def get_column(self) -> str:
        return self._column

    def get_label(self) -> str:
        return self._label or headline(self._name) or self._name

    def get_default_direction(self) -> str:
        return self._default_direction

    def describe(self) -> dict[str, Any]:
        """Serialize the sort for a client UI."""
        return {
            "name": self._name,
            "label": self.get_label(),
            "column": self._column,
            "defaultDirection": self._default_direction,
            "visible": self._visible,
        }

    def __repr__(self) -> str:
        return f"Sort(name={self._name!r}, column={self._column!r})"
