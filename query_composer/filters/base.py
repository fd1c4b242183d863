"""Base filter shared by every filter kind."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, Self

from query_composer.db.query import QueryProtocol
from query_composer.filters.rules import FilterKind, apply_default
from query_composer.utils.text import headline, require_text

Predicate = Callable[[Any, Any], None]


class Filter(ABC):
    """
    A named rule that turns one submitted value into a query predicate.

    Filters are configured fluently and looked up by ``name``; the
    predicate targets ``column``, which defaults to the name.

    Example:
        ```python
        SelectFilter.make("status").options({"draft": "Draft"}).multiple()
        ```
    """

    kind: ClassVar[FilterKind]

    def __init__(self, name: str):
        """
        Initialize filter.

        Args:
            name: Key under which the submitted value is looked up

        Raises:
            ConfigurationError: If the name is empty
        """
        self._name = require_text(name, "name")
        self._label: str | None = None
        self._column: str | None = None
        self._predicate: Predicate | None = None
        self._default: Any = None
        self._visible = True
        self._placeholder: str | None = None

    @classmethod
    def make(cls, name: str) -> Self:
        """Create a filter named ``name``."""
        return cls(name)

    def label(self, label: str) -> Self:
        self._label = require_text(label, "label")
        return self

    def column(self, column: str) -> Self:
        self._column = require_text(column, "column")
        return self

    def predicate(self, callback: Predicate) -> Self:
        """Replace the default rule with ``callback(query, value)``."""
        self._predicate = callback
        return self

    def default(self, value: Any) -> Self:
        self._default = value
        return self

    def visible(self, condition: bool = True) -> Self:
        self._visible = condition
        return self

    def placeholder(self, placeholder: str) -> Self:
        self._placeholder = placeholder
        return self

    def get_name(self) -> str:
        return self._name

    def get_label(self) -> str:
        return self._label or headline(self._name) or self._name

    def get_column(self) -> str:
        return self._column or self._name

    def has_predicate(self) -> bool:
        return self._predicate is not None

    def apply(self, query: QueryProtocol, value: Any) -> None:
        """
        Narrow ``query`` with ``value``.

        A configured predicate replaces the default rule entirely.
        """
        if self._predicate is not None:
            self._predicate(query, value)
            return
        apply_default(self.kind, query, self.get_column(), value, self._rule_options())

    @abstractmethod
    def _rule_options(self) -> dict[str, Any]:
        """Kind-specific settings the default rule needs."""

    def describe(self) -> dict[str, Any]:
        """Serialize the filter for a client UI."""
        return {
            "type": self.kind.value,
            "name": self._name,
            "label": self.get_label(),
            "column": self.get_column(),
            "default": self._default,
            "visible": self._visible,
            "placeholder": self._placeholder,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, column={self.get_column()!r})"

