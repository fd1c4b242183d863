"""Filter definitions."""

from query_composer.filters.base import Filter, Predicate
from query_composer.filters.boolean import BooleanFilter
from query_composer.filters.date import DateFilter
from query_composer.filters.rules import TEXT_PATTERNS, FilterKind, to_bool
from query_composer.filters.select import SelectFilter
from query_composer.filters.text import TextFilter

__all__ = [
    "BooleanFilter",
    "DateFilter",
    "Filter",
    "FilterKind",
    "Predicate",
    "SelectFilter",
    "TEXT_PATTERNS",
    "TextFilter",
    "to_bool",
]
