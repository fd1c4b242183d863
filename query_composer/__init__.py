"""
query-composer: declarative filters and sorts for SQLAlchemy queries.
"""

from query_composer.composer import QueryComposer
from query_composer.core.exceptions import (
    ConfigurationError,
    QueryComposerException,
    UnknownColumnError,
)
from query_composer.db.query import QueryProtocol, SelectQuery
from query_composer.filters import (
    BooleanFilter,
    DateFilter,
    Filter,
    FilterKind,
    SelectFilter,
    TextFilter,
)
from query_composer.sort import Sort

__version__ = "0.1.0"

__all__ = [
    "BooleanFilter",
    "ConfigurationError",
    "DateFilter",
    "Filter",
    "FilterKind",
    "QueryComposer",
    "QueryComposerException",
    "QueryProtocol",
    "SelectFilter",
    "SelectQuery",
    "Sort",
    "TextFilter",
    "UnknownColumnError",
    "__version__",
]
