from querykit.__version__ import __version__

from querykit.query_builder import (
    RenderedStatement,
    StatementBuilder,
    resolve_operator,
)
from querykit.constants import Operator, SortOrder

from querykit.query import (
    Cursor,
    Pagination,
    PaginationMeta,
    SearchPayload,
    SearchResult,
    Sorting,
)
from querykit.types import DateRange

from querykit.common.exceptions import (
    QueryKitError,
    ErrorCode,
    conflict_error,
    is_unique_violation,
    resource_not_found_error,
)


__all__ = [
    "__version__",

    "StatementBuilder",
    "RenderedStatement",
    "resolve_operator",
    "Operator",
    "SortOrder",

    "Pagination",
    "PaginationMeta",
    "Sorting",
    "Cursor",
    "SearchPayload",
    "SearchResult",
    "DateRange",

    # Exceptions (public API)
    "QueryKitError",
    "ErrorCode",
    "resource_not_found_error",
    "conflict_error",
    "is_unique_violation",
]
