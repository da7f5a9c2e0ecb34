"""Query input models decoded from API requests.

These models carry what a caller asked for (page, sort, cursor, filters)
and hand it to :class:`querykit.query_builder.StatementBuilder`.
"""

from querykit.query.cursor import Cursor
from querykit.query.pagination import Pagination, PaginationMeta
from querykit.query.search import SearchPayload, SearchResult
from querykit.query.sorting import Sorting

__all__ = [
    "Pagination",
    "PaginationMeta",
    "Sorting",
    "Cursor",
    "SearchPayload",
    "SearchResult",
]
