"""Search request and response envelopes for list endpoints.

``SearchPayload`` bundles resource specific filters with sorting and
pagination; ``SearchResult`` pairs a page of items with its pagination
metadata.

Example:
    >>> payload = SearchPayload[UserFilters].model_validate(body)
    >>> payload.init(allowed_fields=["name", "created_at"])
    >>> builder = StatementBuilder("SELECT id, name FROM users")
    >>> builder.compare_filter("active", "eq", payload.filters.active)
    >>> payload.apply(builder)
    >>> sql, args = builder.build()
    >>> rows = await conn.fetch(sql, *args)
    >>> count_sql, count_args = builder.count()
    >>> total = await conn.fetchval(count_sql, *count_args)
    >>> SearchResult[list](items=rows, pagination=payload.pagination.get_meta(total))
"""

from typing import FrozenSet, Generic, Iterable, Optional, TypeVar

from pydantic import Field, PrivateAttr

from querykit.common.exceptions import precondition_error
from querykit.query.pagination import Pagination, PaginationMeta
from querykit.query.sorting import Sorting
from querykit.query_builder import StatementBuilder
from querykit.types import QueryKitBaseModel

F = TypeVar("F")
T = TypeVar("T")


class SearchPayload(QueryKitBaseModel, Generic[F]):
    """Input payload to search any resource; ``F`` is the filters model."""

    filters: Optional[F] = None
    sort: Sorting = Field(default_factory=Sorting)
    pagination: Pagination = Field(default_factory=Pagination)

    _allowed_fields: Optional[FrozenSet[str]] = PrivateAttr(default=None)

    def init(self, allowed_fields: Iterable[str]) -> None:
        """Apply pagination defaults and validate the sort field.

        Raises:
            QueryKitError: INVALID_SORT if the sort is not allowed
        """
        allowed = frozenset(allowed_fields)
        self.pagination.apply_defaults()
        self.sort.validate_fields(allowed)
        self._allowed_fields = allowed

    def apply(self, builder: StatementBuilder) -> StatementBuilder:
        """Add this payload's ORDER BY, LIMIT and OFFSET to ``builder``.

        The sort field ends up in SQL text, so it is checked again against
        the fields given to :meth:`init`.

        Raises:
            QueryKitError: PRECONDITION_FAILED if :meth:`init` was not called,
                INVALID_SORT if the sort was changed to a field not allowed
        """
        if self._allowed_fields is None:
            raise precondition_error("SearchPayload.init() must be called before apply()")
        self.sort.validate_fields(self._allowed_fields)
        return builder.sort(self.sort.field, self.sort.order).paginate(
            self.pagination.limit, self.pagination.offset
        )


class SearchResult(QueryKitBaseModel, Generic[T]):
    """One page of a resource search."""

    items: T
    pagination: PaginationMeta
