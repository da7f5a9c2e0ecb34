"""Offset pagination input and response metadata."""

import math

from pydantic import Field, field_validator

from querykit.constants import DEFAULT_PAGE
from querykit.settings import get_settings
from querykit.types import QueryKitBaseModel


def _default_limit() -> int:
    return get_settings().pagination.default_limit


class Pagination(QueryKitBaseModel):
    """Page number and page size as sent by API callers (``?page=2&limit=25``).

    Out-of-range values below the minimum are tolerated on decode and fixed
    by :meth:`apply_defaults`; a limit above the configured maximum is
    rejected.
    """

    page: int = Field(default=DEFAULT_PAGE, description="1-based page number")
    limit: int = Field(default_factory=_default_limit, description="Page size")

    @field_validator("limit")
    @classmethod
    def validate_max_limit(cls, v: int) -> int:
        max_limit = get_settings().pagination.max_limit
        if v > max_limit:
            raise ValueError(f"limit must be less than or equal to {max_limit}")
        return v

    def apply_defaults(self) -> None:
        """Reset a page below 1 to 1 and a non-positive limit to the default."""
        if self.page < DEFAULT_PAGE:
            self.page = DEFAULT_PAGE
        if self.limit <= 0:
            self.limit = _default_limit()

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def _total_pages(self, total_items: int) -> int:
        if self.limit <= 0:
            return 0
        return math.ceil(total_items / self.limit)

    def get_meta(self, total_items: int) -> "PaginationMeta":
        """Describe this page within a result set of ``total_items`` rows."""
        return PaginationMeta(
            page=self.page,
            limit=self.limit,
            total_items=total_items,
            total_pages=self._total_pages(total_items),
        )


class PaginationMeta(Pagination):
    """Pagination echoed back alongside a page of results."""

    total_items: int = Field(ge=0)
    total_pages: int = Field(ge=0)
