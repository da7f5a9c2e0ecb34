"""Pagination configuration settings.

Defaults applied by the query input models when a caller leaves the page
size unset, and the upper bound enforced on caller supplied sizes.
"""

from pydantic import BaseModel, Field, model_validator

from querykit.constants import DEFAULT_CURSOR_LIMIT, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT


class PaginationSettings(BaseModel):
    """Page size defaults for offset and cursor pagination."""

    default_limit: int = Field(
        default=DEFAULT_PAGE_LIMIT,
        ge=1,
        description="Page size used when a request does not specify one (or specifies <= 0)",
    )
    max_limit: int = Field(
        default=MAX_PAGE_LIMIT,
        ge=1,
        description="Largest page size a request may ask for",
    )
    default_cursor_limit: int = Field(
        default=DEFAULT_CURSOR_LIMIT,
        ge=1,
        description="Page size used for cursor pagination when none is given",
    )

    @model_validator(mode="after")
    def validate_limits(self) -> "PaginationSettings":
        if self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) must not exceed max_limit ({self.max_limit})"
            )
        if self.default_cursor_limit > self.max_limit:
            raise ValueError(
                f"default_cursor_limit ({self.default_cursor_limit}) must not exceed max_limit ({self.max_limit})"
            )
        return self
