from typing import Optional

from pydantic import Field

from querykit.common.exceptions import ErrorCode, validation_error
from querykit.settings import get_settings
from querykit.types import QueryKitBaseModel


class Cursor(QueryKitBaseModel):
    """Keyset pagination input (``?after=<token>&limit=50``).

    At most one of ``after`` and ``before`` may be set.
    """

    after: Optional[str] = Field(default=None, description="Return items after this cursor")
    before: Optional[str] = Field(default=None, description="Return items before this cursor")
    limit: Optional[int] = Field(default=None, description="Page size")

    def validate_limits(
        self,
        max_limit: Optional[int] = None,
        default_limit: Optional[int] = None,
    ) -> None:
        """Normalize ``limit`` and check the cursor direction.

        A missing or non-positive limit becomes ``default_limit``; a limit
        above ``max_limit`` is clamped to it. Both default to the
        configured pagination settings.

        Raises:
            QueryKitError: INVALID_CURSOR if both ``after`` and ``before`` are set
        """
        settings = get_settings().pagination
        max_limit = max_limit if max_limit is not None else settings.max_limit
        default_limit = default_limit if default_limit is not None else settings.default_cursor_limit

        if self.limit is None or self.limit <= 0:
            self.limit = default_limit
        if self.limit > max_limit:
            self.limit = max_limit

        if self.after is not None and self.before is not None:
            raise validation_error(
                "Cannot have both 'after' and 'before' set",
                field="cursor",
                error_code=ErrorCode.INVALID_CURSOR,
            )
