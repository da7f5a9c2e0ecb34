from typing import Iterable

from pydantic import Field

from querykit.common.exceptions import ErrorCode, validation_error
from querykit.constants import SortOrder
from querykit.types import QueryKitBaseModel


class Sorting(QueryKitBaseModel):
    """Sort field and direction as sent by API callers.

    An empty ``field`` means no sorting. ``order`` is ``"asc"``, ``"desc"``
    or empty (ascending).
    """

    field: str = Field(default="", description="Column to sort on, e.g. created_at")
    order: str = Field(default="", description="asc or desc")

    def validate_fields(self, allowed: Iterable[str]) -> None:
        """Check the sort against the columns a resource exposes.

        Lowercases ``field`` and ``order`` in place when valid.

        Args:
            allowed: Sortable column names (lowercase)

        Raises:
            QueryKitError: INVALID_SORT for an unknown field or direction
        """
        field = self.field.lower()
        order = self.order.lower()

        if not field:
            return

        if field not in set(allowed):
            raise validation_error(
                f"invalid sort field: {self.field}",
                field="sort.field",
                value=self.field,
                error_code=ErrorCode.INVALID_SORT,
            )

        if order and order not in (SortOrder.ASC.value, SortOrder.DESC.value):
            raise validation_error(
                f"invalid sort order: {self.order}",
                field="sort.order",
                value=self.order,
                error_code=ErrorCode.INVALID_SORT,
            )

        self.field = field
        self.order = order
