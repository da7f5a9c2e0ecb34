from datetime import datetime

from pydantic import Field, model_validator

from .base import QueryKitBaseModel


class DateRange(QueryKitBaseModel):
    """Inclusive datetime window, decoded from ``{"from": ..., "to": ...}``.

    Feed both ends to :meth:`StatementBuilder.between_filter`.
    """

    start: datetime = Field(alias="from")
    end: datetime = Field(alias="to")

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.start > self.end:
            raise ValueError("'from' must not be later than 'to'")
        return self
