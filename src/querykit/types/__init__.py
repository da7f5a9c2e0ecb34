from .base import QueryKitBaseModel
from .ranges import DateRange

__all__ = [
    "QueryKitBaseModel",
    "DateRange",
]
